# school/services/student_service.py
import logging
import threading
from typing import Callable, List, Optional
from ..config import settings
from ..database.models.faculty import Faculty
from ..database.models.student import Student
from ..database.repositories.student_repository import StudentRepository
from .concurrency import GroupRunner
from .exceptions import StudentNotFoundError

logger = logging.getLogger(__name__)

class StudentService:
    """CRUD, aggregates and the group print demonstrations for students"""
    
    def __init__(
        self,
        repository: StudentRepository,
        output: Callable[[str], None] = print,
        print_lock: Optional[threading.Lock] = None,
        runner: Optional[GroupRunner] = None
    ):
        self.repository = repository
        self.output = output
        # Shared by every synchronized print of this service
        self._print_lock = print_lock or threading.Lock()
        self.runner = runner or GroupRunner(
            group_size=2,
            group_count=3,
            join_timeout=settings.PRINT_JOIN_TIMEOUT,
            thread_name_prefix="student-print"
        )
    
    # ===== CRUD =====
    
    def add(self, student: Student) -> Student:
        logger.info("Was invoked method to add a new student")
        return self.repository.save(student)
    
    def find(self, student_id: int) -> Student:
        logger.info(f"Was invoked method to find student with id {student_id}")
        student = self.repository.find_by_id(student_id)
        if student is None:
            logger.error(f"There is no student with id = {student_id}")
            raise StudentNotFoundError(student_id)
        return student
    
    def edit(self, student_id: int, student: Student) -> Optional[Student]:
        """
        Overwrite an existing student, the path id wins over student.id
        Returns: the updated student, or None when the id does not exist
        """
        logger.info(f"Was invoked method to edit student with id {student_id}")
        if not self.repository.exists_by_id(student_id):
            logger.warning(f"Attempt to edit a non-existing student with id {student_id}")
            return None
        
        student.id = student_id
        return self.repository.save(student)
    
    def delete(self, student_id: int) -> None:
        logger.info(f"Was invoked method to delete student with id {student_id}")
        self.repository.delete_by_id(student_id)
    
    def list_all(self) -> List[Student]:
        logger.info("Was invoked method to get all students")
        return self.repository.find_all()
    
    # ===== Queries & aggregates =====
    
    def names_starting_with(self, letter: Optional[str] = None) -> List[str]:
        letter = letter or settings.NAME_PREFIX
        return sorted(
            student.name.upper()
            for student in self.list_all()
            if student.name and student.name.startswith(letter)
        )
    
    def average_age(self) -> float:
        """Mean age computed over every loaded student, 0.0 when there are none"""
        ages = [student.age for student in self.list_all()]
        if not ages:
            return 0.0
        return sum(ages) / len(ages)
    
    def average_age_aggregate(self) -> float:
        """Mean age computed by the store"""
        logger.info("Was invoked method to get average age of students")
        average = self.repository.get_average_student_age()
        return average if average is not None else 0.0
    
    def count(self) -> int:
        logger.info("Was invoked method to get total number of students")
        return self.repository.count_all_students()
    
    def by_age_range(self, min_age: int, max_age: int) -> List[Student]:
        logger.info(f"Was invoked method to find students by age range {min_age} - {max_age}")
        return self.repository.find_by_age_between(min_age, max_age)
    
    def last_students(self, limit: Optional[int] = None) -> List[Student]:
        if limit is None:
            limit = settings.LAST_STUDENTS_LIMIT
        logger.info(f"Was invoked method to get last {limit} students")
        return self.repository.find_last_students(limit)
    
    def faculty_of(self, student_id: int) -> Optional[Faculty]:
        logger.info(f"Was invoked method to find faculty of student with id {student_id}")
        return self.find(student_id).faculty
    
    @staticmethod
    def constant_sum(n: int = 1_000_000) -> int:
        """Sum of 1..n via Gauss' formula"""
        return n * (n + 1) // 2
    
    # ===== Group print demonstrations =====
    
    def print_student_name(self, student: Optional[Student]) -> None:
        if student is None:
            logger.warning("Attempted to print a null student")
            return
        self.output(student.name)
    
    def _synchronized_print(self, student: Optional[Student]) -> None:
        with self._print_lock:
            self.print_student_name(student)
    
    def print_parallel(self) -> None:
        """
        Print the first six students: two on the caller thread, then two
        per worker on two workers. Blocks until both workers finish.
        """
        students = self.repository.find_all()
        self.runner.run(students, self.print_student_name, wait_for_workers=True)
    
    def print_synchronized(self) -> None:
        """
        Same split as print_parallel, every print serialized by the service
        lock. Returns without waiting for the workers.
        """
        students = self.repository.find_all()
        self.runner.run(students, self._synchronized_print, wait_for_workers=False)
