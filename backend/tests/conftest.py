"""
pytest configuration and fixtures.
"""

import os
import threading
from typing import Dict, Generator, List, Optional

# In-memory database for anything importing school.database.session
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from school.database.models import Faculty, Student
from school.database.session import init_db
from school.services.concurrency import GroupRunner
from school.services.student_service import StudentService


class InMemoryStudentRepository:
    """Dict-backed stand-in for StudentRepository."""

    def __init__(self) -> None:
        self._students: Dict[int, Student] = {}
        self._next_id = 1
        self._lock = threading.Lock()
        self.saves = 0
        self.deletes = 0

    def save(self, student: Student) -> Student:
        with self._lock:
            if student.id is None:
                student.id = self._next_id
                self._next_id += 1
            self._students[student.id] = student
            self.saves += 1
            return student

    def find_by_id(self, student_id: int) -> Optional[Student]:
        return self._students.get(student_id)

    def find_all(self) -> List[Student]:
        return [self._students[key] for key in sorted(self._students)]

    def exists_by_id(self, student_id: int) -> bool:
        return student_id in self._students

    def delete_by_id(self, student_id: int) -> None:
        with self._lock:
            self._students.pop(student_id, None)
            self.deletes += 1

    def find_by_age_between(self, min_age: int, max_age: int) -> List[Student]:
        return [s for s in self.find_all() if min_age <= s.age <= max_age]

    def count_all_students(self) -> int:
        return len(self._students)

    def get_average_student_age(self) -> Optional[float]:
        if not self._students:
            return None
        return sum(s.age for s in self._students.values()) / len(self._students)

    def find_last_students(self, limit: int) -> List[Student]:
        return list(reversed(self.find_all()))[:limit]


class OutputRecorder:
    """Thread-safe print replacement remembering which thread printed what."""

    def __init__(self, expected: int = 6) -> None:
        self.lines: List[str] = []
        self.threads: List[str] = []
        self.expected = expected
        self.finished = threading.Event()
        self._lock = threading.Lock()

    def __call__(self, line: str) -> None:
        with self._lock:
            self.lines.append(line)
            self.threads.append(threading.current_thread().name)
            if len(self.lines) >= self.expected:
                self.finished.set()


@pytest.fixture
def repository() -> InMemoryStudentRepository:
    return InMemoryStudentRepository()


@pytest.fixture
def recorder() -> OutputRecorder:
    return OutputRecorder()


@pytest.fixture
def service(repository: InMemoryStudentRepository, recorder: OutputRecorder) -> StudentService:
    return StudentService(
        repository,
        output=recorder,
        runner=GroupRunner(join_timeout=5.0, thread_name_prefix="student-print"),
    )


@pytest.fixture
def add_students(service: StudentService):
    """Persist students given as (name, age) pairs, in order."""
    def _add(*rows) -> List[Student]:
        return [service.add(Student(name=name, age=age)) for name, age in rows]
    return _add


@pytest.fixture
def six_students(add_students) -> List[Student]:
    return add_students(
        ("A", 17), ("B", 18), ("C", 19), ("D", 20), ("E", 21), ("F", 22)
    )


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory) -> Generator[Session, None, None]:
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def gryffindor(db: Session) -> Faculty:
    faculty = Faculty(name="Gryffindor", color="red")
    db.add(faculty)
    db.commit()
    db.refresh(faculty)
    return faculty
