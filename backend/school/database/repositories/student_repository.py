# school/database/repositories/student_repository.py
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from ..models.student import Student

class StudentRepository:
    """Record store for students, bound to one SQLAlchemy session"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def save(self, student: Student) -> Student:
        """
        Insert a new student or overwrite an existing one
        Returns: the persisted student with its id assigned
        """
        if student.id is None:
            self.db.add(student)
            persisted = student
        else:
            # Incoming record may be detached, copy its state onto the stored row
            persisted = self.db.merge(student)
        
        self.db.commit()
        self.db.refresh(persisted)
        
        return persisted
    
    def find_by_id(self, student_id: int) -> Optional[Student]:
        return self.db.get(Student, student_id)
    
    def find_all(self) -> List[Student]:
        return self.db.query(Student).order_by(Student.id).all()
    
    def exists_by_id(self, student_id: int) -> bool:
        return self.db.query(
            self.db.query(Student).filter(Student.id == student_id).exists()
        ).scalar()
    
    def delete_by_id(self, student_id: int) -> None:
        """Delete a student; missing ids are ignored"""
        self.db.query(Student).filter(Student.id == student_id).delete()
        self.db.commit()
    
    def find_by_age_between(self, min_age: int, max_age: int) -> List[Student]:
        return self.db.query(Student).filter(
            Student.age.between(min_age, max_age)
        ).order_by(Student.id).all()
    
    def count_all_students(self) -> int:
        return self.db.query(func.count(Student.id)).scalar()
    
    def get_average_student_age(self) -> Optional[float]:
        """AVG over all ages, None for an empty table"""
        average = self.db.query(func.avg(Student.age)).scalar()
        return float(average) if average is not None else None
    
    def find_last_students(self, limit: int) -> List[Student]:
        """Most recently created students first"""
        return self.db.query(Student).order_by(Student.id.desc()).limit(limit).all()
