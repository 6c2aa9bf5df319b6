# school/database/models/student.py
from sqlalchemy import Column, Integer, String, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from ..base import Base

class Student(Base):
    __tablename__ = "students"
    __table_args__ = (
        CheckConstraint("age >= 0", name="ck_students_age_non_negative"),
    )
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    age = Column(Integer, nullable=False)
    faculty_id = Column(Integer, ForeignKey("faculties.id"), nullable=True, index=True)
    
    # Relationships
    faculty = relationship("Faculty", back_populates="students")

    def __repr__(self):
        return f"<Student id={self.id} name={self.name!r} age={self.age}>"
