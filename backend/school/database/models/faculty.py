# school/database/models/faculty.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from ..base import Base

class Faculty(Base):
    __tablename__ = "faculties"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, unique=True)
    color = Column(String, nullable=True)
    
    # Relationships (read-only from the student side)
    students = relationship("Student", back_populates="faculty")
