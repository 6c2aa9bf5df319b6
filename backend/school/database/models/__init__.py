from .faculty import Faculty
from .student import Student

__all__ = ["Faculty", "Student"]
