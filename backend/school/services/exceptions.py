# school/services/exceptions.py


class NotFoundError(LookupError):
    """A requested record does not exist in the store"""


class StudentNotFoundError(NotFoundError):
    def __init__(self, student_id: int):
        self.student_id = student_id
        super().__init__(f"Student not found: id={student_id}")
