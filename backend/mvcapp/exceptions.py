"""Errors raised by the student repositories and service."""


class StudentError(Exception):
    """Base class for student data errors."""

    def __init__(self, student_id, message: str):
        super().__init__(message)
        self.student_id = student_id


class StudentNotFoundError(StudentError, LookupError):
    """No record holds the requested identifier."""

    def __init__(self, student_id):
        super().__init__(student_id, f"student not found: {student_id}")


class StudentConflictError(StudentError, ValueError):
    """A record with the identifier already exists."""

    def __init__(self, student_id):
        super().__init__(student_id, f"student already exists: {student_id}")
