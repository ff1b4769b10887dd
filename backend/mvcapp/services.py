"""Business logic services.

`StudentService` is the boundary callers use. It is intentionally thin:
every operation delegates to the injected `StudentDao`, translating the
id-based service calls into the entity-based DAO calls, and adds the
`is_student_unique` check.
"""

from typing import List, Optional, Union

from sqlmodel import Session

from . import models, repositories
from .config import settings
from .exceptions import StudentNotFoundError
from .logging_config import get_logger, log_event
from .schemas import StudentIn

logger = get_logger("service")

StudentLike = Union[models.Student, StudentIn]


def _to_entity(student: StudentLike, student_id: Optional[int] = None) -> models.Student:
    """Return a transient `Student` built from `student`.

    When `student_id` is given it replaces whatever id the payload carried.
    """
    if isinstance(student, StudentIn):
        entity = student.to_model()
    else:
        entity = models.Student(
            id=student.id,
            name=student.name,
            email=student.email,
            course=student.course,
        )
    if student_id is not None:
        entity.id = student_id
    return entity


class StudentService:
    """CRUD operations for students plus the uniqueness check."""
    def __init__(self, dao: repositories.StudentDao):
        self.dao = dao

    def get_student(self, student_id: int) -> models.Student:
        """Return the student with `student_id`.

        Raises `StudentNotFoundError` if it does not exist.
        """
        student = self.dao.get_student(student_id)
        if student is None:
            raise StudentNotFoundError(student_id)
        return student

    def save_student(self, student: StudentLike) -> int:
        """Persist a new student and return the assigned id.

        `StudentIn` payloads are converted to entities first; plain
        `Student` entities are handed to the DAO as-is so the caller
        sees the assigned id on its own object.
        """
        entity = student.to_model() if isinstance(student, StudentIn) else student
        student_id = self.dao.save_student(entity)
        log_event(logger, "student_created", id=student_id)
        return student_id

    def list_all_students(self) -> List[models.Student]:
        return self.dao.list_all_students()

    def update(self, student_id: int, student: StudentLike) -> None:
        """Overwrite the student `student_id` with the fields of `student`."""
        self.dao.update_student(_to_entity(student, student_id))
        log_event(logger, "student_changed", id=student_id)

    def delete(self, student_id: int) -> None:
        student = self.get_student(student_id)
        self.dao.delete_student(student)
        log_event(logger, "student_removed", id=student_id)

    def is_student_unique(self, student_id: Optional[int]) -> bool:
        """Return True if no stored record holds `student_id`.

        A `None` id always counts as unique since the store will assign
        a fresh one. The check hits the store on every call; a later
        `save_student` can still raise `StudentConflictError` if another
        writer gets there first.
        """
        if student_id is None:
            return True
        return not self.dao.exists(student_id)


def build_student_service(session: Session = None) -> StudentService:
    """Return a `StudentService` over the store selected by `STUDENT_STORE`.

    The SQL store needs an open `session`; the in-memory store ignores it.
    """
    if settings.STUDENT_STORE == "memory":
        return StudentService(repositories.InMemoryStudentDao())
    if session is None:
        raise ValueError("a database session is required for the sql student store")
    return StudentService(repositories.SqlStudentDao(session))
