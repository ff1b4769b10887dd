"""Repository (DAO) classes encapsulating student persistence.

`StudentDao` is the contract the service layer depends on. Two adapters
implement it: `SqlStudentDao` over a SQLModel session and
`InMemoryStudentDao` over a lock-protected dict. Both enforce identifier
uniqueness themselves, so a colliding save fails even when a caller
checked `exists` first.
"""

import abc
import threading
from typing import Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from . import models
from .exceptions import StudentConflictError, StudentNotFoundError
from .logging_config import get_logger, log_event

logger = get_logger("dao")


class StudentDao(abc.ABC):
    """CRUD contract for `Student` records."""

    @abc.abstractmethod
    def get_student(self, student_id: int) -> Optional[models.Student]:
        """Return the student with `student_id` or `None` if not found."""

    @abc.abstractmethod
    def save_student(self, student: models.Student) -> int:
        """Persist a new student and return its identifier.

        A store-assigned id is used when `student.id` is `None`. Raises
        `StudentConflictError` if the id is already taken.
        """

    @abc.abstractmethod
    def list_all_students(self) -> List[models.Student]:
        """Return all students ordered by id."""

    @abc.abstractmethod
    def update_student(self, student: models.Student) -> None:
        """Overwrite the stored record matching `student.id`.

        Raises `StudentNotFoundError` when no such record exists.
        """

    @abc.abstractmethod
    def delete_student(self, student: models.Student) -> None:
        """Remove the record matching `student.id`.

        Raises `StudentNotFoundError` when no such record exists.
        """

    def exists(self, student_id: int) -> bool:
        """Return True if a record currently holds `student_id`."""
        return self.get_student(student_id) is not None


def _clone(student: models.Student) -> models.Student:
    return models.Student(
        id=student.id,
        name=student.name,
        email=student.email,
        course=student.course,
        created_at=student.created_at,
    )


class SqlStudentDao(StudentDao):
    """`StudentDao` backed by a SQLModel `Session`. Commits on every write.

    Rows tracked by the session stay private to the adapter; callers only
    ever receive detached copies, so editing a returned student never
    leaks into a later commit.
    """
    def __init__(self, session: Session):
        self.session = session

    def _load(self, student_id: int) -> Optional[models.Student]:
        if student_id is None:
            return None
        return self.session.get(models.Student, student_id, populate_existing=True)

    def get_student(self, student_id: int) -> Optional[models.Student]:
        row = self._load(student_id)
        return _clone(row) if row is not None else None

    def save_student(self, student: models.Student) -> int:
        if self.exists(student.id):
            raise StudentConflictError(student.id)
        row = _clone(student)
        self.session.add(row)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            if student.id is None:
                raise
            # another writer took the id between the check and the commit
            raise StudentConflictError(student.id) from exc
        self.session.refresh(row)
        student.id = row.id
        log_event(logger, "student_saved", id=row.id, store="sql")
        return row.id

    def list_all_students(self) -> List[models.Student]:
        stmt = select(models.Student).order_by(models.Student.id).execution_options(populate_existing=True)
        return [_clone(row) for row in self.session.exec(stmt).all()]

    def update_student(self, student: models.Student) -> None:
        existing = self._load(student.id)
        if existing is None:
            raise StudentNotFoundError(student.id)
        existing.name = student.name
        existing.email = student.email
        existing.course = student.course
        self.session.add(existing)
        self.session.commit()
        log_event(logger, "student_updated", id=student.id, store="sql")

    def delete_student(self, student: models.Student) -> None:
        existing = self._load(student.id)
        if existing is None:
            raise StudentNotFoundError(student.id)
        self.session.delete(existing)
        self.session.commit()
        log_event(logger, "student_deleted", id=student.id, store="sql")

    def exists(self, student_id: int) -> bool:
        if student_id is None:
            return False
        stmt = select(models.Student.id).where(models.Student.id == student_id)
        return self.session.exec(stmt).first() is not None


class InMemoryStudentDao(StudentDao):
    """`StudentDao` over a dict, for tests and throwaway dev runs.

    Records are copied on the way in and out so callers never hold a
    reference to stored state. Ids are never reused after a delete.
    """

    def __init__(self):
        self._rows: Dict[int, models.Student] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def get_student(self, student_id: int) -> Optional[models.Student]:
        with self._lock:
            row = self._rows.get(student_id)
            return _clone(row) if row is not None else None

    def save_student(self, student: models.Student) -> int:
        with self._lock:
            if student.id is None:
                student_id = self._next_id
            elif student.id in self._rows:
                raise StudentConflictError(student.id)
            else:
                student_id = student.id
            self._next_id = max(self._next_id, student_id + 1)
            student.id = student_id
            self._rows[student_id] = _clone(student)
        log_event(logger, "student_saved", id=student_id, store="memory")
        return student_id

    def list_all_students(self) -> List[models.Student]:
        with self._lock:
            return [_clone(self._rows[k]) for k in sorted(self._rows)]

    def update_student(self, student: models.Student) -> None:
        with self._lock:
            existing = self._rows.get(student.id)
            if existing is None:
                raise StudentNotFoundError(student.id)
            updated = _clone(student)
            updated.created_at = existing.created_at
            self._rows[student.id] = updated
        log_event(logger, "student_updated", id=student.id, store="memory")

    def delete_student(self, student: models.Student) -> None:
        with self._lock:
            if self._rows.pop(student.id, None) is None:
                raise StudentNotFoundError(student.id)
        log_event(logger, "student_deleted", id=student.id, store="memory")

    def exists(self, student_id: int) -> bool:
        with self._lock:
            return student_id in self._rows
