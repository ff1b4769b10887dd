"""SQLModel data models.

This module defines the `Student` table. It is the only entity the
backend stores.
"""

from typing import Optional
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Student(SQLModel, table=True):
    """A student record.

    Fields:
    - `id`: primary key, `None` until the record is saved
    - `name`: display name, required
    - `email` / `course`: optional contact and enrolment details
    """
    __tablename__ = "students"
    # never hand out an id that belonged to a deleted record
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True, nullable=False)
    email: Optional[str] = None
    course: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def __repr__(self):
        return f"<Student(id={self.id}, name='{self.name}')>"
