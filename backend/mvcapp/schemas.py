"""Pydantic input schemas.

Schemas validate caller-supplied student data before it is turned into
a `Student` entity.
"""

from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from . import models


class StudentIn(BaseModel):
    """Payload for creating or updating a student."""
    id: Optional[int] = Field(default=None, gt=0)
    name: str = Field(min_length=1, max_length=200)
    email: Optional[EmailStr] = None
    course: Optional[str] = Field(default=None, max_length=200)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    @field_validator("email", mode="before")
    @classmethod
    def _blank_email_to_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    def to_model(self) -> models.Student:
        """Build an unsaved `Student` entity from this payload."""
        return models.Student(id=self.id, name=self.name, email=self.email, course=self.course)
