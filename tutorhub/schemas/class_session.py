# tutorhub/schemas/class_session.py
from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator


class ClassCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    student_id: int
    lesson_id: int | None = None
    scheduled_date: datetime
    duration: int = Field(default=60, gt=0)
    notes: str | None = None

    @field_validator("scheduled_date")
    @classmethod
    def to_naive_utc(cls, value: datetime) -> datetime:
        # stored as naive UTC; naive input is taken to be UTC already
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value


class ClassPublic(BaseModel):
    id: int
    title: str
    student_id: int
    lesson_id: int | None = None
    scheduled_date: datetime
    duration: int
    status: str
    notes: str | None = None
    created_at: datetime | None = None

    student_name: str | None = None
    lesson_title: str | None = None

    is_overdue: bool = False
