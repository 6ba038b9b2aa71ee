# tutorhub/schemas/assignment.py
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from tutorhub.models.enums import AssignmentStatus


class AssignmentCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    student_id: int
    lesson_id: int | None = None
    due_date: date


class AssignmentUpdate(BaseModel):
    """Teacher grading: status, grade and feedback are replaced together."""
    status: AssignmentStatus
    grade: float | None = Field(default=None, ge=0, le=100)
    feedback: str | None = None

    model_config = ConfigDict(use_enum_values=True)


class AssignmentPublic(BaseModel):
    id: int
    title: str
    description: str | None = None
    student_id: int
    lesson_id: int | None = None
    due_date: date | None = None
    status: str
    grade: float | None = None
    feedback: str | None = None
    created_at: datetime | None = None

    # joined for display
    student_name: str | None = None
    lesson_title: str | None = None

    # derived, never stored
    is_overdue: bool = False
