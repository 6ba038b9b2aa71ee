# tutorhub/schemas/lesson.py
from datetime import datetime

from pydantic import BaseModel, Field


class LessonBase(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    level: str = Field(min_length=1, max_length=50)
    content: str | None = None
    duration: int = Field(default=60, gt=0)


class LessonCreate(LessonBase):
    pass


class LessonPublic(LessonBase):
    id: int
    created_at: datetime | None = None

    model_config = {"from_attributes": True}
