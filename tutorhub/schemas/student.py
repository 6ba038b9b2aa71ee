# tutorhub/schemas/student.py
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from tutorhub.models.enums import StudentLevel, StudentStatus


class StudentBase(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr | None = None
    phone: str | None = None
    level: StudentLevel = StudentLevel.BEGINNER
    notes: str | None = None

    model_config = ConfigDict(use_enum_values=True)


class StudentCreate(StudentBase):
    enrollment_date: date | None = None
    # omitted -> the configured initial password is hashed into the row
    password: str | None = Field(default=None, min_length=6)


class StudentUpdate(StudentBase):
    """Full replacement of the editable fields."""
    status: StudentStatus = StudentStatus.ACTIVE
    # omitted -> password left unchanged
    password: str | None = Field(default=None, min_length=6)


class StudentPublic(BaseModel):
    id: int
    name: str
    email: str | None = None
    phone: str | None = None
    level: str
    enrollment_date: date | None = None
    status: str
    notes: str | None = None
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
