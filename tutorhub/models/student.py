# tutorhub/models/student.py
from datetime import date

from sqlalchemy import Column, Integer, String, Text, Date, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from tutorhub.db.base import Base
from tutorhub.models.enums import StudentLevel, StudentStatus

class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    # login key; nullable because a teacher may track students without portal access
    email = Column(String(255), unique=True, nullable=True, index=True)
    password_hash = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)

    level = Column(String(20), nullable=False, default=StudentLevel.BEGINNER.value)
    enrollment_date = Column(Date, nullable=False, default=date.today)
    status = Column(String(20), nullable=False, default=StudentStatus.ACTIVE.value, index=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # deleting a student removes their assignments and classes
    assignments = relationship(
        "Assignment", back_populates="student", cascade="all, delete-orphan"
    )
    classes = relationship(
        "ClassSession", back_populates="student", cascade="all, delete-orphan"
    )
