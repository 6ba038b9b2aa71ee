# tutorhub/models/assignment.py
from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    Date,
    DateTime,
    Float,
    ForeignKey,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from tutorhub.db.base import Base
from tutorhub.models.enums import AssignmentStatus

class Assignment(Base):
    __tablename__ = "assignments"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    student_id = Column(
        Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True
    )
    lesson_id = Column(
        Integer, ForeignKey("lessons.id", ondelete="SET NULL"), nullable=True
    )

    due_date = Column(Date, nullable=True)

    # pending / completed / graded
    status = Column(
        String(20), nullable=False, default=AssignmentStatus.PENDING.value, index=True
    )

    # 0-100; NULL means not graded yet, which is not the same as 0
    grade = Column(Float, nullable=True)
    feedback = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    student = relationship("Student", back_populates="assignments")
    lesson = relationship("Lesson")
