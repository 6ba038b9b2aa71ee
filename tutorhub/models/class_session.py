# tutorhub/models/class_session.py
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from tutorhub.db.base import Base
from tutorhub.models.enums import ClassStatus

class ClassSession(Base):
    """A scheduled class with one student."""
    __tablename__ = "classes"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)

    student_id = Column(
        Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True
    )
    lesson_id = Column(
        Integer, ForeignKey("lessons.id", ondelete="SET NULL"), nullable=True
    )

    # naive UTC
    scheduled_date = Column(DateTime, nullable=False, index=True)
    duration = Column(Integer, nullable=False, default=60)  # minutes

    # scheduled / completed / cancelled
    status = Column(String(20), nullable=False, default=ClassStatus.SCHEDULED.value)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    student = relationship("Student", back_populates="classes")
    lesson = relationship("Lesson")
