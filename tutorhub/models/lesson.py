# tutorhub/models/lesson.py
from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func
from tutorhub.db.base import Base

class Lesson(Base):
    __tablename__ = "lessons"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    # matched against Student.level with plain equality
    level = Column(String(50), nullable=False, index=True)
    content = Column(Text, nullable=True)
    duration = Column(Integer, nullable=False, default=60)  # minutes

    created_at = Column(DateTime(timezone=True), server_default=func.now())
