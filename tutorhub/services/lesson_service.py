# tutorhub/services/lesson_service.py
from typing import List

from sqlalchemy.orm import Session

from tutorhub.db.session import storage_errors
from tutorhub.models.lesson import Lesson
from tutorhub.schemas.lesson import LessonCreate


def list_lessons(db: Session) -> List[Lesson]:
    with storage_errors(db, "listing lessons"):
        return db.query(Lesson).order_by(Lesson.created_at.desc(), Lesson.id.desc()).all()


def list_lessons_for_level(db: Session, level: str) -> List[Lesson]:
    """
    Lessons whose level equals ``level`` exactly (case-sensitive).
    """
    with storage_errors(db, f"listing lessons for level {level!r}"):
        return (
            db.query(Lesson)
            .filter(Lesson.level == level)
            .order_by(Lesson.created_at.desc(), Lesson.id.desc())
            .all()
        )


def create_lesson(db: Session, *, obj_in: LessonCreate) -> Lesson:
    with storage_errors(db, "creating a lesson"):
        db_obj = Lesson(**obj_in.model_dump())
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
    return db_obj
