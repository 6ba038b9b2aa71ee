# tutorhub/services/class_service.py
import logging
from datetime import datetime
from typing import List

from sqlalchemy.orm import Session, joinedload

from tutorhub.core.exceptions import NotFound
from tutorhub.db.session import storage_errors
from tutorhub.models.class_session import ClassSession
from tutorhub.models.lesson import Lesson
from tutorhub.models.student import Student
from tutorhub.schemas.class_session import ClassCreate, ClassPublic
from tutorhub.services.status import is_class_overdue, utcnow

logger = logging.getLogger(__name__)


def class_to_public(c: ClassSession, now: datetime | None = None) -> ClassPublic:
    return ClassPublic(
        id=c.id,
        title=c.title,
        student_id=c.student_id,
        lesson_id=c.lesson_id,
        scheduled_date=c.scheduled_date,
        duration=c.duration,
        status=c.status,
        notes=c.notes,
        created_at=c.created_at,
        student_name=c.student.name if c.student else None,
        lesson_title=c.lesson.title if c.lesson else None,
        is_overdue=is_class_overdue(c.status, c.scheduled_date, now),
    )


def _with_display_fields(db: Session):
    return db.query(ClassSession).options(
        joinedload(ClassSession.student),
        joinedload(ClassSession.lesson),
    )


def list_classes(db: Session) -> List[ClassSession]:
    with storage_errors(db, "listing classes"):
        return (
            _with_display_fields(db)
            .order_by(ClassSession.scheduled_date.asc(), ClassSession.id.asc())
            .all()
        )


def list_classes_for_student(db: Session, *, student_id: int) -> List[ClassSession]:
    with storage_errors(db, f"listing classes of student {student_id}"):
        return (
            _with_display_fields(db)
            .filter(ClassSession.student_id == student_id)
            .order_by(ClassSession.scheduled_date.desc(), ClassSession.id.desc())
            .all()
        )


def list_upcoming_classes_for_student(
    db: Session,
    *,
    student_id: int,
    now: datetime | None = None,
    limit: int = 5,
) -> List[ClassSession]:
    """The next ``limit`` classes starting at or after ``now``, soonest first."""
    if now is None:
        now = utcnow()
    with storage_errors(db, f"listing upcoming classes of student {student_id}"):
        return (
            _with_display_fields(db)
            .filter(
                ClassSession.student_id == student_id,
                ClassSession.scheduled_date >= now,
            )
            .order_by(ClassSession.scheduled_date.asc(), ClassSession.id.asc())
            .limit(limit)
            .all()
        )


def create_class(db: Session, *, obj_in: ClassCreate) -> ClassSession:
    with storage_errors(db, "scheduling a class"):
        if db.get(Student, obj_in.student_id) is None:
            raise NotFound("Student not found")
        if obj_in.lesson_id is not None and db.get(Lesson, obj_in.lesson_id) is None:
            raise NotFound("Lesson not found")

        db_obj = ClassSession(**obj_in.model_dump())
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)

    logger.info(f"Scheduled class {db_obj.id} for student {obj_in.student_id}")
    return db_obj
