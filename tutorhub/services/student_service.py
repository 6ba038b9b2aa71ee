# tutorhub/services/student_service.py
import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tutorhub.core.config import Settings
from tutorhub.core.exceptions import Conflict, NotFound
from tutorhub.core.security import get_password_hash
from tutorhub.db.session import storage_errors
from tutorhub.models.student import Student
from tutorhub.schemas.student import StudentCreate, StudentUpdate

logger = logging.getLogger(__name__)


def _ensure_email_free(db: Session, email: str | None, exclude_id: int | None = None) -> None:
    if email is None:
        return
    query = db.query(Student.id).filter(Student.email == email)
    if exclude_id is not None:
        query = query.filter(Student.id != exclude_id)
    if query.first() is not None:
        raise Conflict("Email already registered")


def _commit_student(db: Session) -> None:
    # the unique index on email still catches a concurrent insert that
    # slipped past _ensure_email_free
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise Conflict("Email already registered") from exc


def list_students(db: Session) -> List[Student]:
    with storage_errors(db, "listing students"):
        return (
            db.query(Student)
            .order_by(Student.created_at.desc(), Student.id.desc())
            .all()
        )


def get_student(db: Session, student_id: int) -> Optional[Student]:
    with storage_errors(db, f"loading student {student_id}"):
        return db.get(Student, student_id)


def create_student(db: Session, settings: Settings, *, obj_in: StudentCreate) -> Student:
    data = obj_in.model_dump(exclude={"password"}, exclude_none=True)
    password = obj_in.password or settings.STUDENT_INITIAL_PASSWORD

    with storage_errors(db, "creating a student"):
        _ensure_email_free(db, obj_in.email)
        db_obj = Student(**data, password_hash=get_password_hash(password))
        db.add(db_obj)
        _commit_student(db)
        db.refresh(db_obj)

    logger.info(f"Created student {db_obj.id}")
    return db_obj


def update_student(db: Session, *, student_id: int, obj_in: StudentUpdate) -> Student:
    with storage_errors(db, f"updating student {student_id}"):
        db_obj = db.get(Student, student_id)
        if db_obj is None:
            raise NotFound("Student not found")
        _ensure_email_free(db, obj_in.email, exclude_id=student_id)

        # every editable field is replaced, including clearing optional ones
        for field, value in obj_in.model_dump(exclude={"password"}).items():
            setattr(db_obj, field, value)
        if obj_in.password:
            db_obj.password_hash = get_password_hash(obj_in.password)

        db.add(db_obj)
        _commit_student(db)
        db.refresh(db_obj)

    logger.info(f"Updated student {student_id}")
    return db_obj


def delete_student(db: Session, *, student_id: int) -> None:
    """Delete a student together with their assignments and classes."""
    with storage_errors(db, f"deleting student {student_id}"):
        db_obj = db.get(Student, student_id)
        if db_obj is None:
            raise NotFound("Student not found")
        db.delete(db_obj)
        db.commit()

    logger.info(f"Deleted student {student_id}")
