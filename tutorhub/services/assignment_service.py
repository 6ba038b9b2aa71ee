# tutorhub/services/assignment_service.py
import logging
from datetime import date
from typing import List

from sqlalchemy.orm import Session, joinedload

from tutorhub.core.exceptions import NotFound
from tutorhub.db.session import storage_errors
from tutorhub.models.assignment import Assignment
from tutorhub.models.lesson import Lesson
from tutorhub.models.student import Student
from tutorhub.schemas.assignment import (
    AssignmentCreate,
    AssignmentPublic,
    AssignmentUpdate,
)
from tutorhub.services.status import is_assignment_overdue

logger = logging.getLogger(__name__)


def assignment_to_public(a: Assignment, today: date | None = None) -> AssignmentPublic:
    return AssignmentPublic(
        id=a.id,
        title=a.title,
        description=a.description,
        student_id=a.student_id,
        lesson_id=a.lesson_id,
        due_date=a.due_date,
        status=a.status,
        grade=a.grade,
        feedback=a.feedback,
        created_at=a.created_at,
        student_name=a.student.name if a.student else None,
        lesson_title=a.lesson.title if a.lesson else None,
        is_overdue=is_assignment_overdue(a.status, a.due_date, today),
    )


def _with_display_fields(db: Session):
    return db.query(Assignment).options(
        joinedload(Assignment.student),
        joinedload(Assignment.lesson),
    )


def list_assignments(db: Session) -> List[Assignment]:
    with storage_errors(db, "listing assignments"):
        return (
            _with_display_fields(db)
            .order_by(Assignment.created_at.desc(), Assignment.id.desc())
            .all()
        )


def list_assignments_for_student(
    db: Session,
    *,
    student_id: int,
    newest_due_first: bool = True,
) -> List[Assignment]:
    if newest_due_first:
        order = (Assignment.due_date.desc(), Assignment.id.desc())
    else:
        order = (Assignment.due_date.asc(), Assignment.id.asc())

    with storage_errors(db, f"listing assignments of student {student_id}"):
        return (
            _with_display_fields(db)
            .filter(Assignment.student_id == student_id)
            .order_by(*order)
            .all()
        )


def create_assignment(db: Session, *, obj_in: AssignmentCreate) -> Assignment:
    with storage_errors(db, "creating an assignment"):
        if db.get(Student, obj_in.student_id) is None:
            raise NotFound("Student not found")
        if obj_in.lesson_id is not None and db.get(Lesson, obj_in.lesson_id) is None:
            raise NotFound("Lesson not found")

        db_obj = Assignment(**obj_in.model_dump())
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)

    logger.info(f"Created assignment {db_obj.id} for student {obj_in.student_id}")
    return db_obj


def grade_assignment(
    db: Session,
    *,
    assignment_id: int,
    obj_in: AssignmentUpdate,
) -> Assignment:
    """Replace status, grade and feedback of one assignment."""
    with storage_errors(db, f"updating assignment {assignment_id}"):
        db_obj = db.get(Assignment, assignment_id)
        if db_obj is None:
            raise NotFound("Assignment not found")

        db_obj.status = obj_in.status
        db_obj.grade = obj_in.grade
        db_obj.feedback = obj_in.feedback

        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)

    logger.info(f"Updated assignment {assignment_id}: status={obj_in.status}, grade={obj_in.grade}")
    return db_obj
