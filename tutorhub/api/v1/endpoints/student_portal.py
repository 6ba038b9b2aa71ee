# tutorhub/api/v1/endpoints/student_portal.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tutorhub.api.deps import get_current_student
from tutorhub.db.deps import get_db
from tutorhub.models.student import Student
from tutorhub.schemas.assignment import AssignmentPublic
from tutorhub.schemas.auth import PasswordChange
from tutorhub.schemas.class_session import ClassPublic
from tutorhub.schemas.common import MessageResponse
from tutorhub.schemas.dashboard import StudentDashboard
from tutorhub.schemas.lesson import LessonPublic
from tutorhub.services import (
    assignment_service,
    auth_service,
    class_service,
    dashboard_service,
    lesson_service,
)

router = APIRouter(prefix="/student", tags=["student"])


@router.get("/dashboard", response_model=StudentDashboard)
def student_dashboard(
    db: Session = Depends(get_db),
    current_student: Student = Depends(get_current_student),
):
    return dashboard_service.get_student_dashboard(db, student_id=current_student.id)


@router.get("/assignments", response_model=List[AssignmentPublic])
def my_assignments(
    db: Session = Depends(get_db),
    current_student: Student = Depends(get_current_student),
):
    assignments = assignment_service.list_assignments_for_student(
        db, student_id=current_student.id
    )
    return [assignment_service.assignment_to_public(a) for a in assignments]


@router.get("/classes", response_model=List[ClassPublic])
def my_classes(
    db: Session = Depends(get_db),
    current_student: Student = Depends(get_current_student),
):
    classes = class_service.list_classes_for_student(db, student_id=current_student.id)
    return [class_service.class_to_public(c) for c in classes]


@router.get("/lessons", response_model=List[LessonPublic])
def my_lessons(
    db: Session = Depends(get_db),
    current_student: Student = Depends(get_current_student),
):
    """
    Lessons at exactly the student's level.
    """
    return lesson_service.list_lessons_for_level(db, current_student.level)


@router.put("/password", response_model=MessageResponse)
def change_password(
    payload: PasswordChange,
    db: Session = Depends(get_db),
    current_student: Student = Depends(get_current_student),
):
    auth_service.change_student_password(
        db,
        student=current_student,
        current_password=payload.current_password,
        new_password=payload.new_password,
    )
    return MessageResponse(message="Password changed successfully")
