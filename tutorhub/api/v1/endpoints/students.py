# tutorhub/api/v1/endpoints/students.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tutorhub.api.deps import get_app_settings, get_current_teacher
from tutorhub.core.config import Settings
from tutorhub.db.deps import get_db
from tutorhub.models.user import User
from tutorhub.schemas.common import CreatedResponse, MessageResponse
from tutorhub.schemas.student import StudentCreate, StudentPublic, StudentUpdate
from tutorhub.services import student_service

router = APIRouter(prefix="/students", tags=["students"])


@router.get("", response_model=List[StudentPublic])
def list_students(
    db: Session = Depends(get_db),
    current_teacher: User = Depends(get_current_teacher),
):
    return student_service.list_students(db)


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_student(
    obj_in: StudentCreate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    current_teacher: User = Depends(get_current_teacher),
):
    student = student_service.create_student(db, settings, obj_in=obj_in)
    return CreatedResponse(id=student.id, message="Student added successfully")


@router.put("/{student_id}", response_model=MessageResponse)
def update_student(
    student_id: int,
    obj_in: StudentUpdate,
    db: Session = Depends(get_db),
    current_teacher: User = Depends(get_current_teacher),
):
    student_service.update_student(db, student_id=student_id, obj_in=obj_in)
    return MessageResponse(message="Student updated successfully")


@router.delete("/{student_id}", response_model=MessageResponse)
def delete_student(
    student_id: int,
    db: Session = Depends(get_db),
    current_teacher: User = Depends(get_current_teacher),
):
    """
    Also removes the student's assignments and classes.
    """
    student_service.delete_student(db, student_id=student_id)
    return MessageResponse(message="Student deleted successfully")
