# tutorhub/api/v1/endpoints/lessons.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tutorhub.api.deps import get_current_teacher
from tutorhub.db.deps import get_db
from tutorhub.models.user import User
from tutorhub.schemas.common import CreatedResponse
from tutorhub.schemas.lesson import LessonCreate, LessonPublic
from tutorhub.services import lesson_service

router = APIRouter(prefix="/lessons", tags=["lessons"])


@router.get("", response_model=List[LessonPublic])
def list_lessons(
    db: Session = Depends(get_db),
    current_teacher: User = Depends(get_current_teacher),
):
    return lesson_service.list_lessons(db)


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_lesson(
    obj_in: LessonCreate,
    db: Session = Depends(get_db),
    current_teacher: User = Depends(get_current_teacher),
):
    lesson = lesson_service.create_lesson(db, obj_in=obj_in)
    return CreatedResponse(id=lesson.id, message="Lesson created successfully")
