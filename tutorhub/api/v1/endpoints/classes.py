# tutorhub/api/v1/endpoints/classes.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tutorhub.api.deps import get_current_teacher
from tutorhub.db.deps import get_db
from tutorhub.models.user import User
from tutorhub.schemas.class_session import ClassCreate, ClassPublic
from tutorhub.schemas.common import CreatedResponse
from tutorhub.services import class_service

router = APIRouter(prefix="/classes", tags=["classes"])


@router.get("", response_model=List[ClassPublic])
def list_classes(
    db: Session = Depends(get_db),
    current_teacher: User = Depends(get_current_teacher),
):
    return [class_service.class_to_public(c) for c in class_service.list_classes(db)]


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_class(
    obj_in: ClassCreate,
    db: Session = Depends(get_db),
    current_teacher: User = Depends(get_current_teacher),
):
    class_session = class_service.create_class(db, obj_in=obj_in)
    return CreatedResponse(id=class_session.id, message="Class scheduled successfully")
