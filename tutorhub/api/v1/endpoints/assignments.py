# tutorhub/api/v1/endpoints/assignments.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tutorhub.api.deps import get_current_teacher
from tutorhub.db.deps import get_db
from tutorhub.models.user import User
from tutorhub.schemas.assignment import (
    AssignmentCreate,
    AssignmentPublic,
    AssignmentUpdate,
)
from tutorhub.schemas.common import CreatedResponse, MessageResponse
from tutorhub.services import assignment_service

router = APIRouter(prefix="/assignments", tags=["assignments"])


@router.get("", response_model=List[AssignmentPublic])
def list_assignments(
    db: Session = Depends(get_db),
    current_teacher: User = Depends(get_current_teacher),
):
    """
    All assignments, newest first, with student name and lesson title.
    """
    return [
        assignment_service.assignment_to_public(a)
        for a in assignment_service.list_assignments(db)
    ]


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_assignment(
    obj_in: AssignmentCreate,
    db: Session = Depends(get_db),
    current_teacher: User = Depends(get_current_teacher),
):
    assignment = assignment_service.create_assignment(db, obj_in=obj_in)
    return CreatedResponse(id=assignment.id, message="Assignment created successfully")


@router.put("/{assignment_id}", response_model=MessageResponse)
def update_assignment(
    assignment_id: int,
    obj_in: AssignmentUpdate,
    db: Session = Depends(get_db),
    current_teacher: User = Depends(get_current_teacher),
):
    assignment_service.grade_assignment(db, assignment_id=assignment_id, obj_in=obj_in)
    return MessageResponse(message="Assignment updated successfully")
