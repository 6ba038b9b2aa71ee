# tutorhub/api/v1/endpoints/auth.py
from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tutorhub.api.deps import get_app_settings, get_token_claims
from tutorhub.core.config import Settings
from tutorhub.core.security import identity_from_claims
from tutorhub.db.deps import get_db
from tutorhub.schemas.auth import (
    AccessToken,
    LoginRequest,
    LoginResponse,
    RefreshRequest,
    StudentLoginResponse,
)
from tutorhub.services import auth_service

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """
    Teacher login. Unknown email and wrong password give the same 401.
    """
    return auth_service.login_teacher(db, settings, payload.email, payload.password)


@router.post("/student/login", response_model=StudentLoginResponse)
def student_login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """
    Student login; only active students are accepted.
    """
    return auth_service.login_student(db, settings, payload.email, payload.password)


@router.post("/token/refresh", response_model=AccessToken)
def refresh_token(
    payload: RefreshRequest,
    settings: Settings = Depends(get_app_settings),
):
    return auth_service.refresh_access_token(settings, payload.refresh_token)


@router.get("/me")
def read_me(claims: dict[str, Any] = Depends(get_token_claims)):
    return identity_from_claims(claims)
