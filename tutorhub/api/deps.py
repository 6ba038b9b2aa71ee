# tutorhub/api/deps.py
from typing import Any

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from tutorhub.core.config import Settings
from tutorhub.core.exceptions import Forbidden, Unauthenticated
from tutorhub.core.security import decode_token
from tutorhub.db.deps import get_db
from tutorhub.models.enums import StudentStatus
from tutorhub.models.student import Student
from tutorhub.models.user import User
from tutorhub.services.auth_service import STUDENT, TEACHER

# declares the security scheme in OpenAPI; the header itself is parsed below
bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_claims(
    request: Request,
    _credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_app_settings),
) -> dict[str, Any]:
    """
    The token is the second word of the Authorization header, whatever the
    scheme. No token is 401; a token that does not verify is 403.
    """
    parts = request.headers.get("Authorization", "").split()
    if len(parts) < 2:
        raise Unauthenticated()
    return decode_token(parts[1], settings)


def get_current_teacher(
    claims: dict[str, Any] = Depends(get_token_claims),
    db: Session = Depends(get_db),
) -> User:
    if claims.get("type") != TEACHER or "userId" not in claims:
        raise Forbidden()
    user = db.get(User, claims["userId"])
    if user is None:
        raise Forbidden()
    return user


def get_current_student(
    claims: dict[str, Any] = Depends(get_token_claims),
    db: Session = Depends(get_db),
) -> Student:
    if claims.get("type") != STUDENT or "studentId" not in claims:
        raise Forbidden()
    student = db.get(Student, claims["studentId"])
    # deactivation takes effect on tokens already issued
    if student is None or student.status != StudentStatus.ACTIVE.value:
        raise Forbidden()
    return student
