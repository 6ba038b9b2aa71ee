# tutorhub/services/auth_service.py
import logging
from typing import Any

from sqlalchemy.orm import Session

from tutorhub.core.config import Settings
from tutorhub.core.exceptions import InvalidCredentials
from tutorhub.core.security import (
    REFRESH_TOKEN,
    create_access_token,
    create_refresh_token,
    decode_token,
    get_password_hash,
    identity_from_claims,
    verify_password,
)
from tutorhub.db.session import storage_errors
from tutorhub.models.enums import StudentStatus
from tutorhub.models.student import Student
from tutorhub.models.user import User
from tutorhub.schemas.auth import (
    AccessToken,
    LoginResponse,
    StudentIdentity,
    StudentLoginResponse,
    UserPublic,
)

logger = logging.getLogger(__name__)

TEACHER = "teacher"
STUDENT = "student"


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    with storage_errors(db, "looking up a teacher account"):
        user = db.query(User).filter(User.email == email).first()
    if not verify_password(password, user.password_hash if user else None):
        return None
    return user


def authenticate_student(db: Session, email: str, password: str) -> Student | None:
    """Only active students may log in."""
    with storage_errors(db, "looking up a student account"):
        student = (
            db.query(Student)
            .filter(
                Student.email == email,
                Student.status == StudentStatus.ACTIVE.value,
            )
            .first()
        )
    if not verify_password(password, student.password_hash if student else None):
        return None
    return student


def login_teacher(
    db: Session, settings: Settings, email: str, password: str
) -> LoginResponse:
    user = authenticate_user(db, email, password)
    if user is None:
        logger.info("Teacher login rejected")
        raise InvalidCredentials()

    claims = {"userId": user.id, "email": user.email, "type": TEACHER}
    logger.info(f"Teacher {user.id} logged in")
    return LoginResponse(
        token=create_access_token(claims, settings),
        refresh_token=create_refresh_token(claims, settings),
        user=UserPublic.model_validate(user),
    )


def login_student(
    db: Session, settings: Settings, email: str, password: str
) -> StudentLoginResponse:
    student = authenticate_student(db, email, password)
    if student is None:
        logger.info("Student login rejected")
        raise InvalidCredentials()

    claims = {"studentId": student.id, "email": student.email, "type": STUDENT}
    logger.info(f"Student {student.id} logged in")
    return StudentLoginResponse(
        token=create_access_token(claims, settings),
        refresh_token=create_refresh_token(claims, settings),
        student=StudentIdentity.model_validate(student),
    )


def refresh_access_token(settings: Settings, refresh_token: str) -> AccessToken:
    claims: dict[str, Any] = decode_token(refresh_token, settings, expected_use=REFRESH_TOKEN)
    return AccessToken(token=create_access_token(identity_from_claims(claims), settings))


def change_student_password(
    db: Session,
    *,
    student: Student,
    current_password: str,
    new_password: str,
) -> None:
    if not verify_password(current_password, student.password_hash):
        raise InvalidCredentials()

    with storage_errors(db, f"changing password of student {student.id}"):
        student.password_hash = get_password_hash(new_password)
        db.add(student)
        db.commit()
    logger.info(f"Student {student.id} changed their password")
