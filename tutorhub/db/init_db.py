# tutorhub/db/init_db.py
import logging

from sqlalchemy.exc import SQLAlchemyError

from tutorhub.core.config import Settings
from tutorhub.core.security import get_password_hash
from tutorhub.db.session import Database
from tutorhub.models.enums import StudentLevel, StudentStatus
from tutorhub.models.student import Student
from tutorhub.models.user import User

logger = logging.getLogger(__name__)


def init_db(database: Database, settings: Settings) -> None:
    """
    Create tables and seed the admin teacher account.

    The demo student is optional: failing to insert it is logged and startup
    carries on.
    """
    database.create_all()

    with database.session() as db:
        admin = db.query(User).filter(User.email == settings.SEED_ADMIN_EMAIL).first()
        if admin is None:
            db.add(
                User(
                    email=settings.SEED_ADMIN_EMAIL,
                    password_hash=get_password_hash(settings.SEED_ADMIN_PASSWORD),
                    name=settings.SEED_ADMIN_NAME,
                )
            )
            db.commit()
            logger.info(f"Created admin account {settings.SEED_ADMIN_EMAIL}")

    if settings.SEED_DEMO_STUDENT:
        _seed_demo_student(database, settings)


def _seed_demo_student(database: Database, settings: Settings) -> None:
    with database.session() as db:
        try:
            existing = (
                db.query(Student)
                .filter(Student.email == settings.SEED_DEMO_STUDENT_EMAIL)
                .first()
            )
            if existing is not None:
                return
            db.add(
                Student(
                    name="Demo Student",
                    email=settings.SEED_DEMO_STUDENT_EMAIL,
                    phone="",
                    level=StudentLevel.BEGINNER.value,
                    status=StudentStatus.ACTIVE.value,
                    password_hash=get_password_hash(settings.STUDENT_INITIAL_PASSWORD),
                )
            )
            db.commit()
            logger.info(f"Created demo student {settings.SEED_DEMO_STUDENT_EMAIL}")
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Failed to insert demo student")
