# tutorhub/db/session.py
import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from tutorhub.core.exceptions import StorageError
from tutorhub.db.base import Base
import tutorhub.models  # noqa: F401  registers every table on Base.metadata

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Owns the engine and the session factory for one running application.

    Created by the application lifespan, stored on ``app.state.db`` and
    disposed on shutdown. Request handlers reach it through ``get_db``.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        is_sqlite = url.startswith("sqlite")
        # SQLite needs check_same_thread=False: FastAPI runs sync handlers on a threadpool
        self.engine = create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False} if is_sqlite else {},
        )
        if is_sqlite:
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_all(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()


@contextmanager
def storage_errors(db: Session, action: str) -> Iterator[None]:
    """
    Turn any SQLAlchemy failure inside the block into a StorageError.

    The session is rolled back and the full error is logged here; the caller
    only ever sees the generic message.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception(f"Database error while {action}")
        raise StorageError() from exc
