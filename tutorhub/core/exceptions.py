"""
Application exceptions and their HTTP mapping.

Every error raised by services or auth dependencies derives from
``TutorHubError`` and carries the status code and the generic message the
caller sees. Internal detail (database errors, token decoding failures) is
logged server-side and never placed in ``detail``.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class TutorHubError(Exception):
    """Base exception for all TutorHub application errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"
    headers: dict[str, str] | None = None

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class InvalidCredentials(TutorHubError):
    """Raised when a login attempt fails, whatever the reason."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid credentials"


class Unauthenticated(TutorHubError):
    """Raised when a protected route is called without a bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Not authenticated"
    headers = {"WWW-Authenticate": "Bearer"}


class Forbidden(TutorHubError):
    """Raised for an invalid or expired token, or the wrong role."""

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Access denied"


class NotFound(TutorHubError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class Conflict(TutorHubError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Conflict"


class StorageError(TutorHubError):
    """Raised when a persistence operation fails."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Database error"


async def tutorhub_exception_handler(request: Request, exc: TutorHubError):
    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__} on {request.method} {request.url.path}")
    else:
        logger.info(
            f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.detail}"
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=exc.headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TutorHubError, tutorhub_exception_handler)
