"""
Logging configuration.

One stdout handler on the root logger. Each line carries the id of the HTTP
request that produced it, taken from a context variable set by the request-id
middleware in ``tutorhub.main``.
"""
import logging
import sys
import uuid
from contextvars import ContextVar

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] [%(request_id)s] %(message)s"
HANDLER_NAME = "tutorhub"


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Install the TutorHub handler on the root logger.

    Safe to call more than once: a handler installed by an earlier call is
    replaced rather than duplicated.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestIdFilter())

    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        if existing.get_name() == HANDLER_NAME:
            root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return root_logger


def generate_request_id() -> str:
    return str(uuid.uuid4())
