"""
Derived display states.

"Overdue" is never stored: it is computed from the stored status and the
due/scheduled date every time a row is read.
"""
from datetime import date, datetime, timezone

from tutorhub.models.enums import AssignmentStatus, ClassStatus


def utcnow() -> datetime:
    """Current time as naive UTC, the form class dates are stored in."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def utc_today() -> date:
    return utcnow().date()


def is_assignment_overdue(
    status: str,
    due_date: date | None,
    today: date | None = None,
) -> bool:
    """
    Pending and due strictly before today.

    The comparison is on UTC calendar dates: an assignment due today is not
    overdue, whatever the time.
    """
    if status != AssignmentStatus.PENDING.value or due_date is None:
        return False
    if today is None:
        today = utc_today()
    if isinstance(due_date, datetime):
        due_date = due_date.date()
    return due_date < today


def is_class_overdue(
    status: str,
    scheduled_date: datetime | None,
    now: datetime | None = None,
) -> bool:
    """Still scheduled although its start time has passed."""
    if status != ClassStatus.SCHEDULED.value or scheduled_date is None:
        return False
    if now is None:
        now = utcnow()
    return scheduled_date < now


def average_grade(grades: list[float]) -> int:
    """Mean of the given grades rounded half up; 0 when there are none."""
    if not grades:
        return 0
    mean = sum(grades) / len(grades)
    return int(mean + 0.5)
