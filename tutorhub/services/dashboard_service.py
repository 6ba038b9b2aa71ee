# tutorhub/services/dashboard_service.py
import asyncio
import logging
from datetime import date, datetime
from typing import Callable, Mapping

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from tutorhub.db.session import Database, storage_errors
from tutorhub.models.assignment import Assignment
from tutorhub.models.enums import AssignmentStatus, StudentStatus
from tutorhub.models.lesson import Lesson
from tutorhub.models.student import Student
from tutorhub.schemas.dashboard import DashboardStats, StudentDashboard, StudentStats
from tutorhub.services import assignment_service, class_service
from tutorhub.services.status import average_grade, utcnow

logger = logging.getLogger(__name__)

RECENT_ASSIGNMENTS = 5
UPCOMING_CLASSES = 5


async def collect_counts(counters: Mapping[str, Callable[[], int]]) -> dict[str, int]:
    """
    Run every counter concurrently on the threadpool and return the results
    keyed by name once all of them have finished.
    """
    names = list(counters)
    results = await asyncio.gather(*(run_in_threadpool(counters[name]) for name in names))
    return dict(zip(names, results))


def _counter(database: Database, statement: Select, label: str) -> Callable[[], int]:
    def count() -> int:
        # one session per counter: sessions are not shared across threads
        with database.session() as db:
            with storage_errors(db, f"counting {label}"):
                return db.scalar(statement) or 0

    return count


async def get_dashboard_stats(database: Database) -> DashboardStats:
    counts = await collect_counts(
        {
            "total_students": _counter(
                database, select(func.count(Student.id)), "students"
            ),
            "active_students": _counter(
                database,
                select(func.count(Student.id)).where(
                    Student.status == StudentStatus.ACTIVE.value
                ),
                "active students",
            ),
            "total_lessons": _counter(
                database, select(func.count(Lesson.id)), "lessons"
            ),
            "pending_assignments": _counter(
                database,
                select(func.count(Assignment.id)).where(
                    Assignment.status == AssignmentStatus.PENDING.value
                ),
                "pending assignments",
            ),
        }
    )
    logger.info(f"Dashboard stats: {counts}")
    return DashboardStats(**counts)


def get_student_dashboard(
    db: Session,
    *,
    student_id: int,
    today: date | None = None,
    now: datetime | None = None,
) -> StudentDashboard:
    """
    Stats over all of the student's assignments, the first few of them by
    due date, and the next upcoming classes.
    """
    if now is None:
        now = utcnow()

    assignments = assignment_service.list_assignments_for_student(
        db, student_id=student_id, newest_due_first=False
    )
    upcoming = class_service.list_upcoming_classes_for_student(
        db, student_id=student_id, now=now, limit=UPCOMING_CLASSES
    )

    grades = [a.grade for a in assignments if a.grade is not None]
    stats = StudentStats(
        total_assignments=len(assignments),
        pending_assignments=sum(
            1 for a in assignments if a.status == AssignmentStatus.PENDING.value
        ),
        completed_assignments=sum(
            1
            for a in assignments
            if a.status in (AssignmentStatus.COMPLETED.value, AssignmentStatus.GRADED.value)
        ),
        graded_assignments=sum(
            1 for a in assignments if a.status == AssignmentStatus.GRADED.value
        ),
        average_grade=average_grade(grades),
        upcoming_classes=len(upcoming),
    )

    return StudentDashboard(
        stats=stats,
        recent_assignments=[
            assignment_service.assignment_to_public(a, today)
            for a in assignments[:RECENT_ASSIGNMENTS]
        ],
        upcoming_classes=[class_service.class_to_public(c, now) for c in upcoming],
    )
