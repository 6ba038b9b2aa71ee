from datetime import date, datetime, timedelta

import pytest

from tutorhub.services.status import (
    average_grade,
    is_assignment_overdue,
    is_class_overdue,
)

TODAY = date(2030, 6, 15)
NOW = datetime(2030, 6, 15, 12, 0)


@pytest.mark.parametrize(
    "status,due_date,expected",
    [
        ("pending", TODAY - timedelta(days=1), True),
        ("pending", TODAY, False),
        ("pending", TODAY + timedelta(days=1), False),
        ("completed", TODAY - timedelta(days=1), False),
        ("graded", TODAY - timedelta(days=30), False),
        ("pending", None, False),
    ],
)
def test_assignment_overdue(status, due_date, expected):
    assert is_assignment_overdue(status, due_date, today=TODAY) is expected


def test_assignment_due_earlier_today_is_not_overdue():
    due = datetime(2030, 6, 15, 0, 1)
    assert is_assignment_overdue("pending", due, today=TODAY) is False


@pytest.mark.parametrize(
    "status,scheduled,expected",
    [
        ("scheduled", NOW - timedelta(minutes=1), True),
        ("scheduled", NOW + timedelta(minutes=1), False),
        ("completed", NOW - timedelta(days=1), False),
        ("cancelled", NOW - timedelta(days=1), False),
    ],
)
def test_class_overdue(status, scheduled, expected):
    assert is_class_overdue(status, scheduled, now=NOW) is expected


@pytest.mark.parametrize(
    "grades,expected",
    [
        ([], 0),
        ([80, 90, 100], 90),
        ([85, 90], 88),
        ([0], 0),
        ([99.4], 99),
        ([70, 71], 71),
    ],
)
def test_average_grade(grades, expected):
    assert average_grade(grades) == expected


def test_assignment_overdue_defaults_to_the_utc_date(monkeypatch):
    from tutorhub.services import status

    # just after midnight UTC; a host clock behind UTC would still be on the 14th
    monkeypatch.setattr(status, "utcnow", lambda: datetime(2030, 6, 15, 0, 5))
    assert is_assignment_overdue("pending", date(2030, 6, 14)) is True
    assert is_assignment_overdue("pending", date(2030, 6, 15)) is False
