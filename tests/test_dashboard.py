import asyncio
import time
from datetime import date

from tutorhub.services.dashboard_service import collect_counts


def test_dashboard_stats_counts(
    client, teacher_headers, create_student, create_lesson, create_assignment, grade_assignment
):
    ids = [create_student() for _ in range(5)]
    for student_id, status in zip(ids[:2], ("inactive", "graduated")):
        resp = client.put(
            f"/api/students/{student_id}",
            json={"name": "Changed", "level": "beginner", "status": status},
            headers=teacher_headers,
        )
        assert resp.status_code == 200

    create_lesson()
    create_lesson()

    assignments = [create_assignment(ids[2], date.today()) for _ in range(4)]
    grade_assignment(assignments[0], "completed")
    grade_assignment(assignments[1], "graded", grade=70)
    grade_assignment(assignments[2], "completed")

    resp = client.get("/api/dashboard/stats", headers=teacher_headers)
    assert resp.status_code == 200
    assert resp.json() == {
        "totalStudents": 5,
        "activeStudents": 3,
        "totalLessons": 2,
        "pendingAssignments": 1,
    }


def test_dashboard_stats_on_an_empty_database(client, teacher_headers):
    resp = client.get("/api/dashboard/stats", headers=teacher_headers)
    assert resp.json() == {
        "totalStudents": 0,
        "activeStudents": 0,
        "totalLessons": 0,
        "pendingAssignments": 0,
    }


def test_collect_counts_keeps_names_whatever_finishes_first():
    def slow():
        time.sleep(0.2)
        return 1

    def fast():
        return 2

    result = asyncio.run(collect_counts({"slow": slow, "fast": fast}))
    assert result == {"slow": 1, "fast": 2}
