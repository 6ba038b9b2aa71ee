import pytest
from fastapi.testclient import TestClient

from tutorhub.core.config import Settings
from tutorhub.main import create_app

ADMIN_EMAIL = "teacher@tutorhub.io"
ADMIN_PASSWORD = "teach-pass-1"


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite file and uploads directory."""
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'tutorhub_test.db'}",
        UPLOADS_DIR=str(tmp_path / "uploads"),
        SECRET_KEY="test-secret-key",
        SEED_ADMIN_EMAIL=ADMIN_EMAIL,
        SEED_ADMIN_PASSWORD=ADMIN_PASSWORD,
        SEED_ADMIN_NAME="Test Teacher",
        SEED_DEMO_STUDENT=False,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # context manager so the lifespan (table creation, seeding) runs
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def teacher_login(client):
    resp = client.post("/api/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert resp.status_code == 200, resp.text
    return resp.json()


@pytest.fixture
def teacher_headers(teacher_login):
    return bearer(teacher_login["token"])


@pytest.fixture
def create_student(client, teacher_headers):
    counter = {"n": 0}

    def _create(**overrides) -> int:
        counter["n"] += 1
        payload = {
            "name": f"Student {counter['n']}",
            "email": f"student{counter['n']}@school.io",
            "phone": "0500000000",
            "level": "beginner",
            "notes": None,
        }
        payload.update(overrides)
        resp = client.post("/api/students", json=payload, headers=teacher_headers)
        assert resp.status_code == 201, resp.text
        return resp.json()["id"]

    return _create


@pytest.fixture
def create_lesson(client, teacher_headers):
    def _create(**overrides) -> int:
        payload = {
            "title": "Greetings",
            "description": "Saying hello",
            "level": "beginner",
            "content": "Marhaba",
            "duration": 45,
        }
        payload.update(overrides)
        resp = client.post("/api/lessons", json=payload, headers=teacher_headers)
        assert resp.status_code == 201, resp.text
        return resp.json()["id"]

    return _create


@pytest.fixture
def create_assignment(client, teacher_headers):
    def _create(student_id: int, due_date, **overrides) -> int:
        payload = {
            "title": "Homework",
            "description": "Write ten sentences",
            "student_id": student_id,
            "lesson_id": None,
            "due_date": due_date.isoformat(),
        }
        payload.update(overrides)
        resp = client.post("/api/assignments", json=payload, headers=teacher_headers)
        assert resp.status_code == 201, resp.text
        return resp.json()["id"]

    return _create


@pytest.fixture
def grade_assignment(client, teacher_headers):
    def _grade(assignment_id: int, status: str, grade=None, feedback=None):
        resp = client.put(
            f"/api/assignments/{assignment_id}",
            json={"status": status, "grade": grade, "feedback": feedback},
            headers=teacher_headers,
        )
        assert resp.status_code == 200, resp.text

    return _grade


@pytest.fixture
def create_class(client, teacher_headers):
    def _create(student_id: int, scheduled_date, **overrides) -> int:
        payload = {
            "title": "Conversation practice",
            "student_id": student_id,
            "lesson_id": None,
            "scheduled_date": scheduled_date.isoformat(),
            "duration": 60,
            "notes": None,
        }
        payload.update(overrides)
        resp = client.post("/api/classes", json=payload, headers=teacher_headers)
        assert resp.status_code == 201, resp.text
        return resp.json()["id"]

    return _create


@pytest.fixture
def student(create_student):
    """An active intermediate student with their own password."""
    email = "omar@school.io"
    password = "omar-pass-1"
    student_id = create_student(
        name="Omar", email=email, level="intermediate", password=password
    )
    return {"id": student_id, "email": email, "password": password, "level": "intermediate"}


@pytest.fixture
def student_headers(client, student):
    resp = client.post(
        "/api/student/login",
        json={"email": student["email"], "password": student["password"]},
    )
    assert resp.status_code == 200, resp.text
    return bearer(resp.json()["token"])
