import pytest

from tests.conftest import ADMIN_EMAIL, ADMIN_PASSWORD
from tutorhub.client import ApiClient, ApiError


@pytest.fixture
def api(client):
    # the TestClient speaks the same request() interface as requests.Session
    return ApiClient(base_url="http://testserver/api", session=client, timeout=None)


def test_login_stores_tokens(api):
    user = api.login(ADMIN_EMAIL, ADMIN_PASSWORD)
    assert user["email"] == ADMIN_EMAIL
    assert api.is_authenticated()
    assert api.refresh_token
    assert api.me()["type"] == "teacher"

    api.logout()
    assert not api.is_authenticated()


def test_failed_login_raises_api_error(api):
    with pytest.raises(ApiError) as excinfo:
        api.login(ADMIN_EMAIL, "wrong")
    assert excinfo.value.status_code == 401
    assert excinfo.value.message == "Invalid credentials"
    assert not api.is_authenticated()


def test_calls_without_token_raise(api):
    with pytest.raises(ApiError) as excinfo:
        api.get_students()
    assert excinfo.value.status_code == 401


def test_teacher_workflow(api):
    api.login(ADMIN_EMAIL, ADMIN_PASSWORD)

    created = api.create_student(
        {"name": "Huda", "email": "huda@school.io", "level": "beginner", "password": "huda-pass"}
    )
    student_id = created["id"]
    lesson_id = api.create_lesson({"title": "Colours", "level": "beginner"})["id"]
    assignment_id = api.create_assignment(
        {"title": "Colour words", "student_id": student_id, "lesson_id": lesson_id,
         "due_date": "2031-01-10"}
    )["id"]
    api.update_assignment(assignment_id, {"status": "graded", "grade": 95, "feedback": "Great"})
    api.create_class(
        {"title": "Speaking", "student_id": student_id, "scheduled_date": "2031-01-12T15:00:00"}
    )
    api.create_resource(
        {"title": "Colour chart", "type": "worksheet", "level": "beginner"},
        file=("chart.png", b"\x89PNG fake", "image/png"),
    )

    assert [s["name"] for s in api.get_students()] == ["Huda"]
    assert api.get_assignments()[0]["lesson_title"] == "Colours"
    assert api.get_classes()[0]["student_name"] == "Huda"
    assert api.get_resources()[0]["file_path"].endswith(".png")
    assert api.get_dashboard_stats()["totalStudents"] == 1

    api.update_student(
        student_id,
        {"name": "Huda A.", "email": "huda@school.io", "level": "intermediate", "status": "active"},
    )
    assert api.get_students()[0]["level"] == "intermediate"

    student_api = ApiClient(base_url=api.base_url, session=api.session, timeout=None)
    student = student_api.student_login("huda@school.io", "huda-pass")
    assert student["id"] == student_id
    assert student_api.get_student_dashboard()["stats"]["averageGrade"] == 95
    assert len(student_api.get_student_assignments()) == 1
    assert len(student_api.get_student_classes()) == 1
    assert student_api.get_student_lessons() == []
    student_api.change_student_password("huda-pass", "huda-pass-2")

    api.delete_student(student_id)
    assert api.get_students() == []


def test_refresh_replaces_the_access_token(api):
    api.login(ADMIN_EMAIL, ADMIN_PASSWORD)
    api.token = "garbage"
    with pytest.raises(ApiError) as excinfo:
        api.get_lessons()
    assert excinfo.value.status_code == 403

    api.refresh()
    assert api.get_lessons() == []


def test_refresh_without_login_fails(api):
    with pytest.raises(ApiError) as excinfo:
        api.refresh()
    assert excinfo.value.status_code == 401
