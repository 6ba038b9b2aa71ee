from datetime import date, datetime, timedelta, timezone


def _find(rows, row_id):
    return next((r for r in rows if r["id"] == row_id), None)


def test_student_create_update_delete_round_trip(client, teacher_headers):
    payload = {
        "name": "Layla Hassan",
        "email": "layla@school.io",
        "phone": "0501234567",
        "level": "advanced",
        "notes": "Prefers evening classes",
    }
    resp = client.post("/api/students", json=payload, headers=teacher_headers)
    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Student added successfully"
    student_id = body["id"]

    listed = _find(client.get("/api/students", headers=teacher_headers).json(), student_id)
    assert listed is not None
    for field, value in payload.items():
        assert listed[field] == value
    assert listed["status"] == "active"
    assert listed["enrollment_date"] == date.today().isoformat()
    assert "password_hash" not in listed

    update = {
        "name": "Layla H.",
        "email": "layla.h@school.io",
        "phone": None,
        "level": "intermediate",
        "notes": None,
        "status": "graduated",
    }
    resp = client.put(f"/api/students/{student_id}", json=update, headers=teacher_headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "Student updated successfully"}

    listed = _find(client.get("/api/students", headers=teacher_headers).json(), student_id)
    for field, value in update.items():
        assert listed[field] == value

    resp = client.delete(f"/api/students/{student_id}", headers=teacher_headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "Student deleted successfully"}

    rows = client.get("/api/students", headers=teacher_headers).json()
    assert _find(rows, student_id) is None


def test_students_are_listed_newest_first(client, teacher_headers, create_student):
    first = create_student(name="First")
    second = create_student(name="Second")
    ids = [row["id"] for row in client.get("/api/students", headers=teacher_headers).json()]
    assert ids.index(second) < ids.index(first)


def test_update_missing_student_is_not_found(client, teacher_headers):
    resp = client.put(
        "/api/students/9999",
        json={"name": "Nobody", "level": "beginner", "status": "active"},
        headers=teacher_headers,
    )
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Student not found"}


def test_delete_missing_student_is_not_found(client, teacher_headers):
    resp = client.delete("/api/students/9999", headers=teacher_headers)
    assert resp.status_code == 404


def test_duplicate_email_is_a_conflict(client, teacher_headers, create_student):
    create_student(email="twin@school.io")
    resp = client.post(
        "/api/students",
        json={"name": "Twin", "email": "twin@school.io", "level": "beginner"},
        headers=teacher_headers,
    )
    assert resp.status_code == 409
    assert resp.json() == {"detail": "Email already registered"}


def test_updating_to_another_students_email_is_a_conflict(
    client, teacher_headers, create_student
):
    create_student(email="taken@school.io")
    other = create_student(email="mine@school.io")
    resp = client.put(
        f"/api/students/{other}",
        json={"name": "Me", "email": "taken@school.io", "level": "beginner", "status": "active"},
        headers=teacher_headers,
    )
    assert resp.status_code == 409


def test_unknown_level_is_rejected(client, teacher_headers):
    resp = client.post(
        "/api/students",
        json={"name": "Bad Level", "email": "bad@school.io", "level": "expert"},
        headers=teacher_headers,
    )
    assert resp.status_code == 422


def test_deleting_a_student_removes_their_assignments_and_classes(
    client, teacher_headers, create_student, create_assignment, create_class
):
    doomed = create_student(name="Leaving")
    staying = create_student(name="Staying")
    create_assignment(doomed, date.today())
    kept_assignment = create_assignment(staying, date.today())
    tomorrow = datetime.now(timezone.utc) + timedelta(days=1)
    create_class(doomed, tomorrow)
    kept_class = create_class(staying, tomorrow)

    resp = client.delete(f"/api/students/{doomed}", headers=teacher_headers)
    assert resp.status_code == 200

    assignments = client.get("/api/assignments", headers=teacher_headers).json()
    classes = client.get("/api/classes", headers=teacher_headers).json()
    assert [a["id"] for a in assignments] == [kept_assignment]
    assert [c["id"] for c in classes] == [kept_class]


def test_email_taken_between_check_and_insert_is_a_conflict(
    client, teacher_headers, create_student, monkeypatch
):
    from tutorhub.services import student_service

    create_student(email="racer@school.io")
    # the pre-check sees a free email, as it would for the losing side of a race
    monkeypatch.setattr(student_service, "_ensure_email_free", lambda *args, **kwargs: None)

    resp = client.post(
        "/api/students",
        json={"name": "Racer", "email": "racer@school.io", "level": "beginner"},
        headers=teacher_headers,
    )
    assert resp.status_code == 409
    assert resp.json() == {"detail": "Email already registered"}

    other = create_student(email="other@school.io")
    resp = client.put(
        f"/api/students/{other}",
        json={"name": "Other", "email": "racer@school.io", "level": "beginner", "status": "active"},
        headers=teacher_headers,
    )
    assert resp.status_code == 409
