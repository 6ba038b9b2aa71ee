from pathlib import Path


def _upload(client, headers, filename="worksheet.PDF", content=b"%PDF-1.4 worksheet", **fields):
    data = {"title": "Worksheet", "type": "worksheet", "description": "Practice", "level": "beginner"}
    data.update(fields)
    return client.post(
        "/api/resources",
        data=data,
        files={"file": (filename, content, "application/pdf")},
        headers=headers,
    )


def test_upload_is_stored_and_served(client, teacher_headers, settings):
    resp = _upload(client, teacher_headers)
    assert resp.status_code == 201
    assert resp.json()["message"] == "Resource added successfully"

    rows = client.get("/api/resources", headers=teacher_headers).json()
    assert len(rows) == 1
    row = rows[0]
    assert row["title"] == "Worksheet"
    assert row["type"] == "worksheet"
    assert row["level"] == "beginner"
    assert row["file_path"].startswith("uploads/")
    assert row["file_path"].endswith(".pdf")
    assert row["file_url"] == "/" + row["file_path"]

    stored = Path(settings.UPLOADS_DIR) / Path(row["file_path"]).name
    assert stored.read_bytes() == b"%PDF-1.4 worksheet"

    served = client.get(row["file_url"])
    assert served.status_code == 200
    assert served.content == b"%PDF-1.4 worksheet"


def test_same_filename_twice_gets_two_stored_files(client, teacher_headers):
    _upload(client, teacher_headers, content=b"one")
    _upload(client, teacher_headers, content=b"two")
    paths = {r["file_path"] for r in client.get("/api/resources", headers=teacher_headers).json()}
    assert len(paths) == 2


def test_resource_without_file(client, teacher_headers):
    resp = client.post(
        "/api/resources",
        data={"title": "Useful link", "type": "document", "description": "Dictionary site"},
        headers=teacher_headers,
    )
    assert resp.status_code == 201

    row = client.get("/api/resources", headers=teacher_headers).json()[0]
    assert row["file_path"] is None
    assert row["file_url"] is None
    assert row["level"] is None


def test_unknown_resource_type_is_rejected(client, teacher_headers):
    resp = _upload(client, teacher_headers, type="spreadsheet")
    assert resp.status_code == 422
    assert client.get("/api/resources", headers=teacher_headers).json() == []


def test_resources_are_listed_newest_first(client, teacher_headers):
    _upload(client, teacher_headers, title="first")
    _upload(client, teacher_headers, title="second")
    titles = [r["title"] for r in client.get("/api/resources", headers=teacher_headers).json()]
    assert titles == ["second", "first"]
