import logging

from sqlalchemy import text

from models.folder import ROOT_FOLDER_ID


def _create_folder(client, name="Reports", **extra):
    r = client.post("/api/folders", json={"name": name, **extra})
    assert r.status_code == 201, r.text
    return r.json()


def _create_document(client, **overrides):
    payload = {"name": "Q1.pdf", "folder_id": ROOT_FOLDER_ID, "file_type": "pdf", "size": 2048}
    payload.update(overrides)
    r = client.post("/api/documents", json=payload)
    assert r.status_code == 201, r.text
    return r.json()


def test_root_metadata(client):
    r = client.get("/")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "Server is running"
    assert body["endpoints"]["folders"] == "/api/folders"


def test_folder_lifecycle(client):
    created = _create_folder(client, "  Reports ", created_by="Evelyn Blue")
    assert created == {"id": 2, "name": "Reports", "message": "Folder created successfully"}

    r = client.get("/api/folders")
    assert r.status_code == 200
    folders = r.json()
    assert {f["id"] for f in folders} == {ROOT_FOLDER_ID, 2}
    reports = next(f for f in folders if f["id"] == 2)
    assert reports["created_by"] == "Evelyn Blue"
    assert reports["created_at"]

    r = client.get("/api/folders/2")
    assert r.status_code == 200
    assert r.json()["name"] == "Reports"

    r = client.delete("/api/folders/2")
    assert r.status_code == 200
    assert r.json() == {"message": "Folder deleted successfully"}

    r = client.delete("/api/folders/2")
    assert r.status_code == 404
    assert r.json() == {"error": "Folder not found"}


def test_create_folder_validation(client):
    for payload in ({"name": ""}, {"name": "   "}, {}, {"name": "x" * 256}):
        r = client.post("/api/folders", json=payload)
        assert r.status_code == 400, payload
        assert "error" in r.json()


def test_malformed_body_is_400(client):
    r = client.post("/api/folders", content="{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert "error" in r.json()


def test_folder_ids_must_be_numeric(client):
    r = client.delete("/api/folders/abc")
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid folder ID"}

    r = client.get("/api/folders/abc")
    assert r.status_code == 400


def test_root_folder_is_protected(client):
    r = client.delete(f"/api/folders/{ROOT_FOLDER_ID}")
    assert r.status_code == 409
    assert r.json() == {"error": "Root folder cannot be deleted"}


def test_document_lifecycle_and_cascade(client):
    folder = _create_folder(client, "Reports")
    created = _create_document(client, folder_id=folder["id"], file_type="PDF")
    assert created["name"] == "Q1.pdf"
    assert created["message"] == "Document created successfully"

    r = client.get(f"/api/documents/{created['id']}")
    assert r.status_code == 200
    assert r.json()["file_type"] == "pdf"
    assert r.json()["size"] == 2048

    r = client.get("/api/documents", params={"folder_id": folder["id"]})
    assert r.status_code == 200
    assert [d["id"] for d in r.json()] == [created["id"]]

    r = client.get(f"/api/folders/{folder['id']}/documents/count")
    assert r.json() == {"folder_id": folder["id"], "count": 1}

    assert client.delete(f"/api/folders/{folder['id']}").status_code == 200

    r = client.get(f"/api/documents/{created['id']}")
    assert r.status_code == 404
    assert r.json() == {"error": "Document not found"}

    r = client.get("/api/documents", params={"folder_id": folder["id"]})
    assert r.status_code == 404
    assert r.json() == {"error": "Folder not found"}


def test_list_documents_empty(client):
    r = client.get("/api/documents")
    assert r.status_code == 200
    assert r.json() == []


def test_list_documents_bad_folder_id(client):
    r = client.get("/api/documents", params={"folder_id": "abc"})
    assert r.status_code == 400


def test_create_document_errors(client):
    base = {"name": "a.pdf", "folder_id": ROOT_FOLDER_ID, "file_type": "pdf", "size": 10}

    for overrides in (
        {"name": ""},
        {"folder_id": None},
        {"file_type": "  "},
        {"size": 0},
        {"size": -1},
        {"size": 524288001},
        {"size": "big"},
    ):
        r = client.post("/api/documents", json={**base, **overrides})
        assert r.status_code == 400, (overrides, r.text)
        assert "error" in r.json()

    r = client.post("/api/documents", json={**base, "folder_id": 999})
    assert r.status_code == 404
    assert r.json() == {"error": "Folder not found"}

    r = client.post("/api/documents", json={**base, "size": 524288000})
    assert r.status_code == 201


def test_numeric_strings_are_accepted(client):
    r = client.post(
        "/api/documents",
        json={"name": "notes.txt", "folder_id": str(ROOT_FOLDER_ID), "file_type": "TXT", "size": "12"},
    )
    assert r.status_code == 201, r.text


def test_search_documents(client):
    _create_document(client, name="Annual Report.pdf")
    _create_document(client, name="photo.jpg", file_type="jpg")

    r = client.get("/api/documents/search", params={"query": "report"})
    assert r.status_code == 200
    assert [d["name"] for d in r.json()] == ["Annual Report.pdf"]

    r = client.get("/api/documents/search", params={"query": "a"})
    assert r.status_code == 400
    assert r.json() == {"error": "Search query must be at least 2 characters"}

    r = client.get("/api/documents/search")
    assert r.status_code == 400
    assert r.json() == {"error": "Search query is required"}


def test_delete_document(client):
    created = _create_document(client)

    r = client.delete(f"/api/documents/{created['id']}")
    assert r.status_code == 200
    assert r.json() == {"message": "Document deleted successfully"}

    assert client.delete(f"/api/documents/{created['id']}").status_code == 404
    assert client.delete("/api/documents/xyz").status_code == 400


def test_listing_endpoint(client):
    reports = _create_folder(client, "Reports")
    _create_folder(client, "Archive")
    _create_document(client, name="readme.txt", file_type="txt")
    _create_document(client, name="Q1 report.pdf", folder_id=reports["id"])

    r = client.get("/api/listing", params={"sort": "name"})
    assert r.status_code == 200
    page = r.json()
    assert [i["name"] for i in page["items"]] == ["Archive", "readme.txt", "Reports"]
    assert page["total_items"] == 3
    assert page["page"] == 1

    r = client.get("/api/listing", params={"folder_id": reports["id"]})
    assert [i["name"] for i in r.json()["items"]] == ["Q1 report.pdf"]

    r = client.get("/api/listing", params={"query": "REPORT"})
    names = [i["name"] for i in r.json()["items"]]
    assert names == ["Reports", "Q1 report.pdf"]

    assert client.get("/api/listing", params={"folder_id": 999}).status_code == 404
    assert client.get("/api/listing", params={"page": 0}).status_code == 400


def test_ids_outside_key_range_are_rejected(client):
    too_big = "99999999999999999999"

    r = client.delete(f"/api/folders/{too_big}")
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid folder ID"}

    r = client.get(f"/api/documents/{too_big}")
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid document ID"}

    r = client.get("/api/documents", params={"folder_id": too_big})
    assert r.status_code == 400

    assert client.delete("/api/folders/0").status_code == 400
    assert client.delete("/api/documents/-5").status_code == 400


def test_create_document_with_huge_folder_id(client):
    r = client.post(
        "/api/documents",
        json={"name": "a.pdf", "folder_id": 99999999999999999999, "file_type": "pdf", "size": 10},
    )
    assert r.status_code == 404
    assert r.json() == {"error": "Folder not found"}


def test_storage_failure_returns_generic_500(client, database, caplog):
    _create_document(client, name="report.pdf")
    with database.engine.begin() as conn:
        conn.execute(text("DROP TABLE documents"))

    with caplog.at_level(logging.ERROR):
        r = client.get("/api/documents")
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to retrieve documents"}
    assert "Failed to retrieve documents" in caplog.text

    r = client.get("/api/documents/search", params={"query": "report"})
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to search documents"}

    r = client.post("/api/documents", json={"name": "b.pdf", "folder_id": ROOT_FOLDER_ID, "file_type": "pdf", "size": 1})
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to create document"}

    # the failed requests left nothing behind for the next session
    r = client.get("/api/folders")
    assert r.status_code == 200
    assert [f["id"] for f in r.json()] == [ROOT_FOLDER_ID]
