"""
test_api.py - FastAPI endpoint tests

Covers the form operations (add/delete/clear), CSV upload, export and
session management.
"""
import pytest
from fastapi.testclient import TestClient

from experience_calculator.api.main import app
from experience_calculator.api.state import SESSIONS
from experience_calculator.report import LatexReportWriter

SID = "session-abc123"


@pytest.fixture
def client():
    SESSIONS.clear()
    with TestClient(app) as c:
        yield c
    SESSIONS.clear()


def _add(client, name="Acme", start="2020-01-15", end="2022-03-20"):
    return client.post(f"/sessions/{SID}/experiences", json={"company_name": name, "start_date": start, "end_date": end})


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_root(client):
    assert "Experience Calculator" in client.get("/").json()["message"]


def test_empty_session_has_no_summary(client):
    response = client.get(f"/sessions/{SID}/experiences")
    assert response.status_code == 200
    assert response.json() == {"entries": [], "summary": None}


def test_add_then_delete(client):
    response = _add(client)
    assert response.status_code == 201
    assert response.json() == {
        "company_name": "Acme",
        "start_date": "2020-01-15",
        "end_date": "2022-03-20",
        "total_experience": "2 years, 2 months, 5 days",
    }
    listing = client.get(f"/sessions/{SID}/experiences").json()
    assert listing["summary"] == "2 years, 2 months, 5 days"

    response = client.delete(f"/sessions/{SID}/experiences/0")
    assert response.status_code == 200
    assert response.json() == {"entries": [], "summary": None}


def test_validation_errors(client):
    response = _add(client, name="  ", start="2022-01-02", end="2022-01-01")
    assert response.status_code == 400
    assert response.json() == {"errors": {
        "company_name": "Company Name is required",
        "date": "Start Date cannot be greater than End Date",
    }}
    assert client.get(f"/sessions/{SID}/experiences").json()["entries"] == []


def test_malformed_date_is_422(client):
    assert _add(client, start="2022-02-30").status_code == 422


def test_delete_out_of_range(client):
    _add(client)
    assert client.delete(f"/sessions/{SID}/experiences/5").status_code == 404
    assert client.delete(f"/sessions/{SID}/experiences/-1").status_code == 404


def test_clear_all(client):
    _add(client)
    _add(client, name="Globex", start="2022-04-01", end="2023-04-15")
    assert client.get(f"/sessions/{SID}/experiences").json()["summary"] == "3 years, 2 months, 19 days"
    response = client.delete(f"/sessions/{SID}/experiences")
    assert response.json() == {"entries": [], "summary": None}


def test_invalid_session_id(client):
    assert client.get("/sessions/bad/experiences").status_code == 400


def test_sessions_listing_and_drop(client):
    _add(client)
    assert client.get("/sessions").json() == {"sessions": [SID]}
    assert client.delete(f"/sessions/{SID}").status_code == 200
    assert client.delete(f"/sessions/{SID}").status_code == 404


def test_upload_entries(client):
    csv = b"company_name,start_date,end_date\nAcme,2020-01-15,2022-03-20\nBad,2021-01-01,2020-01-01\n"
    response = client.post(f"/sessions/{SID}/upload-entries", files={"file": ("entries.csv", csv, "text/csv")})
    assert response.status_code == 200
    body = response.json()
    assert body["added"] == 1
    assert body["rows"] == 2
    assert body["rejected"][0]["row"] == 1


def test_upload_rejects_non_csv(client):
    response = client.post(f"/sessions/{SID}/upload-entries", files={"file": ("entries.txt", b"x", "text/plain")})
    assert response.status_code == 400


def test_upload_rejects_missing_columns(client):
    response = client.post(f"/sessions/{SID}/upload-entries", files={"file": ("e.csv", b"company_name\nAcme\n", "text/csv")})
    assert response.status_code == 400
    assert "Missing required columns" in response.json()["detail"]


def test_export_requires_entries(client):
    assert client.post(f"/sessions/{SID}/export", json={"format": "pdf"}).status_code == 400


def test_export_unknown_format(client):
    _add(client)
    assert client.post(f"/sessions/{SID}/export", json={"format": "html"}).status_code == 400


def test_export_pdf(client):
    _add(client)
    response = client.post(f"/sessions/{SID}/export", json={"format": "pdf", "title": "Vijay"})
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.content.startswith(b"%PDF")


def test_export_latex_source(client):
    _add(client)
    response = client.post(f"/sessions/{SID}/export", json={"format": "latex", "to_pdf": False})
    assert response.status_code == 200
    assert b"Overall Experience: 2 years, 2 months, 5 days" in response.content


def test_export_word_source(client):
    _add(client)
    response = client.post(f"/sessions/{SID}/export", json={"format": "word", "to_pdf": False})
    assert response.status_code == 200
    assert response.content[:2] == b"PK"


def test_reads_and_failed_writes_leave_registry_empty(client):
    for i in range(5):
        assert client.get(f"/sessions/reader-{i:04d}/experiences").json() == {"entries": [], "summary": None}
        assert client.delete(f"/sessions/deleter-{i:04d}/experiences/0").status_code == 404
        assert client.delete(f"/sessions/clearer-{i:04d}/experiences").json() == {"entries": [], "summary": None}
        assert client.post(f"/sessions/exporter-{i:04d}/export", json={"format": "pdf"}).status_code == 400
    assert SESSIONS == {}
    assert client.get("/sessions").json() == {"sessions": []}


def test_rejected_upload_does_not_register_session(client):
    response = client.post(f"/sessions/{SID}/upload-entries", files={"file": ("e.csv", b"company_name\nAcme\n", "text/csv")})
    assert response.status_code == 400
    assert SID not in SESSIONS


def test_export_render_failure_is_500(client, monkeypatch):
    def fail(self, output, src_path=None):
        raise RuntimeError("LaTeX to PDF conversion failed")

    monkeypatch.setattr(LatexReportWriter, "to_pdf", fail)
    _add(client)
    response = client.post(f"/sessions/{SID}/export", json={"format": "latex"})
    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to render export"}


def test_responses_carry_request_id(client):
    first = client.get("/health").headers["x-request-id"]
    second = client.get("/health").headers["x-request-id"]
    assert len(first) == 32
    assert first != second
