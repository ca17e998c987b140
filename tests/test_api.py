import io
import json

import pytest

from coverforge.api import app as app_module
from coverforge.llm import ollama_client
from coverforge.llm.ollama_client import CompletionError

JOB = {
    "jobTitle": "Junior Python Developer",
    "companyName": "Acme Robotics",
    "jobDescription": "Build automation tooling in Python.",
    "extraNotes": "",
}


@pytest.fixture
def client():
    app_module.app.config["TESTING"] = True
    with app_module.app.test_client() as c:
        yield c


@pytest.fixture
def letters(monkeypatch):
    seen = []

    def fake_generate(form):
        seen.append(form)
        return "Dear Hiring Manager"

    monkeypatch.setattr(app_module, "generate_cover_letter", fake_generate)
    return seen


def test_generate_returns_body(client, letters):
    resp = client.post("/api/generate", json={**JOB, "userName": "Sam", "tone": "confident"})
    assert resp.status_code == 200
    assert resp.get_json() == {"body": "Dear Hiring Manager"}
    assert letters[0].user_name == "Sam"
    assert letters[0].tone == "confident"


@pytest.mark.parametrize("field", ["jobTitle", "companyName", "jobDescription"])
@pytest.mark.parametrize("value", [None, "", "   "])
def test_generate_missing_required_field(client, letters, field, value):
    body = dict(JOB)
    if value is None:
        body.pop(field)
    else:
        body[field] = value
    resp = client.post("/api/generate", json=body)
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Missing required fields"}
    assert letters == []


def test_generate_non_json_body(client, letters):
    resp = client.post("/api/generate", data="not json", content_type="text/plain")
    assert resp.status_code == 400


def test_generate_invalid_email(client, letters):
    resp = client.post("/api/generate", json={**JOB, "email": "a@b"})
    assert resp.status_code == 400
    assert "email" in resp.get_json()["error"]


def test_generate_unknown_tone(client, letters):
    resp = client.post("/api/generate", json={**JOB, "tone": "sarcastic"})
    assert resp.status_code == 400
    assert "Unknown tone" in resp.get_json()["error"]


def test_generate_model_failure_is_500(client, monkeypatch):
    def fail(form):
        raise CompletionError("connection refused")

    monkeypatch.setattr(app_module, "generate_cover_letter", fail)
    resp = client.post("/api/generate", json=JOB)
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Internal server error"}


@pytest.fixture
def model(monkeypatch):
    answer = {"value": json.dumps({"userName": "Sam Lee", "email": "sam@lee.dev"})}
    monkeypatch.setattr(ollama_client, "complete_json", lambda prompt, images=None: answer["value"])
    return answer


RESUME = b"Sam Lee, sam@lee.dev. Python developer with two years of experience in automation."


def test_parse_resume_success(client, model):
    resp = client.post(
        "/api/parse-resume",
        data={"resume": (io.BytesIO(RESUME), "cv.txt", "text/plain")},
        content_type="multipart/form-data",
    )
    assert resp.status_code == 200
    assert resp.get_json() == {
        "userName": "Sam Lee",
        "email": "sam@lee.dev",
        "phone": "",
        "professionalSummary": "",
        "keySkills": "",
    }


def test_parse_resume_without_file(client, model):
    resp = client.post("/api/parse-resume", data={}, content_type="multipart/form-data")
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "No file provided"}


def test_parse_resume_wrong_type(client, model):
    resp = client.post(
        "/api/parse-resume",
        data={"resume": (io.BytesIO(b"\x89PNG"), "cv.png", "image/png")},
        content_type="multipart/form-data",
    )
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Invalid file type. Please upload PDF, DOCX, or TXT file."


def test_parse_resume_bad_model_output_is_500(client, model):
    model["value"] = "not json at all"
    resp = client.post(
        "/api/parse-resume",
        data={"resume": (io.BytesIO(RESUME), "cv.txt", "text/plain")},
        content_type="multipart/form-data",
    )
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Failed to parse resume. Please try again or fill in manually."}


def test_tones_and_health(client):
    assert client.get("/api/tones").get_json()["default"] == "conversational"
    assert client.get("/api/health").get_json() == {"status": "ok"}
    assert b"/apidocs" in client.get("/").data


def test_generate_treats_null_optional_fields_as_empty(client, letters):
    resp = client.post("/api/generate", json={**JOB, "extraNotes": None, "email": None})
    assert resp.status_code == 200
    assert letters[0].extra_notes == ""
    assert letters[0].email == ""


def test_generate_null_required_field_is_missing(client, letters):
    resp = client.post("/api/generate", json={**JOB, "jobTitle": None})
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Missing required fields"}


def test_parse_resume_over_limit_is_400(client, model):
    resp = client.post(
        "/api/parse-resume",
        data={"resume": (io.BytesIO(b"x" * (5 * 1024 * 1024 + 10)), "cv.txt", "text/plain")},
        content_type="multipart/form-data",
    )
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "File size exceeds 5MB limit"}
