import pytest

from coverforge import config
from coverforge.cover import generator
from coverforge.cover.generator import (
    UnknownTone,
    build_prompt,
    generate_cover_letter,
    generate_mock_cover_letter,
    resolve_profile,
    resolve_tone,
)
from coverforge.llm.templates import TONE_PRESETS

PROFILE = {
    "name": "Sam Lee",
    "email": "sam@lee.dev",
    "phone": "",
    "summary": "Two years building internal tools",
    "skills": "Python, SQL",
    "achievements": "",
    "links": "github.com/samlee, linkedin.com/in/samlee",
}


def test_prompt_contains_job_profile_and_projects(filled_form):
    prompt = build_prompt(filled_form, PROFILE)
    assert "- Position: Junior Python Developer" in prompt
    assert "- Company: Acme Robotics" in prompt
    assert "- Additional Notes: Available from March" in prompt
    assert "- Name: Sam Lee" in prompt
    assert "- Skills: Python, SQL" in prompt
    assert "- Phone:" not in prompt
    assert "TextExtraction-GoogleSheets – Automated text extraction" in prompt
    assert "github.com/samlee\nlinkedin.com/in/samlee" in prompt


def test_prompt_uses_requested_tone(filled_form):
    prompt = build_prompt(filled_form.model_copy(update={"tone": "Professional"}), PROFILE)
    assert TONE_PRESETS["professional"] in prompt
    assert TONE_PRESETS["conversational"] not in prompt


def test_default_tone_and_empty_notes(filled_form):
    prompt = build_prompt(filled_form.model_copy(update={"extra_notes": "  "}), PROFILE)
    assert TONE_PRESETS["conversational"] in prompt
    assert "- Additional Notes: None" in prompt


def test_prompt_without_profile(filled_form):
    empty = {k: "" for k in PROFILE}
    prompt = build_prompt(filled_form, empty)
    assert prompt.startswith("You are the applicant writing a cover letter.")
    assert "Not provided" in prompt


def test_unknown_tone_rejected():
    assert resolve_tone("") == "conversational"
    assert resolve_tone(" CONFIDENT ") == "confident"
    with pytest.raises(UnknownTone):
        resolve_tone("sarcastic")


def test_form_profile_overrides_defaults(filled_form):
    form = filled_form.model_copy(update={"user_name": "Alex Kim", "key_skills": "  "})
    profile = resolve_profile(form, PROFILE)
    assert profile["name"] == "Alex Kim"
    assert profile["skills"] == "Python, SQL"
    assert profile["email"] == "sam@lee.dev"


def test_generate_calls_completion(monkeypatch, filled_form):
    prompts = []
    monkeypatch.setattr(config, "OFFLINE_MODE", False)
    monkeypatch.setattr(generator.ollama_client, "complete", lambda p: prompts.append(p) or "the letter")
    assert generate_cover_letter(filled_form) == "the letter"
    assert "Acme Robotics" in prompts[0]


def test_offline_mode_skips_the_model(monkeypatch, filled_form):
    def fail(prompt):
        raise AssertionError("model should not be called")

    monkeypatch.setattr(config, "OFFLINE_MODE", True)
    monkeypatch.setattr(generator.ollama_client, "complete", fail)
    letter = generate_cover_letter(filled_form)
    assert letter.startswith("Dear Hiring Manager,")
    assert "Junior Python Developer position at Acme Robotics" in letter


def test_mock_letter_includes_notes_and_signature(filled_form):
    letter = generate_mock_cover_letter(filled_form, PROFILE)
    assert "Additional considerations: Available from March" in letter
    assert letter.endswith("Best\nSam Lee\nsam@lee.dev\ngithub.com/samlee\nlinkedin.com/in/samlee")
