import re
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

EMAIL_RX = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
_WS_RX = re.compile(r"\s+")

REQUIRED_FIELDS = {
    "jobTitle": "Job title is required",
    "companyName": "Company name is required",
    "jobDescription": "Job description is required",
}
JOB_FIELDS = ("jobTitle", "companyName", "jobDescription", "extraNotes")
OPTIONAL_FIELDS = ("userName", "email", "phone", "professionalSummary", "keySkills", "tone")

FormErrors = Dict[str, str]


class FormData(BaseModel):
    """Everything the form holds. Serialised with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    job_title: str = ""
    company_name: str = ""
    job_description: str = ""
    extra_notes: str = ""
    user_name: str = ""
    email: str = ""
    phone: str = ""
    professional_summary: str = ""
    key_skills: str = ""
    tone: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _blank_if_null(cls, v):
        return "" if v is None else v

    def to_dict(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True)

    def get(self, key: str) -> str:
        """Look a field up by its camelCase key."""
        return self.to_dict()[key]


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_RX.fullmatch((value or "").strip()))


def validate_email(value: str, required: bool = False) -> Optional[str]:
    if not (value or "").strip():
        return "Email is required" if required else None
    if not is_valid_email(value):
        return "Please enter a valid email address"
    return None


def validate_form(data: FormData) -> FormErrors:
    errors: FormErrors = {}
    values = data.to_dict()

    for key, message in REQUIRED_FIELDS.items():
        if not values[key].strip():
            errors[key] = message

    email_error = validate_email(values["email"])
    if email_error:
        errors["email"] = email_error

    return errors


def sanitize_text(text: str) -> str:
    return _WS_RX.sub(" ", (text or "").strip())


def build_payload(data: FormData) -> Dict[str, str]:
    """Request body for /api/generate: job fields always, the rest when set."""
    values = data.to_dict()
    payload = {key: sanitize_text(values[key]) for key in JOB_FIELDS}
    for key in OPTIONAL_FIELDS:
        cleaned = sanitize_text(values[key])
        if cleaned:
            payload[key] = cleaned
    return payload
