# Cover letter prompt assembly and generation

from typing import Dict, Optional

from loguru import logger

from .. import config
from ..form.state import FormData
from ..llm import ollama_client
from ..llm.templates import COVER_LETTER_PROMPT, DEFAULT_TONE, TONE_PRESETS
from ..match.rank import select_relevant_projects

PROFILE_LABELS = (
    ("name", "Name"),
    ("email", "Email"),
    ("phone", "Phone"),
    ("skills", "Skills"),
    ("summary", "Experience"),
    ("achievements", "Key Achievements"),
    ("links", "Links"),
)


class UnknownTone(ValueError):
    pass


def resolve_tone(tone: str) -> str:
    tone = (tone or "").strip().lower() or DEFAULT_TONE
    if tone not in TONE_PRESETS:
        raise UnknownTone(f"Unknown tone '{tone}'. Choose one of: {', '.join(TONE_PRESETS)}")
    return tone


def resolve_profile(form: FormData, defaults: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Configured profile, with any profile field the form provides taking precedence."""
    profile = dict(config.DEFAULT_PROFILE if defaults is None else defaults)
    overrides = {
        "name": form.user_name,
        "email": form.email,
        "phone": form.phone,
        "summary": form.professional_summary,
        "skills": form.key_skills,
    }
    for key, value in overrides.items():
        if value and value.strip():
            profile[key] = value.strip()
    return profile


def _signature(profile: Dict[str, str]) -> str:
    lines = ["Best"]
    lines += [profile.get(k, "") for k in ("name", "email", "phone")]
    lines += [link.strip() for link in profile.get("links", "").split(",")]
    return "\n".join(line for line in lines if line)


def build_prompt(form: FormData, profile: Optional[Dict[str, str]] = None) -> str:
    profile = profile if profile is not None else resolve_profile(form)
    tone = resolve_tone(form.tone)
    projects = select_relevant_projects(form.job_description, form.job_title)

    profile_lines = [f"- {label}: {profile[key]}" for key, label in PROFILE_LABELS if profile.get(key)]

    return COVER_LETTER_PROMPT.format(
        applicant=profile.get("name") or "the applicant",
        job_title=form.job_title.strip(),
        company_name=form.company_name.strip(),
        job_description=form.job_description.strip(),
        extra_notes=form.extra_notes.strip() or "None",
        profile="\n".join(profile_lines) or "- Not provided; keep claims general",
        projects="\n".join(f"- {p}" for p in projects),
        signature=_signature(profile),
        tone_instructions=TONE_PRESETS[tone],
    )


def generate_mock_cover_letter(form: FormData, profile: Optional[Dict[str, str]] = None) -> str:
    """Template letter for offline use when no model endpoint is available."""
    profile = profile if profile is not None else resolve_profile(form)
    skills = profile.get("skills") or "the technologies in your job posting"
    experience = profile.get("summary") or "hands-on experience shipping real projects"
    projects = select_relevant_projects(form.job_description, form.job_title)
    notes = f"\nAdditional considerations: {form.extra_notes.strip()}\n" if form.extra_notes.strip() else ""

    return f"""Dear Hiring Manager,

I am writing to express my strong interest in the {form.job_title.strip()} position at {form.company_name.strip()}. With {experience}, I am excited about the opportunity to contribute to your team.

Based on the job description, I believe my background in {skills} aligns well with your requirements. A few things I have built that are relevant here:
{chr(10).join(f"- {p}" for p in projects)}
{notes}
I would welcome the opportunity to discuss how my skills and experience can contribute to your team's continued success.

Thank you for considering my application.

{_signature(profile)}"""


def generate_cover_letter(form: FormData) -> str:
    profile = resolve_profile(form)
    if config.OFFLINE_MODE:
        logger.info("[cover] Offline mode, using template letter")
        return generate_mock_cover_letter(form, profile)

    prompt = build_prompt(form, profile)
    logger.info(f"[cover] Generating letter for {form.job_title.strip()} at {form.company_name.strip()}")
    return ollama_client.complete(prompt)
