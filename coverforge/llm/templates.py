from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_TONE = "conversational"

# Tone preset -> instruction block dropped into the cover letter prompt
TONE_PRESETS = {
    "conversational": """- Use casual, conversational language
- Sound human and authentic, not corporate
- Keep sentences short and punchy
- No buzzwords or corporate speak""",
    "professional": """- Use polished, professional language suitable for a formal application
- Stay warm but measured; no slang or contractions-heavy phrasing
- Lead with relevant qualifications and concrete results
- Avoid hyperbole and empty superlatives""",
    "enthusiastic": """- Show genuine excitement about the role and the company
- Use energetic, positive phrasing without sounding over the top
- Connect personal motivation to the team's mission
- Keep it specific so the enthusiasm reads as earned""",
    "confident": """- Be direct and assured, but never arrogant
- Use strong "I" statements backed by specific outcomes
- Frame past work as evidence of what you will deliver here
- Cut hedging words such as maybe, hopefully and I think""",
}

COVER_LETTER_PROMPT = """\
You are {applicant} writing a cover letter. Follow the structure below and write in the requested tone, with a problem-solving focus.

**Job Information:**
- Position: {job_title}
- Company: {company_name}
- Job Description: {job_description}
- Additional Notes: {extra_notes}

**Your Profile:**
{profile}

**Relevant Projects (Select 3-4 most relevant):**
{projects}

**STRUCTURE TO FOLLOW:**

[Opening hook - a short personal philosophy about work that ties into {company_name}]

[Introduction - the {job_title} role at {company_name}, one specific thing from the job description that stood out, and the team/culture aspect that fits]

[Current work - what you do now, with two or three concrete technical achievements relevant to the role]

[Projects - the relevant projects above, one line each, framed as tools you built when something didn't exist]

[Values - what you are looking for in a team and why {company_name} fits]

[Close - a short invitation to talk further, then sign off with:]
{signature}

**TONE REQUIREMENTS:**
{tone_instructions}

**GENERAL RULES:**
- Never invent employers, dates, or metrics that are not in the profile
- Adapt technical details to match the job requirements
- Replace every bracketed section with real content; no placeholders in the output

Generate the cover letter now:"""

RESUME_PARSE_PROMPT = """\
You are a resume parser. Extract the following information from this resume and return it as JSON.
{resume_section}
Extract and return ONLY a JSON object with these exact fields:
{{
  "userName": "Full name of the person",
  "email": "Email address (empty string if not found)",
  "phone": "Phone number (empty string if not found)",
  "professionalSummary": "A 2-3 sentence summary of their experience and background",
  "keySkills": "Comma-separated list of their main technical and professional skills"
}}

Rules:
- userName: Extract the person's full name from the top of the resume
- email: Extract email address if present
- phone: Extract phone number if present (format as-is)
- professionalSummary: Write a concise 2-3 sentence summary capturing their role, experience level, and key strengths
- keySkills: List 8-12 most relevant skills as comma-separated values

If any field cannot be found, use an empty string. Return ONLY the JSON object, no other text.
"""

class ParsedResumeData(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_name: str = Field("", description="Full name")
    email: str = ""
    phone: str = ""
    professional_summary: str = Field("", description="2-3 sentences")
    key_skills: str = Field("", description="Comma-separated, 8-12 skills")

    @field_validator("*", mode="before")
    @classmethod
    def _blank_if_missing(cls, v):
        if v is None:
            return ""
        if isinstance(v, list):
            return ", ".join(str(x) for x in v)
        return v if isinstance(v, str) else str(v)
