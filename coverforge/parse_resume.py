"""
Resume upload -> structured profile fields.

PDFs are rendered to page images and read by the vision model; DOCX and plain
text are extracted locally and sent as text.
"""

import io
import json
import mimetypes
import sys
from typing import List, Optional

import fitz  # PyMuPDF
from docx import Document
from loguru import logger

from .config import MAX_PDF_PAGES, MAX_RESUME_BYTES, MIN_RESUME_CHARS
from .llm import ollama_client
from .llm.templates import RESUME_PARSE_PROMPT, ParsedResumeData

PDF = "application/pdf"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TXT = "text/plain"
ALLOWED_TYPES = (PDF, DOCX, TXT)


class InvalidUpload(ValueError):
    """The upload is missing, of the wrong type, too large, or empty."""


class ResumeParseError(Exception):
    """The model answer could not be turned into resume fields."""


def resolve_mimetype(mimetype: Optional[str], filename: Optional[str]) -> str:
    mimetype = (mimetype or "").split(";")[0].strip().lower()
    if mimetype in ("", "application/octet-stream") and filename:
        mimetype = mimetypes.guess_type(filename)[0] or mimetype
    return mimetype


def validate_upload(data: Optional[bytes], mimetype: str) -> None:
    if data is None:
        raise InvalidUpload("No file provided")
    if mimetype not in ALLOWED_TYPES:
        raise InvalidUpload("Invalid file type. Please upload PDF, DOCX, or TXT file.")
    if len(data) > MAX_RESUME_BYTES:
        raise InvalidUpload("File size exceeds 5MB limit")


def render_pdf_pages(data: bytes, max_pages: int = MAX_PDF_PAGES) -> List[bytes]:
    """PNG bytes for the first pages of a PDF."""
    images = []
    with fitz.open(stream=data, filetype="pdf") as doc:
        for i in range(min(doc.page_count, max_pages)):
            pix = doc.load_page(i).get_pixmap(dpi=150)
            images.append(pix.tobytes("png"))
    return images


def extract_text_from_docx(data: bytes) -> str:
    doc = Document(io.BytesIO(data))
    parts = [p.text.strip() for p in doc.paragraphs if p.text and p.text.strip()]
    return "\n".join(parts)


def extract_text_from_txt(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _require_text(text: str) -> str:
    if not text or len(text.strip()) < MIN_RESUME_CHARS:
        raise InvalidUpload("Could not extract meaningful text from the resume")
    return text


def parse_model_output(content: str) -> ParsedResumeData:
    try:
        parsed = json.loads(content or "{}")
    except json.JSONDecodeError as e:
        raise ResumeParseError("Failed to parse AI response") from e
    if not isinstance(parsed, dict):
        raise ResumeParseError("Failed to parse AI response")
    return ParsedResumeData.model_validate(parsed)


def parse_resume(data: Optional[bytes], mimetype: str, filename: Optional[str] = None) -> ParsedResumeData:
    mimetype = resolve_mimetype(mimetype, filename)
    validate_upload(data, mimetype)
    logger.info(f"[resume] Parsing {filename or 'upload'} ({mimetype}, {len(data)} bytes)")

    if mimetype == PDF:
        images = render_pdf_pages(data)
        prompt = RESUME_PARSE_PROMPT.format(resume_section="The resume pages are attached as images.\n")
        content = ollama_client.complete_json(prompt, images=images)
    else:
        text = extract_text_from_docx(data) if mimetype == DOCX else extract_text_from_txt(data)
        text = _require_text(text)
        prompt = RESUME_PARSE_PROMPT.format(resume_section=f"\nResume Text:\n{text}\n")
        content = ollama_client.complete_json(prompt)

    out = parse_model_output(content)
    logger.info(f"[resume] Extracted fields for {out.user_name or 'unknown applicant'}")
    return out


def main():
    if len(sys.argv) < 2:
        print("Usage: python -m coverforge.parse_resume path/to/resume.pdf")
        sys.exit(1)
    path = sys.argv[1]
    with open(path, "rb") as f:
        data = f.read()
    out = parse_resume(data, mimetypes.guess_type(path)[0] or "", filename=path)
    print(json.dumps(out.model_dump(by_alias=True), indent=2))

if __name__ == "__main__":
    main()
