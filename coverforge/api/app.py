from flask import Flask, jsonify, request
from flask_cors import CORS
from flasgger import Swagger
from loguru import logger
from pydantic import ValidationError

from ..config import MAX_RESUME_BYTES
from ..cover.generator import UnknownTone, generate_cover_letter, resolve_tone
from ..form.state import FormData, REQUIRED_FIELDS, validate_email
from ..llm.templates import DEFAULT_TONE, TONE_PRESETS
from ..parse_resume import InvalidUpload, parse_resume

app = Flask(__name__)
CORS(app)  # Enable CORS for all routes

# Configure Swagger
app.config['SWAGGER'] = {
    'title': 'Cover Letter Generator API',
    'uiversion': 3,
    'version': '1.0.0',
    'description': 'Generate tailored cover letters and pre-fill profiles from uploaded resumes',
    'termsOfService': '',
    'hide_top_bar': True
}

swagger = Swagger(app, template={
    "info": {
        "title": "Cover Letter Generator API",
        "description": "Generate tailored cover letters and pre-fill profiles from uploaded resumes",
        "version": "1.0.0"
    },
    "tags": [
        {"name": "Cover Letter", "description": "Cover letter generation"},
        {"name": "Resume", "description": "Resume upload and field extraction"}
    ]
})

PARSE_FAILED = "Failed to parse resume. Please try again or fill in manually."


@app.route('/api/generate', methods=['POST'])
def generate():
    """
    Generate a cover letter
    ---
    tags:
      - Cover Letter
    parameters:
      - name: body
        in: body
        required: true
        schema:
          type: object
          required: [jobTitle, companyName, jobDescription]
          properties:
            jobTitle: {type: string, example: "Junior Python Developer"}
            companyName: {type: string, example: "Acme"}
            jobDescription: {type: string, example: "Build REST APIs in Python..."}
            extraNotes: {type: string}
            userName: {type: string}
            email: {type: string}
            phone: {type: string}
            professionalSummary: {type: string}
            keySkills: {type: string}
            tone: {type: string, enum: [conversational, professional, enthusiastic, confident]}
    responses:
      200:
        description: The generated letter
        schema:
          type: object
          properties:
            body: {type: string}
      400:
        description: Missing required fields or invalid input
      500:
        description: Internal server error
    """
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return jsonify({"error": "Missing required fields"}), 400

    try:
        form = FormData.model_validate(body)
    except ValidationError:
        return jsonify({"error": "Invalid request body"}), 400

    values = form.to_dict()
    if any(not values[key].strip() for key in REQUIRED_FIELDS):
        return jsonify({"error": "Missing required fields"}), 400

    email_error = validate_email(form.email)
    if email_error:
        return jsonify({"error": email_error}), 400

    try:
        resolve_tone(form.tone)
    except UnknownTone as e:
        return jsonify({"error": str(e)}), 400

    try:
        letter = generate_cover_letter(form)
        return jsonify({"body": letter})
    except Exception:
        logger.exception("[api] Cover letter generation failed")
        return jsonify({"error": "Internal server error"}), 500


@app.route('/api/parse-resume', methods=['POST'])
def parse_resume_upload():
    """
    Extract profile fields from a resume
    ---
    tags:
      - Resume
    consumes:
      - multipart/form-data
    parameters:
      - name: resume
        in: formData
        type: file
        required: true
        description: PDF, DOCX or TXT, up to 5MB
    responses:
      200:
        description: Extracted profile fields
        schema:
          type: object
          properties:
            userName: {type: string}
            email: {type: string}
            phone: {type: string}
            professionalSummary: {type: string}
            keySkills: {type: string}
      400:
        description: No file, wrong type, too large, or no readable text
      500:
        description: Parsing failed
    """
    f = request.files.get('resume')
    # one byte over the ceiling is enough to reject the upload
    data = f.stream.read(MAX_RESUME_BYTES + 1) if f else None

    try:
        parsed = parse_resume(data, f.mimetype if f else "", filename=f.filename if f else None)
        return jsonify(parsed.model_dump(by_alias=True))
    except InvalidUpload as e:
        return jsonify({"error": str(e)}), 400
    except Exception:
        logger.exception("[api] Resume parsing failed")
        return jsonify({"error": PARSE_FAILED}), 500


@app.route('/api/tones', methods=['GET'])
def list_tones():
    """
    List tone presets
    ---
    tags:
      - Cover Letter
    responses:
      200:
        description: Available tones and the default
    """
    return jsonify({"tones": list(TONE_PRESETS), "default": DEFAULT_TONE})


@app.route('/api/health', methods=['GET'])
def health():
    return jsonify({"status": "ok"})


@app.route('/')
def index():
    """Landing page pointing at the Swagger UI"""
    return (
        "<!DOCTYPE html><title>Cover Letter Generator API</title>"
        "<h1>Cover Letter Generator API</h1>"
        "<p>POST job details to <code>/api/generate</code>, upload a resume to "
        "<code>/api/parse-resume</code>. Full reference: <a href='/apidocs'>Swagger UI</a>.</p>"
    )
