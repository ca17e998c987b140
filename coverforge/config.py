"""
Configuration settings for coverforge.

Values come from the environment (a local .env file is loaded first), so the
same code runs against a local Ollama daemon or a hosted endpoint.
"""

from dotenv import load_dotenv
load_dotenv()          # must run before os.getenv(...)
import os

# Completion endpoint
OLLAMA_HOST = os.getenv("OLLAMA_HOST", "http://localhost:11434")
OLLAMA_MODEL = os.getenv("OLLAMA_MODEL", "llama3.1:8b")
OLLAMA_VISION_MODEL = os.getenv("OLLAMA_VISION_MODEL", "llama3.2-vision")

# Fixed generation parameters
COVER_LETTER_OPTIONS = {
    "temperature": 0.7,
    "num_predict": 1000,
}
RESUME_PARSE_OPTIONS = {
    "temperature": 0.3,
    "num_predict": 800,
}

# Storage
DB_URL = os.getenv("DB_URL", "sqlite:///coverforge.db")

# API
API_URL = os.getenv("COVERFORGE_API_URL", "http://localhost:5001")
PORT = int(os.getenv("PORT", "5001"))
OFFLINE_MODE = os.getenv("COVERFORGE_OFFLINE", "").lower() in ("1", "true", "yes")

# Resume uploads
MAX_RESUME_BYTES = 5 * 1024 * 1024
MIN_RESUME_CHARS = 50
MAX_PDF_PAGES = 3

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "")

# Default applicant profile, overridden per request by the form's profile fields
DEFAULT_PROFILE = {
    "name": os.getenv("PROFILE_NAME", ""),
    "email": os.getenv("PROFILE_EMAIL", ""),
    "phone": os.getenv("PROFILE_PHONE", ""),
    "summary": os.getenv("PROFILE_SUMMARY", ""),
    "skills": os.getenv("PROFILE_SKILLS", ""),
    "achievements": os.getenv("PROFILE_ACHIEVEMENTS", ""),
    "links": os.getenv("PROFILE_LINKS", ""),
}
