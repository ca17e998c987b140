"""
The form's state machine: input, validation, persistence and the API round trip.
"""

import mimetypes
from pathlib import Path
from typing import Dict, Optional

import requests
from loguru import logger

from ..config import API_URL
from .state import FormData, FormErrors, build_payload, validate_form
from .storage import LocalStore


class ApiError(Exception):
    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class ApiClient:
    """Thin requests wrapper around the coverforge HTTP API."""

    def __init__(self, base_url: str = API_URL, timeout: float = 120):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _check(self, response: requests.Response) -> dict:
        try:
            body = response.json()
        except ValueError:
            body = None

        if not response.ok:
            detail = body.get("error") if isinstance(body, dict) else None
            message = f"API Error: {response.status_code}"
            if detail:
                message = f"{message} - {detail}"
            raise ApiError(message, status=response.status_code)
        if not isinstance(body, dict):
            raise ApiError("API Error: unexpected response body", status=response.status_code)
        return body

    def generate(self, payload: Dict[str, str]) -> dict:
        try:
            response = requests.post(f"{self.base_url}/api/generate", json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise ApiError(f"API Error: {e}") from e
        return self._check(response)

    def parse_resume(self, path: str) -> dict:
        path = Path(path)
        mimetype = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        try:
            with open(path, "rb") as f:
                response = requests.post(
                    f"{self.base_url}/api/parse-resume",
                    files={"resume": (path.name, f, mimetype)},
                    timeout=self.timeout,
                )
        except requests.exceptions.RequestException as e:
            raise ApiError(f"API Error: {e}") from e
        return self._check(response)


class FormController:
    def __init__(self, store: LocalStore, client: Optional[ApiClient] = None):
        self.store = store
        self.client = client or ApiClient()
        self.data = store.hydrate_state() or FormData()
        self.letter = store.hydrate_letter() or ""
        self.errors: FormErrors = {}
        self.api_error = ""

    def update_field(self, field: str, value: str) -> None:
        """Set one field by camelCase key and persist the snapshot."""
        self.update_fields({field: value}, skip_empty=False)

    def update_fields(self, values: Dict[str, str], skip_empty: bool = True) -> None:
        current = self.data.to_dict()
        for field, value in values.items():
            if field not in current:
                raise KeyError(f"Unknown form field: {field}")
            if skip_empty and not value:
                continue
            current[field] = value
            self.errors.pop(field, None)
        self.data = FormData.model_validate(current)
        self.api_error = ""
        self.store.persist_state(self.data)

    @property
    def is_valid(self) -> bool:
        return not validate_form(self.data)

    @property
    def word_count(self) -> int:
        return len(self.letter.split())

    @property
    def char_count(self) -> int:
        return len(self.letter)

    def generate(self) -> Optional[str]:
        """Validate, call the API and keep the letter. None when the form is invalid."""
        errors = validate_form(self.data)
        if errors:
            self.errors = errors
            return None

        self.api_error = ""
        try:
            response = self.client.generate(build_payload(self.data))
            body = response.get("body") if isinstance(response, dict) else None
            if not body or not isinstance(body, str):
                raise ApiError("No cover letter generated")
        except ApiError as e:
            self.api_error = str(e)
            logger.warning(f"[form] Generation failed: {e}")
            raise

        self.letter = body
        self.store.persist_letter(body)
        return body

    def retry(self) -> Optional[str]:
        self.api_error = ""
        return self.generate()

    def parse_resume(self, path: str) -> Dict[str, str]:
        """Upload a resume and merge whatever came back into the form."""
        parsed = self.client.parse_resume(path)
        fields = self.data.to_dict()
        self.update_fields({k: v for k, v in parsed.items() if k in fields and isinstance(v, str)})
        return parsed

    def clear(self) -> None:
        self.data = FormData()
        self.errors = {}
        self.letter = ""
        self.api_error = ""
        self.store.clear()
