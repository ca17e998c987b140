"""
Completion client for the hosted model endpoint (Ollama API).

One call per request with fixed parameters. Transport and model errors are
wrapped in CompletionError; nothing is retried.
"""

from typing import Dict, List, Optional

import ollama
from loguru import logger

from ..config import (
    COVER_LETTER_OPTIONS,
    OLLAMA_HOST,
    OLLAMA_MODEL,
    OLLAMA_VISION_MODEL,
    RESUME_PARSE_OPTIONS,
)

EMPTY_LETTER = "Failed to generate cover letter"


class CompletionError(Exception):
    """The completion endpoint failed or could not be reached."""


_client: Optional[ollama.Client] = None

def get_client() -> ollama.Client:
    global _client
    if _client is None:
        _client = ollama.Client(host=OLLAMA_HOST)
    return _client


def _chat(model: str, messages: List[Dict], options: Dict, format: Optional[str] = None) -> str:
    try:
        resp = get_client().chat(
            model=model,
            messages=messages,
            format=format,
            stream=False,
            options=options,
        )
    except (ollama.ResponseError, ollama.RequestError, ConnectionError) as e:
        logger.error(f"[LLM] {model} call failed: {e}")
        raise CompletionError(str(e)) from e

    content = (resp.message.content or "").strip()
    logger.debug(f"[LLM] Raw output: {content[:500]}...")
    return content


def complete(prompt: str) -> str:
    """Cover letter text for a fully assembled prompt."""
    content = _chat(
        OLLAMA_MODEL,
        [{"role": "user", "content": prompt}],
        COVER_LETTER_OPTIONS,
    )
    return content or EMPTY_LETTER


def complete_json(prompt: str, images: Optional[List[bytes]] = None) -> str:
    """JSON-mode completion. Page images switch to the vision model."""
    message = {"role": "user", "content": prompt}
    model = OLLAMA_MODEL
    if images:
        message["images"] = images
        model = OLLAMA_VISION_MODEL
    return _chat(model, [message], RESUME_PARSE_OPTIONS, format="json")
