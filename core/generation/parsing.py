"""
Parsing of raw remote generation output.
"""

from __future__ import annotations

import json
import re

from pydantic import ValidationError

from core.errors import RemoteGenerationFailure
from core.generation.schemas import GenerationResult


CODE_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)


def strip_code_fences(text: str) -> str:
    """Remove ``` / ```json fence markers and surrounding whitespace."""
    return CODE_FENCE_RE.sub("", text or "").strip()


def parse_generation_response(raw: str) -> GenerationResult:
    """
    Parse a raw model reply into a GenerationResult.

    Raises:
        RemoteGenerationFailure: If the reply is empty, is not JSON, or has
            neither a "cards" nor a "categories" list
    """
    cleaned = strip_code_fences(raw)
    if not cleaned:
        raise RemoteGenerationFailure("AI failed to return content.")

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError:
        data = _load_embedded_object(cleaned)

    if not isinstance(data, dict) or not ({"cards", "categories"} & data.keys()):
        raise RemoteGenerationFailure("AI response has no 'cards' or 'categories'")

    try:
        return GenerationResult.model_validate(data)
    except ValidationError as exc:
        raise RemoteGenerationFailure(f"AI response has an unexpected shape: {exc}") from exc


def _load_embedded_object(text: str):
    """Parse the outermost {...} span when the model wrapped JSON in prose."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        raise RemoteGenerationFailure("AI response is not JSON")
    try:
        return json.loads(text[start:end + 1])
    except json.JSONDecodeError as exc:
        raise RemoteGenerationFailure(f"AI response is not valid JSON: {exc}") from exc
