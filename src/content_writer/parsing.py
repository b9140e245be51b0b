"""Parsing of raw completion text into typed results.

Kept apart from the network call so captured model answers can be fed
straight into these functions.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from src.common.errors import ParseError

from .models import GeneratedPost


def extract_json_block(response_text: str) -> str:
    """Return the JSON payload, unwrapping a ```json ... ``` fence if present."""
    json_str = response_text
    if "```json" in json_str:
        json_str = json_str.split("```json")[1].split("```")[0]
    elif "```" in json_str:
        json_str = json_str.split("```")[1].split("```")[0]
    return json_str.strip()


def parse_json(response_text: str) -> Any:
    """Decode completion text as JSON.

    Raises:
        ParseError: If the text is not valid JSON
    """
    json_str = extract_json_block(response_text)
    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ParseError(
            f"Completion is not valid JSON: {e.msg}", raw_text=response_text
        ) from e


def parse_generated_post(response_text: str) -> GeneratedPost:
    """Validate the post generation answer against {title, content, tags}.

    Raises:
        ParseError: On invalid JSON, a non-object payload or schema mismatch
    """
    data = parse_json(response_text)
    if not isinstance(data, dict):
        raise ParseError(
            f"Expected a JSON object, got {type(data).__name__}",
            raw_text=response_text,
        )
    try:
        return GeneratedPost.model_validate(data)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise ParseError(
            f"Generated post failed validation ({fields})", raw_text=response_text
        ) from e


def clean_completion_text(response_text: str) -> str:
    """Trim a plain-text completion, removing surrounding quotes if present."""
    text = response_text.strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "\"'":
        text = text[1:-1].strip()
    return text
