"""Utilities for extracting a JSON object from free-text LLM responses."""

from __future__ import annotations

import json
import re
from typing import Any, Optional

# Greedy: first "{" through the last "}" in the text, across newlines.
_JSON_OBJECT_SPAN = re.compile(r"\{[\s\S]*\}")


class JSONExtractionError(ValueError):
    """No JSON object could be located in, or parsed from, the text."""


def find_json_object_span(text: str) -> Optional[str]:
    """Return the greedy first-"{"-to-last-"}" substring, or None."""
    if not text:
        return None
    match = _JSON_OBJECT_SPAN.search(text)
    if not match:
        return None
    return match.group(0)


def extract_json_object(text: str) -> dict[str, Any]:
    """
    Locate and strictly parse the JSON object embedded in an LLM reply.

    Stage one finds the candidate span, stage two runs json.loads on it.
    Either stage failing raises JSONExtractionError; the parsed value must
    be an object.
    """
    block = find_json_object_span(text)
    if block is None:
        raise JSONExtractionError("No JSON object found in response")
    try:
        data = json.loads(block)
    except json.JSONDecodeError as exc:
        raise JSONExtractionError(f"Invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise JSONExtractionError("Expected a JSON object")
    return data
