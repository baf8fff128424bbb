"""
JSON extraction from Gemini responses.

Models wrap JSON in markdown fences or surround it with prose. Two
strategies are used: fenced-first (discovery, enrichment) and
outermost-bracket-first (news, SEO).

Dependencies: json, re
System role: Response parsing for Gemini pipelines
"""

import json
import re
from typing import Any

_FENCED_ARRAY = re.compile(r"```(?:json)?\s*(\[[\s\S]*?\])\s*```")
_FENCED_OBJECT = re.compile(r"```(?:json)?\s*(\{[\s\S]*?\})\s*```")
_OUTER_ARRAY = re.compile(r"\[[\s\S]*\]")
_OUTER_OBJECT = re.compile(r"\{[\s\S]*\}")
_ANY_FENCE = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```")


def parse_fenced_json(text: str, expect: str = "array") -> Any:
    """
    Parse the first fenced JSON array/object, or the whole text.

    Args:
        text: Raw model output
        expect: "array" or "object"; selects the fence pattern

    Raises:
        json.JSONDecodeError: If nothing parses
    """
    pattern = _FENCED_ARRAY if expect == "array" else _FENCED_OBJECT
    match = pattern.search(text)
    return json.loads(match.group(1) if match else text.strip())


def parse_outer_json(text: str, expect: str = "array") -> Any | None:
    """
    Parse the outermost [...] or {...} span, falling back to a fenced block.

    Returns:
        Parsed JSON, or None when no candidate span exists

    Raises:
        json.JSONDecodeError: If a candidate span exists but is invalid
    """
    pattern = _OUTER_ARRAY if expect == "array" else _OUTER_OBJECT
    match = pattern.search(text)
    if match:
        return json.loads(match.group(0))
    fenced = _ANY_FENCE.search(text)
    if fenced:
        return json.loads(fenced.group(1))
    return None
