"""
Parsing helpers for loosely formatted model output.

Dependencies: json, re
System role: Claude output normalisation
"""

import json
import re
from typing import Any

_JSON_FENCE = re.compile(r"```json\s*([\s\S]*?)\s*```", re.IGNORECASE)
_ANY_FENCE = re.compile(r"```\s*([\s\S]*?)\s*```")


def extract_first_json_object(text: str | None) -> str | None:
    """
    Pull the first JSON object out of model text.

    A fenced block (```json first, then any fence) wins when its content is
    a {...} object. Otherwise braces are balanced from the first "{".

    Args:
        text: Raw model output

    Returns:
        The object's source text, or None when no balanced object is found
    """
    if not text:
        return None

    fenced = _JSON_FENCE.search(text) or _ANY_FENCE.search(text)
    if fenced and fenced.group(1):
        candidate = fenced.group(1).strip()
        if candidate.startswith("{") and candidate.endswith("}"):
            return candidate

    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    for i in range(start, len(text)):
        ch = text[i]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        if depth == 0:
            candidate = text[start : i + 1].strip()
            if candidate.startswith("{") and candidate.endswith("}"):
                return candidate
            return None
    return None


def safe_json_parse(text: str) -> dict[str, Any]:
    """
    Parse JSON without raising.

    Returns:
        {"ok": True, "value": ...} or {"ok": False, "error": message}
    """
    try:
        return {"ok": True, "value": json.loads(text)}
    except (json.JSONDecodeError, TypeError) as e:
        return {"ok": False, "error": str(e) or "Failed to parse JSON"}


def non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and len(value.strip()) > 0


def as_trimmed_string(value: Any, fallback: str = "") -> str:
    return value.strip() if non_empty_string(value) else fallback


def unique_strings(items: Any, limit: int = 10) -> list[str]:
    """
    Trimmed, case-insensitively unique strings in input order.

    Non-strings and blanks are skipped; stops after `limit` items.
    """
    if not isinstance(items, list):
        return []
    out: list[str] = []
    seen: set[str] = set()
    for item in items:
        if not non_empty_string(item):
            continue
        s = item.strip()
        if s.lower() in seen:
            continue
        seen.add(s.lower())
        out.append(s)
        if len(out) >= limit:
            break
    return out
