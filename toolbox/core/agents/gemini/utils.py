"""Small helpers shared by the Gemini pipelines."""

import re
from datetime import datetime

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def long_date(day: datetime) -> str:
    """Format a date as e.g. "October 19, 2026"."""
    return f"{day:%B} {day.day}, {day.year}"


def slugify(text: str, max_length: int = 100) -> str:
    """Lowercase, collapse non-alphanumeric runs to "-", trim edges."""
    return _NON_ALNUM.sub("-", text.lower()).strip("-")[:max_length]


def word_set(text: str) -> set[str]:
    return {word for word in text.split() if word}


def jaccard_similarity(words1: set[str], words2: set[str]) -> float:
    """|A & B| / |A | B|, 0.0 when both sets are empty."""
    union = words1 | words2
    if not union:
        return 0.0
    return len(words1 & words2) / len(union)
