"""
Helpers for putting untrusted values on log records.

Pipelines log model output, scraped titles, user payloads and SDK errors,
which can be long, multi-line or oddly typed.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

MAX_LOG_VALUE = 500


def preview(text: Any, length: int = 60) -> str:
    """Single-line prefix of free text (titles, prompts)."""
    if text is None:
        return ""
    value = str(text).replace("\n", " ").strip()
    return value if len(value) <= length else value[:length] + "..."


def safe_log_value(value: Any, max_length: int = MAX_LOG_VALUE) -> str:
    """
    String form of a value for `extra`.

    Collections are summarised by size; long strings are cut with a note of
    the original length.
    """
    if value is None:
        return "None"
    if isinstance(value, (list, tuple, set)):
        return f"{type(value).__name__}({len(value)} items)"
    if isinstance(value, dict):
        return f"dict({len(value)} keys)"
    try:
        text = value if isinstance(value, str) else str(value)
    except Exception as e:
        return f"<unrepresentable {type(value).__name__}: {type(e).__name__}>"
    if len(text) > max_length:
        return f"{text[:max_length]}... ({len(text)} chars)"
    return text


def log_with_context(logger: logging.Logger, level: int, message: str, **context: Any) -> None:
    """Log with every context value passed through safe_log_value."""
    logger.log(level, message, extra={key: safe_log_value(val) for key, val in context.items()})


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """
    Log an error with its type, message and provider status.

    anthropic errors carry `status_code`, google-genai errors carry `code`;
    whichever is present is logged as error_status.
    """
    extra = {key: safe_log_value(val) for key, val in context.items()}
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(str(exc))
    extra["error_status"] = getattr(exc, "status_code", None) or getattr(exc, "code", None)
    logger.error(message, extra=extra)
