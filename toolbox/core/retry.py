"""
Retry policies for database writes and Gemini calls.

Two policies share tenacity's exponential backoff:
- Database operations retry transient failures but never fatal ones
  (missing relation, unique violation, syntax or array-literal errors).
- Gemini calls retry only on rate limiting (HTTP 429 / quota exhausted).

Dependencies: tenacity
System role: Resilience helpers for discovery pipelines
"""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

FATAL_SQLSTATES = {"42P01", "23505"}
FATAL_MESSAGE_MARKERS = (
    "does not exist",
    "malformed array",
    "syntax error",
    "duplicate key",
    "unique constraint",
)


def _sqlstate(exc: BaseException) -> str | None:
    # SQLAlchemy wraps driver errors in .orig; asyncpg exposes sqlstate
    for candidate in (exc, getattr(exc, "orig", None)):
        if candidate is None:
            continue
        code = getattr(candidate, "sqlstate", None) or getattr(candidate, "pgcode", None)
        if isinstance(code, str) and code:
            return code
    return None


def is_fatal_db_error(exc: BaseException) -> bool:
    """Return True for database errors that retrying cannot fix."""
    if _sqlstate(exc) in FATAL_SQLSTATES:
        return True
    message = str(exc).lower()
    return any(marker in message for marker in FATAL_MESSAGE_MARKERS)


def is_duplicate_error(exc: BaseException) -> bool:
    """Return True for unique-constraint violations."""
    if _sqlstate(exc) == "23505":
        return True
    message = str(exc).lower()
    return "duplicate key" in message or "unique constraint" in message


def is_rate_limit_error(exc: BaseException) -> bool:
    """Return True when a provider error signals rate limiting."""
    status = getattr(exc, "status_code", None) or getattr(exc, "code", None)
    if status == 429:
        return True
    message = str(exc).lower()
    return "quota" in message or "429" in message or "resource_exhausted" in message


async def with_db_retry(
    operation: Callable[[], Awaitable[T]],
    max_attempts: int = 3,
    base_delay: float = 1.0,
) -> T:
    """
    Run an async database operation with exponential backoff.

    Waits base_delay, 2*base_delay, ... between attempts. Fatal errors are
    raised on the first occurrence.

    Args:
        operation: Zero-argument coroutine factory
        max_attempts: Total attempts including the first
        base_delay: Delay in seconds before the first retry

    Returns:
        The operation's result

    Raises:
        Exception: The last error once attempts are exhausted, or any fatal error
    """
    retrying = AsyncRetrying(
        retry=retry_if_exception(lambda e: not is_fatal_db_error(e)),
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=base_delay, min=base_delay, max=30),
        before_sleep=lambda rs: logger.warning(
            f"Database operation failed (attempt {rs.attempt_number}/{max_attempts}), retrying",
            extra={"error": str(rs.outcome.exception()) if rs.outcome else None},
        ),
        reraise=True,
    )
    async for attempt in retrying:
        with attempt:
            result = await operation()
    return result


async def with_rate_limit_retry(
    operation: Callable[[], Awaitable[T]],
    max_attempts: int = 3,
    initial_delay: float = 1.0,
) -> T:
    """
    Run an async provider call, backing off only on rate-limit errors.

    Args:
        operation: Zero-argument coroutine factory
        max_attempts: Total attempts including the first
        initial_delay: Delay in seconds before the first retry

    Returns:
        The operation's result
    """
    retrying = AsyncRetrying(
        retry=retry_if_exception(is_rate_limit_error),
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=initial_delay, min=initial_delay, max=60),
        before_sleep=lambda rs: logger.warning(
            f"Rate limit hit, retry {rs.attempt_number}/{max_attempts}"
        ),
        reraise=True,
    )
    async for attempt in retrying:
        with attempt:
            result = await operation()
    return result
