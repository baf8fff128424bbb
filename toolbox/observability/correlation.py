"""
Request ID context.

Carries the per-request ID across async boundaries using contextvars so
agent runs and background jobs can tag their logs.

Dependencies: contextvars
System role: Request tracing across service boundaries
"""

from contextvars import ContextVar
import uuid

request_id_ctx: ContextVar[str] = ContextVar("request_id", default="")


def set_request_id(request_id: str | None = None) -> str:
    """
    Set request ID in context.

    Args:
        request_id: Optional request ID (generates a uuid4 if None)

    Returns:
        str: The request ID that was set
    """
    value = request_id or str(uuid.uuid4())
    request_id_ctx.set(value)
    return value


def get_request_id() -> str:
    """Get current request ID from context (empty string outside a request)."""
    return request_id_ctx.get()


def clear_request_id() -> None:
    """Clear request ID from context."""
    request_id_ctx.set("")
