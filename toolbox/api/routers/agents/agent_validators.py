"""
Agent event validation utilities.

Dependencies: toolbox.models.agent
System role: Agent event request validation
"""

from typing import Any

from toolbox.core.exceptions import ValidationError
from toolbox.models.agent import AgentEventRequest


class AgentEventValidationError(ValidationError):
    """Raised when an agent event is missing its agent id or type."""


def as_trimmed(value: Any) -> str:
    """Strings are trimmed; anything else becomes an empty string."""
    return value.strip() if isinstance(value, str) else ""


def validate_agent_event(request: AgentEventRequest) -> tuple[str, str]:
    """
    Returns:
        tuple[str, str]: Trimmed agent id and event type

    Raises:
        AgentEventValidationError: If either is empty
    """
    agent_id = as_trimmed(request.agent_id)
    event_type = as_trimmed(request.event_type)
    if not agent_id or not event_type:
        raise AgentEventValidationError("agentId and eventType are required")
    return agent_id, event_type
