"""
Claude agent schemas.

Run context, skill fragments and the run result shared by every micro
agent.

Dependencies: pydantic
System role: Agent contract definitions
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from pydantic import BaseModel

OutputT = TypeVar("OutputT", bound=BaseModel)


class AgentRunContext(BaseModel):
    """Request metadata attached to agent logs."""

    request_id: str | None = None
    user_id: str | None = None
    ip: str | None = None
    user_agent: str | None = None


class Skill(BaseModel):
    """An imperative prompt fragment mixed into an agent's system prompt."""

    id: str
    name: str
    prompt: str


class TokenUsage(BaseModel):
    input_tokens: int | None = None
    output_tokens: int | None = None


@dataclass
class AgentRunResult(Generic[OutputT]):
    """Parsed output plus the raw model text, model id and token usage."""

    output: OutputT
    raw_text: str = ""
    model: str | None = None
    usage: TokenUsage = field(default_factory=TokenUsage)
