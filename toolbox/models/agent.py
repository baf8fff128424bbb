"""
Agent route models and schemas.

Agent outputs are already camelCase dicts produced by the agents, so the
run response is a plain model that passes them through untouched.

Dependencies: pydantic
System role: Agent API contracts
"""

from typing import Any

from pydantic import BaseModel, Field

from toolbox.models.common import CamelModel


class AgentRunResponse(BaseModel):
    output: dict[str, Any]
    meta: dict[str, Any]


class AgentEventRequest(CamelModel):
    agent_id: Any = None
    event_type: Any = None
    user_id: Any = None
    session_id: Any = None
    payload: Any = None


class AgentEventResponse(BaseModel):
    ok: bool = True
    id: str = Field(description="Generated event id")
