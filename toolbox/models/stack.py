"""
Stack builder models and schemas.

Dependencies: pydantic
System role: Stack API contracts
"""

from datetime import datetime

from toolbox.models.common import CamelModel


class CreateStackRequest(CamelModel):
    user_id: str | None = None
    name: str | None = None
    tool_ids: list[str] = []


class UpdateStackRequest(CamelModel):
    name: str | None = None
    tool_ids: list[str] = []


class StackResponse(CamelModel):
    id: str
    user_id: str
    name: str
    tool_ids: list[str] = []
    created_at: datetime | None = None
    updated_at: datetime | None = None


class StackEnvelope(CamelModel):
    stack: StackResponse


class StackListResponse(CamelModel):
    stacks: list[StackResponse]
