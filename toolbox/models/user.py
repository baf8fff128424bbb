"""
User domain models and schemas.

Dependencies: pydantic
System role: User and interaction API contracts
"""

from datetime import datetime

from toolbox.models.common import CamelModel


class CreateUserRequest(CamelModel):
    name: str | None = None
    email: str | None = None


class InteractionRequest(CamelModel):
    """Add or remove a like / star / bookmark."""

    user_id: str | None = None
    tool_id: str | None = None
    interaction_type: str | None = None
    action: str | None = None


class UserResponse(CamelModel):
    id: str
    name: str
    email: str
    points: int = 0
    referral_code: str
    joined_at: datetime | None = None
    liked_tool_ids: list[str] = []
    starred_tool_ids: list[str] = []
    bookmarked_tool_ids: list[str] = []


class UserEnvelope(CamelModel):
    user: UserResponse
