"""
Recommendation models and schemas.

Dependencies: pydantic
System role: Chat recommendation API contracts
"""

from toolbox.models.common import CamelModel


class RecommendationRequest(CamelModel):
    query: str | None = None


class RecommendationResponse(CamelModel):
    text: str
    recommended_tool_ids: list[str] = []
