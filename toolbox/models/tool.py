"""
Tool domain models and schemas.

Dependencies: pydantic
System role: Tool API contracts
"""

from datetime import date

from toolbox.models.common import CamelModel


class ToolResponse(CamelModel):
    """A directory entry."""

    id: str
    name: str
    tagline: str = ""
    category: str
    sub_category: str = ""
    description: str = ""
    strengths: list[str] = []
    weaknesses: list[str] = []
    pricing: str = "Freemium"
    rating: int = 0
    popularity: int = 0
    votes: int = 0
    alternatives: list[str] = []
    best_for: str = ""
    overkill_for: str = ""
    is_verified: bool = False
    launch_date: date | None = None
    website_url: str | None = None
    discovery_source: str | None = None
    growth_rate_6mo: float | None = None
    is_rapidly_growing: bool = False
    monthly_visits: int | None = None


class ToolListResponse(CamelModel):
    tools: list[ToolResponse]


class ToolEnvelope(CamelModel):
    tool: ToolResponse


class ToolCountResponse(CamelModel):
    count: int


class ToolFAQ(CamelModel):
    question: str
    answer: str


class ToolUseCase(CamelModel):
    title: str
    description: str
    example: str | None = None


class ToolEnrichmentResponse(CamelModel):
    faqs: list[ToolFAQ] = []
    use_cases: list[ToolUseCase] = []


class VoteRequest(CamelModel):
    """Fields are optional so missing values produce the route's own 400 message."""

    tool_id: str | None = None
    user_id: str | None = None
