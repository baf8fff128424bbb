"""
SEO page models and schemas.

Dependencies: pydantic
System role: SEO page and blog API contracts
"""

from datetime import datetime
from typing import Any

from pydantic import Field

from toolbox.models.common import CamelModel


class SEOSection(CamelModel):
    heading: str = ""
    content: str = ""
    tools: list[str] = []


class SEOPageResponse(CamelModel):
    id: str
    slug: str
    keyword: str
    title: str
    meta_description: str | None = None
    featured_image_url: str | None = None
    content: str | None = None
    introduction: str | None = None
    sections: list[SEOSection] = []
    target_keywords: list[str] = []
    search_volume: int = 0
    competition_score: int = 0
    related_tools: list[str] = []
    structured_data: dict[str, Any] = Field(default_factory=dict)
    canonical_url: str | None = None
    seo_score: int = 0
    validation_issues: list[str] = []
    is_published: bool = True
    last_generated_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SEOPageEnvelope(CamelModel):
    page: SEOPageResponse


class BlogListResponse(CamelModel):
    blogs: list[SEOPageResponse]
