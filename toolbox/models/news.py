"""
News models and schemas.

Dependencies: pydantic
System role: News API contracts
"""

from datetime import datetime
from typing import Any

from toolbox.models.common import CamelModel


class NewsArticleResponse(CamelModel):
    id: str
    title: str
    description: str | None = None
    url: str
    source: str
    author: str | None = None
    image_url: str | None = None
    published_at: datetime
    fetched_at: datetime | None = None
    category: str = "AI"
    tags: list[str] = []
    view_count: int = 0
    is_featured: bool = False


class NewsListResponse(CamelModel):
    articles: list[NewsArticleResponse]


class RSSFeedResponse(CamelModel):
    """Parsed feed items, keyed as in the feed (pubDate, content:encoded)."""

    items: list[dict[str, Any]]
