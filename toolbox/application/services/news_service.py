"""
News service orchestrator.

Article listing and the RSS proxy.

Dependencies: toolbox.boundary.db.CRUD, toolbox.boundary.http
System role: News use case orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from toolbox.boundary.db.CRUD.news_crud import news_crud
from toolbox.boundary.db.serializers import news_to_dict
from toolbox.boundary.http.rss import fetch_rss_feed
from toolbox.core.exceptions import DatabaseNotConfiguredError

logger = logging.getLogger(__name__)

MAX_ARTICLES = 50


class NewsService:
    """News service orchestrator."""

    def __init__(self, db: AsyncSession | None = None) -> None:
        self.db = db

    async def list_articles(
        self,
        limit: int = 10,
        featured: bool | None = None,
        category: str | None = None,
        source: str | None = None,
    ) -> list[dict]:
        """
        List articles, newest first.

        Args:
            limit: Requested count, capped at 50
            featured: Only featured articles when True

        Returns:
            list[dict]: Article dicts
        """
        if self.db is None:
            raise DatabaseNotConfiguredError()
        articles = await news_crud.find_all(
            self.db,
            limit=min(limit, MAX_ARTICLES),
            featured=featured,
            category=category,
            source=source,
        )
        return [news_to_dict(a) for a in articles]

    async def fetch_rss(self, url: str) -> list[dict]:
        """Download and parse a feed on behalf of the browser."""
        try:
            return await fetch_rss_feed(url)
        except Exception as e:
            logger.error("Failed to fetch RSS feed", extra={"error": str(e), "url": url})
            raise
