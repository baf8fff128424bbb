"""
News CRUD operations.

Articles are unique by URL. Ids are derived from the URL so re-fetching
the same article always lands on the same row.

Dependencies: sqlalchemy, toolbox.boundary.db.models
System role: News aggregation persistence operations
"""

import base64
import random
import re
import string
import time
from datetime import timedelta
from typing import Any, Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from toolbox.boundary.db.base import utcnow
from toolbox.boundary.db.CRUD.base_crud import BaseCRUD
from toolbox.boundary.db.models.news_model import NewsModel

UPDATABLE_FIELDS = (
    "title",
    "description",
    "source",
    "author",
    "image_url",
    "published_at",
    "category",
    "tags",
    "is_featured",
)


def generate_news_id(url: str) -> str:
    """Base64 of the URL, alphanumerics only, first 50 characters."""
    encoded = base64.b64encode(url.encode("utf-8")).decode("ascii")
    return re.sub(r"[^a-zA-Z0-9]", "", encoded)[:50]


def _normalise_tags(tags: Any) -> list[str]:
    if isinstance(tags, list):
        return tags
    return [tags] if tags else []


class NewsCRUD(BaseCRUD[NewsModel]):
    """CRUD operations for NewsModel."""

    def __init__(self) -> None:
        """Initialize NewsCRUD with NewsModel."""
        super().__init__(NewsModel)

    async def find_all(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int | None = None,
        featured: bool | None = None,
        category: str | None = None,
        source: str | None = None,
    ) -> Sequence[NewsModel]:
        """
        List articles, newest first.

        Args:
            session: Async database session
            limit: Maximum number of articles
            offset: Number of articles to skip
            featured: Filter on is_featured when not None
            category: Exact category filter
            source: Exact source filter

        Returns:
            Sequence of NewsModel ordered by published_at desc
        """
        stmt = select(NewsModel)
        if featured is not None:
            stmt = stmt.where(NewsModel.is_featured == featured)
        if category:
            stmt = stmt.where(NewsModel.category == category)
        if source:
            stmt = stmt.where(NewsModel.source == source)
        stmt = stmt.order_by(NewsModel.published_at.desc())
        if limit:
            stmt = stmt.limit(limit)
        if offset:
            stmt = stmt.offset(offset)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def find_by_url(self, session: AsyncSession, url: str) -> NewsModel | None:
        """Retrieve an article by its URL."""
        stmt = select(NewsModel).where(NewsModel.url == url)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(self, session: AsyncSession, data: dict[str, Any]) -> NewsModel:
        """
        Insert an article or update the one stored under the same URL.

        A generated id that already belongs to another URL gets a
        "_{epoch_ms}_{random}" suffix (three attempts).

        Args:
            session: Async database session
            data: Column values keyed by column name; must include "url"

        Returns:
            The stored NewsModel

        Raises:
            RuntimeError: If no free id could be generated
        """
        values = dict(data)
        values["tags"] = _normalise_tags(values.get("tags"))
        values["is_featured"] = bool(values.get("is_featured"))

        existing = await self.find_by_url(session, values["url"])
        if existing is not None:
            for field in UPDATABLE_FIELDS:
                if field in values:
                    setattr(existing, field, values[field])
            await session.flush()
            await session.refresh(existing)
            return existing

        base_id = values.pop("id", None) or generate_news_id(values["url"])
        candidate = base_id
        for _ in range(3):
            if not await self.exists(session, candidate):
                return await self.create(session, id=candidate, **values)
            suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=7))
            candidate = f"{base_id}_{int(time.time() * 1000)}_{suffix}"

        raise RuntimeError("Failed to insert article after multiple ID generation attempts")

    async def increment_view_count(self, session: AsyncSession, news_id: str) -> None:
        """Add one to an article's view counter."""
        stmt = (
            update(NewsModel)
            .where(NewsModel.id == news_id)
            .values(view_count=NewsModel.view_count + 1)
        )
        await session.execute(stmt)

    async def set_featured(self, session: AsyncSession, news_id: str, featured: bool) -> None:
        """Flag or unflag an article as featured."""
        stmt = update(NewsModel).where(NewsModel.id == news_id).values(is_featured=featured)
        await session.execute(stmt)

    async def delete_old_articles(self, session: AsyncSession, days_old: int = 30) -> int:
        """
        Delete articles published more than `days_old` days ago.

        Returns:
            int: Number of deleted rows
        """
        cutoff = utcnow() - timedelta(days=days_old)
        stmt = delete(NewsModel).where(NewsModel.published_at < cutoff)
        result = await session.execute(stmt)
        return result.rowcount or 0

    async def delete_by_ids(self, session: AsyncSession, ids: list[str]) -> int:
        """Delete several articles; returns the number removed."""
        if not ids:
            return 0
        stmt = delete(NewsModel).where(NewsModel.id.in_(ids))
        result = await session.execute(stmt)
        return result.rowcount or 0


news_crud = NewsCRUD()
