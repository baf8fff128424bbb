"""
SEO page CRUD operations.

Pages are unique by slug. upsert() assembles the markdown body from the
introduction and sections and normalises the JSON columns before writing.

Dependencies: sqlalchemy, toolbox.boundary.db.models
System role: SEO content persistence operations
"""

import base64
import json
import logging
import re
from datetime import datetime, timezone
from typing import Any, Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from toolbox.boundary.db.base import utcnow
from toolbox.boundary.db.CRUD.base_crud import BaseCRUD
from toolbox.boundary.db.models.seo_page_model import SEOPageModel

logger = logging.getLogger(__name__)


def generate_page_id(slug: str) -> str:
    """Base64 of the slug, alphanumerics only, first 50 characters."""
    encoded = base64.b64encode(slug.encode("utf-8")).decode("ascii")
    return re.sub(r"[^a-zA-Z0-9]", "", encoded)[:50]


def build_page_content(introduction: str | None, sections: list[dict] | None) -> str:
    """Join the introduction and "## heading" blocks with blank lines."""
    parts = [introduction or ""]
    parts.extend(f"## {s.get('heading', '')}\n\n{s.get('content', '')}" for s in sections or [])
    return "\n\n".join(parts)


def content_year() -> int:
    """Year stamped into generated titles and descriptions (current UTC year)."""
    return datetime.now(timezone.utc).year


def default_page_title(keyword: str) -> str:
    return f"Best {keyword} for {content_year()}"


def default_page_summary(keyword: str) -> str:
    return f"Comprehensive guide to the best {keyword.lower()} in {content_year()}"


def default_structured_data(keyword: str, title: str | None, meta_description: str | None) -> dict:
    """schema.org CollectionPage used when no valid JSON-LD object was generated."""
    return {
        "@context": "https://schema.org",
        "@type": "CollectionPage",
        "name": title or default_page_title(keyword),
        "description": meta_description or default_page_summary(keyword),
    }


def normalise_structured_data(value: Any, keyword: str, title: str | None, meta: str | None) -> dict:
    """Decode a JSON string and fall back to the CollectionPage default for non-objects."""
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            logger.warning("Failed to parse structuredData string, using default")
            value = None
    if not value or not isinstance(value, dict):
        return default_structured_data(keyword, title, meta)
    return value


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None and str(item)]


class SEOPageCRUD(BaseCRUD[SEOPageModel]):
    """CRUD operations for SEOPageModel."""

    def __init__(self) -> None:
        """Initialize SEOPageCRUD with SEOPageModel."""
        super().__init__(SEOPageModel)

    async def find_all(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int | None = None,
        published: bool | None = None,
        keyword: str | None = None,
    ) -> Sequence[SEOPageModel]:
        """
        List pages, most recently generated first.

        Args:
            session: Async database session
            limit: Maximum number of pages
            offset: Number of pages to skip
            published: Filter on is_published when not None
            keyword: Case-insensitive substring of the keyword

        Returns:
            Sequence of SEOPageModel
        """
        stmt = select(SEOPageModel)
        if published is not None:
            stmt = stmt.where(SEOPageModel.is_published == published)
        if keyword:
            stmt = stmt.where(SEOPageModel.keyword.ilike(f"%{keyword}%"))
        stmt = stmt.order_by(
            SEOPageModel.last_generated_at.desc().nulls_last(),
            SEOPageModel.updated_at.desc(),
        )
        if limit:
            stmt = stmt.limit(limit)
        if offset:
            stmt = stmt.offset(offset)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def find_by_slug(self, session: AsyncSession, slug: str) -> SEOPageModel | None:
        """Retrieve a page by slug."""
        stmt = select(SEOPageModel).where(SEOPageModel.slug == slug)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(self, session: AsyncSession, page: dict[str, Any]) -> SEOPageModel:
        """
        Insert a page or update the one stored under the same slug.

        Args:
            session: Async database session
            page: Column values keyed by column name; must include slug and keyword

        Returns:
            The stored SEOPageModel
        """
        keyword = page["keyword"]
        sections = page.get("sections") or []
        validation_issues = page.get("validation_issues")
        if not isinstance(validation_issues, list):
            validation_issues = [validation_issues] if validation_issues else []

        values = {
            "keyword": keyword,
            "title": page.get("title") or default_page_title(keyword),
            "meta_description": page.get("meta_description"),
            "featured_image_url": page.get("featured_image_url") or None,
            "content": build_page_content(page.get("introduction"), sections),
            "introduction": page.get("introduction"),
            "sections": sections,
            "target_keywords": _string_list(page.get("target_keywords")),
            "search_volume": page.get("search_volume") or 0,
            "competition_score": page.get("competition_score") or 0,
            "related_tools": _string_list(page.get("related_tools")),
            "structured_data": normalise_structured_data(
                page.get("structured_data"),
                keyword,
                page.get("title"),
                page.get("meta_description"),
            ),
            "is_published": page.get("is_published") is not False,
            "last_generated_at": utcnow(),
        }

        existing = await self.find_by_slug(session, page["slug"])
        if existing is not None:
            for field, value in values.items():
                setattr(existing, field, value)
            await session.flush()
            await session.refresh(existing)
            return existing

        return await self.create(
            session,
            id=page.get("id") or generate_page_id(page["slug"]),
            slug=page["slug"],
            canonical_url=page.get("canonical_url") or None,
            seo_score=page.get("seo_score") or 0,
            validation_issues=validation_issues,
            **values,
        )

    async def delete_by_slug(self, session: AsyncSession, slug: str) -> bool:
        """Delete a page by slug; True when a row was removed."""
        stmt = delete(SEOPageModel).where(SEOPageModel.slug == slug)
        result = await session.execute(stmt)
        return result.rowcount > 0


seo_page_crud = SEOPageCRUD()
