"""
SEO page service orchestrator.

Read access to generated pages for the blog index and page routes.

Dependencies: toolbox.boundary.db.CRUD
System role: SEO content use case orchestration
"""

from sqlalchemy.ext.asyncio import AsyncSession

from toolbox.boundary.db.CRUD.seo_page_crud import seo_page_crud
from toolbox.boundary.db.serializers import seo_page_to_dict
from toolbox.core.exceptions import NotFoundError

MAX_BLOGS = 100


class SEOService:
    """SEO page service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_blogs(self, limit: int = 100, published: bool = True) -> list[dict]:
        """Pages for the blog index, most recently generated first (limit capped at 100)."""
        pages = await seo_page_crud.find_all(self.db, limit=min(limit, MAX_BLOGS), published=published)
        return [seo_page_to_dict(p) for p in pages]

    async def get_page(self, slug: str) -> dict:
        """
        Get a page by slug.

        Raises:
            NotFoundError: If no page has the slug
        """
        page = await seo_page_crud.find_by_slug(self.db, slug)
        if page is None:
            raise NotFoundError("Page not found", resource="seo_page", resource_id=slug)
        return seo_page_to_dict(page)
