"""
Blog index API endpoint.

Routes:
- GET /blog - Generated SEO pages for the blog index (limit, published)

Dependencies: toolbox.application.services, toolbox.models
System role: Blog HTTP API
"""

from fastapi import APIRouter, Depends

from toolbox.api.deps.dependencies import get_seo_service
from toolbox.application.services.seo_service import MAX_BLOGS, SEOService
from toolbox.models.seo import BlogListResponse

from .seo_error_handling import handle_seo_errors
from .seo_responses import map_blogs_to_response

router = APIRouter(prefix="/blog", tags=["blog"])


@router.get("", response_model=BlogListResponse)
@handle_seo_errors("Failed to fetch blogs")
async def list_blogs(
    limit: int = MAX_BLOGS,
    published: str | None = None,
    seo_service: SEOService = Depends(get_seo_service),
) -> BlogListResponse:
    """Published pages unless published=false."""
    pages = await seo_service.list_blogs(limit=limit, published=published != "false")
    return map_blogs_to_response(pages)
