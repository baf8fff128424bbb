"""
SEO page API endpoints.

Routes:
- GET|POST /seo/generate - Start the SEO generation job (cron)
- GET /seo/{slug} - Get a generated page

Dependencies: toolbox.application.services, toolbox.models
System role: SEO content HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from toolbox.api.deps.dependencies import get_seo_service
from toolbox.api.routers.router_utils.cron_routes import add_cron_route
from toolbox.application.services.seo_service import SEOService
from toolbox.models.seo import SEOPageEnvelope

from .seo_error_handling import handle_seo_errors
from .seo_responses import map_page_envelope

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/seo", tags=["seo"])

add_cron_route(router, "/generate", "seo")


@router.get("/{slug}", response_model=SEOPageEnvelope)
@handle_seo_errors("Failed to fetch page")
async def get_page(
    slug: str,
    seo_service: SEOService = Depends(get_seo_service),
) -> SEOPageEnvelope:
    """
    Raises:
        HTTPException(404): Page not found
    """
    page = await seo_service.get_page(slug)
    return map_page_envelope(page)
