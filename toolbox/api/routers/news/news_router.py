"""
News API endpoints.

Routes:
- GET /news - Latest articles (limit, featured, category, source)
- GET /news/fetch-rss?url= - Server-side RSS proxy
- GET|POST /news/cron - Start the news fetch job (cron)

Dependencies: toolbox.application.services, toolbox.models
System role: News HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from toolbox.api.deps.dependencies import get_news_service
from toolbox.api.routers.router_utils.cron_routes import add_cron_route
from toolbox.application.services.news_service import NewsService
from toolbox.models.news import NewsArticleResponse, NewsListResponse, RSSFeedResponse

from .news_error_handling import handle_news_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/news", tags=["news"])


@router.get("", response_model=NewsListResponse)
@handle_news_errors("Failed to fetch news")
async def list_news(
    limit: int = 10,
    featured: str | None = None,
    category: str | None = None,
    source: str | None = None,
    news_service: NewsService = Depends(get_news_service),
) -> NewsListResponse:
    """
    Latest articles, newest first. Only featured=true filters on featured.

    Raises:
        HTTPException(503): No database configured
    """
    articles = await news_service.list_articles(
        limit=limit,
        featured=True if featured == "true" else None,
        category=category,
        source=source,
    )
    return NewsListResponse(articles=[NewsArticleResponse(**a) for a in articles])


@router.get("/fetch-rss", response_model=RSSFeedResponse)
@handle_news_errors("Failed to fetch RSS feed")
async def fetch_rss(
    url: str | None = None,
    news_service: NewsService = Depends(get_news_service),
) -> RSSFeedResponse:
    if not url:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="URL parameter is required")
    items = await news_service.fetch_rss(url)
    return RSSFeedResponse(items=items)


add_cron_route(router, "/cron", "news")
