"""
Tests for the news, SEO page, blog and recommendation routes.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from toolbox.api.deps import get_news_service, get_recommendation_service, get_seo_service
from toolbox.core.exceptions import NotFoundError


@pytest.fixture
def mock_news_service(app):
    service = AsyncMock()
    app.dependency_overrides[get_news_service] = lambda: service
    return service


@pytest.fixture
def mock_seo_service(app):
    service = AsyncMock()
    app.dependency_overrides[get_seo_service] = lambda: service
    return service


def _article():
    return {
        "id": "techcrunch-openai-ships",
        "title": "OpenAI ships a new model",
        "description": "Summary",
        "url": "https://techcrunch.com/openai",
        "source": "TechCrunch",
        "published_at": datetime(2026, 1, 2, tzinfo=timezone.utc),
        "tags": ["OpenAI"],
    }


class TestNews:
    def test_list_news_defaults(self, client, mock_news_service):
        mock_news_service.list_articles.return_value = [_article()]

        response = client.get("/api/news")

        assert response.status_code == 200
        article = response.json()["articles"][0]
        assert article["source"] == "TechCrunch"
        assert "publishedAt" in article
        mock_news_service.list_articles.assert_awaited_once_with(
            limit=10, featured=None, category=None, source=None
        )

    def test_featured_only_when_true(self, client, mock_news_service):
        mock_news_service.list_articles.return_value = []

        client.get("/api/news", params={"featured": "true", "limit": 5})

        mock_news_service.list_articles.assert_awaited_once_with(
            limit=5, featured=True, category=None, source=None
        )

    def test_list_news_without_database_returns_503(self, client, no_database):
        response = client.get("/api/news")

        assert response.status_code == 503

    def test_fetch_rss_requires_url(self, client, mock_news_service):
        response = client.get("/api/news/fetch-rss")

        assert response.status_code == 400
        assert response.json() == {"error": "URL parameter is required"}

    def test_fetch_rss_failure_returns_500(self, client, mock_news_service):
        mock_news_service.fetch_rss.side_effect = RuntimeError("timeout")

        response = client.get("/api/news/fetch-rss", params={"url": "https://example.com/feed"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch RSS feed"}

    def test_fetch_rss_keeps_feed_keys(self, client, mock_news_service):
        mock_news_service.fetch_rss.return_value = [
            {"title": "Post", "pubDate": "Mon, 01 Jan 2026", "content:encoded": "<p>x</p>"}
        ]

        response = client.get("/api/news/fetch-rss", params={"url": "https://example.com/feed"})

        assert response.json()["items"][0]["content:encoded"] == "<p>x</p>"


class TestSEOAndBlog:
    def test_get_page_not_found(self, client, mock_seo_service):
        mock_seo_service.get_page.side_effect = NotFoundError("Page not found", "seo_page", "x")

        response = client.get("/api/seo/x")

        assert response.status_code == 404
        assert response.json() == {"error": "Page not found"}

    def test_get_page(self, client, mock_seo_service):
        mock_seo_service.get_page.return_value = {
            "id": "best-ai-writing-tools",
            "slug": "best-ai-writing-tools",
            "keyword": "ai writing tools",
            "title": "Best AI Writing Tools for 2026",
            "sections": [{"heading": "Why", "content": "Because", "tools": ["claude"]}],
            "seo_score": 85,
        }

        response = client.get("/api/seo/best-ai-writing-tools")

        page = response.json()["page"]
        assert page["seoScore"] == 85
        assert page["sections"][0]["tools"] == ["claude"]

    def test_blog_published_unless_false(self, client, mock_seo_service):
        mock_seo_service.list_blogs.return_value = []

        client.get("/api/blog")
        client.get("/api/blog", params={"published": "false", "limit": 20})

        calls = mock_seo_service.list_blogs.await_args_list
        assert calls[0].kwargs == {"limit": 100, "published": True}
        assert calls[1].kwargs == {"limit": 20, "published": False}


class TestRecommendations:
    def test_query_required(self, client, app):
        app.dependency_overrides[get_recommendation_service] = lambda: AsyncMock()

        response = client.post("/api/recommendations", json={"query": "  "})

        assert response.status_code == 400
        assert response.json() == {"error": "Query is required"}

    def test_recommend(self, client, app):
        service = AsyncMock()
        service.recommend.return_value = {"text": "Try Cursor", "recommended_tool_ids": ["cursor"]}
        app.dependency_overrides[get_recommendation_service] = lambda: service

        response = client.post("/api/recommendations", json={"query": "best coding assistant"})

        assert response.json() == {"text": "Try Cursor", "recommendedToolIds": ["cursor"]}
        service.recommend.assert_awaited_once_with("best coding assistant")
