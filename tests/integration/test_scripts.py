"""
Integration tests for the maintenance scripts.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from toolbox.boundary.db.CRUD.news_crud import news_crud
from toolbox.boundary.db.CRUD.seo_page_crud import seo_page_crud
from toolbox.boundary.db.CRUD.tool_crud import tool_crud
from toolbox.scripts.check_enrichment_status import check_enrichment_status, percentage
from toolbox.scripts.cleanup_broken_urls import cleanup_broken_urls
from toolbox.scripts.cleanup_seo_images import cleanup_seo_images
from toolbox.scripts.daily_update import run_daily_update
from toolbox.scripts.seed import seed_database


def _article(article_id: str, url: str) -> dict:
    return {
        "id": article_id,
        "title": f"Article {article_id}",
        "url": url,
        "source": "Wired",
        "published_at": datetime(2026, 1, 5, tzinfo=timezone.utc),
    }


def _broken_links_client() -> httpx.AsyncClient:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/gone":
            return httpx.Response(404)
        if request.url.path == "/flaky":
            raise httpx.ConnectError("refused", request=request)
        return httpx.Response(200)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
async def news(session_factory):
    async with session_factory() as session:
        await news_crud.upsert(session, _article("ok", "https://news.dev/ok"))
        await news_crud.upsert(session, _article("gone", "https://news.dev/gone"))
        await news_crud.upsert(session, _article("flaky", "https://news.dev/flaky"))
    return session_factory


@pytest.mark.asyncio
async def test_seed_database_is_idempotent(session_factory):
    first = await seed_database(session_factory)
    second = await seed_database(session_factory)

    assert first == second == {"tools": 600, "prompts": 120}
    async with session_factory() as session:
        assert await tool_crud.count(session) == 600


@pytest.mark.asyncio
async def test_cleanup_dry_run_keeps_articles(news):
    async with _broken_links_client() as client:
        stats = await cleanup_broken_urls(apply=False, session_factory=news, client=client, delay=0)

    assert stats == {"checked": 3, "broken": 1, "deleted": 0}
    async with news() as session:
        assert await news_crud.exists(session, "gone")


@pytest.mark.asyncio
async def test_cleanup_apply_deletes_only_broken(news):
    async with _broken_links_client() as client:
        stats = await cleanup_broken_urls(apply=True, session_factory=news, client=client, delay=0)

    assert stats == {"checked": 3, "broken": 1, "deleted": 1}
    async with news() as session:
        assert not await news_crud.exists(session, "gone")
        assert await news_crud.exists(session, "flaky")


@pytest.mark.asyncio
async def test_check_enrichment_status(session_factory):
    await seed_database(session_factory)
    async with session_factory() as session:
        await tool_crud.update_faqs(session, "chatgpt", [{"question": "Q?", "answer": "A."}])

    counts = await check_enrichment_status(session_factory)

    assert counts["total"] == 600
    assert counts["with_faqs"] == 1
    assert counts["needing_enrichment"] == 600


def test_percentage():
    assert percentage(1, 3) == "33.3%"
    assert percentage(5, 0) == "0.0%"


@pytest.mark.asyncio
async def test_daily_update_continues_after_failure():
    calls = []

    async def news():
        calls.append("news")
        raise RuntimeError("gemini down")

    async def tools():
        calls.append("tools")
        return {"discovered": 4, "saved": 3, "skipped": 1, "errors": 0}

    steps = [
        ("news", news, {"fetched": 0, "saved": 0, "errors": 0}),
        ("tools", tools, {"discovered": 0, "saved": 0, "skipped": 0, "errors": 0}),
    ]

    results = await run_daily_update(steps=steps, delay=0)

    assert calls == ["news", "tools"]
    assert results["news"] == {"fetched": 0, "saved": 0, "errors": 1}
    assert results["tools"]["saved"] == 3


@pytest.fixture
async def seo_pages(session_factory):
    images = {
        "inline": "data:image/jpeg;base64,aGVsbG8=",
        "placeholder": "https://picsum.photos/seed/abc/1200/630",
        "hosted": "https://bucket.s3.us-east-1.amazonaws.com/seo-images/hosted.png",
    }
    async with session_factory() as session:
        for slug, url in images.items():
            await seo_page_crud.upsert(
                session,
                {"id": slug, "slug": slug, "keyword": f"{slug} ai tools", "featured_image_url": url},
            )
    return session_factory


@pytest.mark.asyncio
async def test_cleanup_seo_images_dry_run_changes_nothing(seo_pages):
    agent = AsyncMock()

    stats = await cleanup_seo_images(apply=False, session_factory=seo_pages, agent=agent)

    assert stats == {"found": 2, "updated": 0, "skipped": 0}
    agent.generate_featured_image.assert_not_awaited()
    async with seo_pages() as session:
        page = await seo_page_crud.find_by_slug(session, "inline")
        assert page.featured_image_url.startswith("data:")


@pytest.mark.asyncio
async def test_cleanup_seo_images_apply_replaces_inline_and_placeholder(seo_pages):
    agent = AsyncMock()
    agent.generate_featured_image.return_value = "https://images.unsplash.com/photo-1"
    upload = AsyncMock(return_value="https://bucket.s3.us-east-1.amazonaws.com/seo-images/inline.jpg")

    with patch("toolbox.scripts.cleanup_seo_images.upload_image_to_s3", upload):
        stats = await cleanup_seo_images(apply=True, session_factory=seo_pages, agent=agent)

    assert stats == {"found": 2, "updated": 2, "skipped": 0}
    payload, filename, content_type = upload.await_args.args
    assert payload == "aGVsbG8="
    assert filename.endswith(".jpg")
    assert content_type == "image/jpeg"
    agent.generate_featured_image.assert_awaited_once_with("placeholder ai tools")
    async with seo_pages() as session:
        assert (await seo_page_crud.find_by_slug(session, "inline")).featured_image_url.endswith("inline.jpg")
        assert (await seo_page_crud.find_by_slug(session, "placeholder")).featured_image_url == (
            "https://images.unsplash.com/photo-1"
        )
        assert (await seo_page_crud.find_by_slug(session, "hosted")).featured_image_url.endswith("hosted.png")


@pytest.mark.asyncio
async def test_cleanup_seo_images_keeps_page_when_only_placeholder_available(seo_pages):
    agent = AsyncMock()
    agent.generate_featured_image.return_value = "https://picsum.photos/seed/new/1200/630"

    with patch("toolbox.scripts.cleanup_seo_images.upload_image_to_s3", AsyncMock(return_value=None)):
        stats = await cleanup_seo_images(apply=True, session_factory=seo_pages, agent=agent)

    assert stats == {"found": 2, "updated": 0, "skipped": 2}
