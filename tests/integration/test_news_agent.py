"""
Integration tests for a full news agent pass against SQLite with a fake Gemini client.
"""

import json
from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from toolbox.boundary.db.CRUD.news_crud import news_crud
from toolbox.core.agents.gemini.news_agent import MAX_TAGS, NewsAgent, fetch_and_save_news


def _result(title: str | None, url: str | None, hours_ago: float, **extra) -> dict:
    published = datetime.now(timezone.utc) - timedelta(hours=hours_ago)
    result = {
        "title": title,
        "url": url,
        "snippet": "Latest AI news article",
        "source": "Wired",
        "publishedDate": published.isoformat(),
    }
    result.update(extra)
    return result


def _client(first_query_results: list[dict]) -> AsyncMock:
    client = AsyncMock()
    client.generate_text.side_effect = [json.dumps(first_query_results)] + ["[]"] * 6
    return client


@pytest.mark.asyncio
async def test_run_filters_tags_and_features_latest(session_factory):
    # Arrange
    results = [
        _result(
            "OpenAI and Anthropic ship LLM updates with GPT and Claude automation",
            "https://news.dev/a",
            1,
        ),
        _result("No link here", None, 1),
        _result(None, "https://news.dev/untitled", 1),
        _result("Same story again", "https://news.dev/a", 1),
        _result("Last month's robotics news", "https://news.dev/old", 24 * 30),
        _result("Diffusion models", "https://news.dev/b", 2),
        _result("Transformer research", "https://news.dev/c", 3),
        _result("Machine learning ops", "https://news.dev/d", 4),
    ]
    client = _client(results)
    agent = NewsAgent(client=client, session_factory=session_factory, query_delay=0, results_per_query=10)

    # Act
    stats = await agent.run()

    # Assert
    assert stats == {"fetched": 8, "saved": 4, "errors": 0}
    assert client.generate_text.await_count == 7
    for call in client.generate_text.await_args_list:
        assert call.kwargs["retry_on_rate_limit"] is False

    async with session_factory() as session:
        stored = {a.url: a for a in await news_crud.find_all(session)}
        featured = await news_crud.find_all(session, featured=True)

    assert set(stored) == {"https://news.dev/a", "https://news.dev/b", "https://news.dev/c", "https://news.dev/d"}
    assert len(stored["https://news.dev/a"].tags) == MAX_TAGS
    assert {a.url for a in featured} == {"https://news.dev/a", "https://news.dev/b", "https://news.dev/c"}


@pytest.mark.asyncio
async def test_failed_query_is_counted_and_run_continues(session_factory):
    client = AsyncMock()
    client.generate_text.side_effect = [Exception("429 quota exceeded")] + ["[]"] * 6
    agent = NewsAgent(client=client, session_factory=session_factory, query_delay=0)

    stats = await agent.run()

    assert stats == {"fetched": 0, "saved": 0, "errors": 1}
    assert client.generate_text.await_count == 7


@pytest.mark.asyncio
async def test_fetch_and_save_news_reports_failure():
    agent = MagicMock()
    agent.run = AsyncMock(side_effect=RuntimeError("GEMINI_API_KEY is not configured"))

    assert await fetch_and_save_news(agent) == {"fetched": 0, "saved": 0, "errors": 1}


@pytest.mark.asyncio
async def test_unreachable_database_aborts_run():
    @asynccontextmanager
    async def unreachable():
        raise ConnectionError("connection refused")
        yield

    agent = NewsAgent(client=AsyncMock(), session_factory=unreachable, query_delay=0)

    assert await fetch_and_save_news(agent) == {"fetched": 0, "saved": 0, "errors": 1}
    agent.client.generate_text.assert_not_awaited()
