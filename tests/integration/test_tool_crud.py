"""
Integration tests for tool persistence against SQLite.
"""

from datetime import datetime, timezone

import pytest

from toolbox.boundary.db.CRUD.tool_crud import tool_crud
from toolbox.data import get_tools_dataset


@pytest.fixture
async def seeded(test_async_db):
    for tool in get_tools_dataset()[:20]:
        await tool_crud.upsert(test_async_db, tool)
    await test_async_db.flush()
    return test_async_db


@pytest.mark.asyncio
async def test_find_all_orders_by_votes_and_pages(seeded):
    tools = await tool_crud.find_all(seeded, limit=5)

    assert len(tools) == 5
    votes = [t.votes for t in tools]
    assert votes == sorted(votes, reverse=True)

    second_page = await tool_crud.find_all(seeded, limit=5, offset=5)
    assert {t.id for t in tools}.isdisjoint({t.id for t in second_page})


@pytest.mark.asyncio
async def test_find_all_search_is_case_insensitive(seeded):
    tools = await tool_crud.find_all(seeded, search="cursor")

    assert [t.id for t in tools] == ["cursor"]


@pytest.mark.asyncio
async def test_upsert_keeps_discovery_fields(seeded):
    # Arrange
    discovered = dict(get_tools_dataset()[0])
    discovered.update(
        discovery_source="ai_search",
        discovered_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
        monthly_visits=1000,
    )
    await tool_crud.upsert(seeded, discovered)

    # Act
    reseeded = dict(get_tools_dataset()[0], tagline="Updated tagline", discovery_source=None)
    tool = await tool_crud.upsert(seeded, reseeded)

    # Assert
    assert tool.tagline == "Updated tagline"
    assert tool.discovery_source == "ai_search"
    assert tool.monthly_visits == 1000
    assert await tool_crud.count(seeded) == 20


@pytest.mark.asyncio
async def test_votes_and_enrichment(seeded):
    before = (await tool_crud.get_by_id(seeded, "claude")).votes

    await tool_crud.increment_votes(seeded, "claude")
    await tool_crud.update_faqs(seeded, "claude", [{"question": "Q?", "answer": "A."}])
    await seeded.flush()
    seeded.expire_all()

    tool = await tool_crud.get_by_id(seeded, "claude")
    assert tool.votes == before + 1

    enrichment = await tool_crud.get_enrichment(seeded, "claude")
    assert enrichment == {"faqs": [{"question": "Q?", "answer": "A."}], "use_cases": []}
    assert await tool_crud.get_enrichment(seeded, "missing") == {"faqs": [], "use_cases": []}


@pytest.mark.asyncio
async def test_enrichment_counts(seeded):
    await tool_crud.update_faqs(seeded, "chatgpt", [{"question": "Q?", "answer": "A."}])
    await tool_crud.update_use_cases(seeded, "chatgpt", [{"title": "Drafting"}])
    await tool_crud.update_faqs(seeded, "cursor", [{"question": "Q?", "answer": "A."}])
    await seeded.flush()

    counts = await tool_crud.enrichment_counts(seeded)

    assert counts == {
        "total": 20,
        "with_faqs": 2,
        "with_use_cases": 1,
        "with_both": 1,
        "needing_enrichment": 19,
    }
    needing = await tool_crud.find_tools_needing_enrichment(seeded, limit=50)
    assert "chatgpt" not in {t.id for t in needing}
    recent = await tool_crud.find_recently_enriched(seeded)
    assert {t.id for t in recent} == {"chatgpt", "cursor"}
