"""
Test suite for AgentService event recording.

Agent runs are covered through the HTTP routes; these tests focus on the
fail-open event storage.

System role: Verification of agent analytics orchestration
"""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy import select

from toolbox.application.services.agent_service import AgentService
from toolbox.boundary.db.models import AgentEventModel

DB_CONFIGURED = "toolbox.application.services.agent_service.is_database_configured"


def _service(session_factory) -> AgentService:
    return AgentService(
        session_factory=session_factory,
        email_agent=AsyncMock(),
        lead_magnet_agent=AsyncMock(),
    )


@pytest.mark.asyncio
async def test_record_event_inserts_when_database_configured(session_factory) -> None:
    # Arrange
    service = _service(session_factory)

    # Act
    with patch(DB_CONFIGURED, return_value=True):
        event_id = await service.record_event(
            "email-template-generator", "copy", user_id="u-1", payload={"variant": 2}
        )

    # Assert
    async with session_factory() as session:
        rows = (await session.execute(select(AgentEventModel))).scalars().all()
    assert [row.id for row in rows] == [event_id]
    assert rows[0].payload == {"variant": 2}


@pytest.mark.asyncio
async def test_missing_events_table_is_silent(caplog) -> None:
    @asynccontextmanager
    async def broken_scope():
        raise RuntimeError('relation "toolbox_agent_events" does not exist')
        yield

    with patch(DB_CONFIGURED, return_value=True):
        event_id = await _service(broken_scope).record_event("lead-magnet-generator", "view")

    assert event_id
    assert not any("db insert failed" in r.getMessage() for r in caplog.records)


@pytest.mark.asyncio
async def test_other_insert_errors_are_logged(caplog) -> None:
    @asynccontextmanager
    async def broken_scope():
        raise RuntimeError("connection refused")
        yield

    with patch(DB_CONFIGURED, return_value=True):
        event_id = await _service(broken_scope).record_event("lead-magnet-generator", "view")

    assert event_id
    assert any("db insert failed" in r.getMessage() for r in caplog.records)
