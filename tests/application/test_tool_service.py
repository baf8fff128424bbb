"""
Test suite for ToolService.

Tests the bundled-dataset fallback, voting and the count fallback, with
the tool and user CRUD singletons patched.

System role: Verification of tool directory orchestration
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from toolbox.application.services.tool_service import (
    TOOLS_COUNT_FALLBACK,
    ToolService,
    filter_tools,
)
from toolbox.core.exceptions import DatabaseNotConfiguredError, NotFoundError

CRUD = "toolbox.application.services.tool_service.tool_crud"
USER_CRUD = "toolbox.application.services.tool_service.user_crud"


@pytest.fixture
def mock_db_session() -> AsyncSession:
    """Provide mock async database session."""
    return AsyncMock(spec=AsyncSession)


class TestFilterTools:
    def test_orders_by_votes_then_rating(self) -> None:
        tools = [
            {"id": "a", "name": "A", "category": "X", "votes": 1, "rating": 90},
            {"id": "b", "name": "B", "category": "X", "votes": 5, "rating": 70},
            {"id": "c", "name": "C", "category": "X", "votes": 5, "rating": 80},
        ]

        assert [t["id"] for t in filter_tools(tools)] == ["c", "b", "a"]

    def test_limit_and_offset(self) -> None:
        tools = [{"id": str(i), "name": str(i), "category": "X", "votes": 10 - i, "rating": 0} for i in range(10)]

        page = filter_tools(tools, limit=3, offset=3)

        assert [t["id"] for t in page] == ["3", "4", "5"]

    def test_search_matches_tagline(self) -> None:
        tools = [
            {"id": "a", "name": "Alpha", "tagline": "Video editing", "category": "X", "votes": 0, "rating": 0},
            {"id": "b", "name": "Beta", "tagline": "Writing", "category": "X", "votes": 0, "rating": 0},
        ]

        assert [t["id"] for t in filter_tools(tools, search="VIDEO")] == ["a"]


class TestToolServiceFallback:
    @pytest.mark.asyncio
    async def test_list_tools_without_db_uses_dataset(self) -> None:
        # Act
        tools = await ToolService(db=None).list_tools(category="Coding & Dev Tools", limit=10)

        # Assert
        assert len(tools) == 10
        assert all(t["category"] == "Coding & Dev Tools" for t in tools)

    @pytest.mark.asyncio
    async def test_list_tools_query_failure_rolls_back_and_falls_back(self, mock_db_session) -> None:
        # Arrange
        service = ToolService(db=mock_db_session)

        # Act
        with patch(CRUD) as tool_crud:
            tool_crud.find_all = AsyncMock(side_effect=RuntimeError("relation does not exist"))
            tools = await service.list_tools(search="midjourney")

        # Assert
        mock_db_session.rollback.assert_awaited_once()
        assert [t["id"] for t in tools] == ["midjourney"]

    @pytest.mark.asyncio
    async def test_count_falls_back_on_error(self, mock_db_session) -> None:
        with patch(CRUD) as tool_crud:
            tool_crud.count = AsyncMock(side_effect=RuntimeError("down"))
            count = await ToolService(db=mock_db_session).count_tools()

        assert count == TOOLS_COUNT_FALLBACK

    @pytest.mark.asyncio
    async def test_count_zero_falls_back(self, mock_db_session) -> None:
        with patch(CRUD) as tool_crud:
            tool_crud.count = AsyncMock(return_value=0)
            count = await ToolService(db=mock_db_session).count_tools()

        assert count == TOOLS_COUNT_FALLBACK

    @pytest.mark.asyncio
    async def test_get_missing_tool_raises(self) -> None:
        with pytest.raises(NotFoundError):
            await ToolService(db=None).get_tool("missing")


class TestToolServiceVote:
    @pytest.mark.asyncio
    async def test_vote_without_db_raises(self) -> None:
        with pytest.raises(DatabaseNotConfiguredError):
            await ToolService(db=None).vote("chatgpt", "u-1")

    @pytest.mark.asyncio
    async def test_vote_increments_records_interaction_and_credits_points(self, mock_db_session) -> None:
        # Arrange
        service = ToolService(db=mock_db_session)

        # Act
        with patch(CRUD) as tool_crud, patch(USER_CRUD) as user_crud:
            tool_crud.increment_votes = AsyncMock()
            user_crud.add_interaction = AsyncMock()
            user_crud.get_by_id = AsyncMock(return_value=SimpleNamespace(points=100))
            user_crud.update_points = AsyncMock()
            await service.vote("chatgpt", "u-1")

        # Assert
        tool_crud.increment_votes.assert_awaited_once_with(mock_db_session, "chatgpt")
        user_crud.add_interaction.assert_awaited_once_with(mock_db_session, "u-1", "chatgpt", "vote")
        user_crud.update_points.assert_awaited_once_with(mock_db_session, "u-1", 105)

    @pytest.mark.asyncio
    async def test_vote_failure_is_reraised(self, mock_db_session) -> None:
        with patch(CRUD) as tool_crud:
            tool_crud.increment_votes = AsyncMock(side_effect=RuntimeError("deadlock"))
            with pytest.raises(RuntimeError):
                await ToolService(db=mock_db_session).vote("chatgpt", "u-1")
