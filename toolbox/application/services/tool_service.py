"""
Tool service orchestrator.

Directory reads with a bundled-dataset fallback, plus voting.

Read operations work without a database: when no session is available, or
the query fails, the bundled dataset is filtered the same way the
repository would filter it.

Dependencies: toolbox.boundary.db.CRUD, toolbox.data
System role: Tool directory use case orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from toolbox.boundary.db.CRUD.tool_crud import tool_crud
from toolbox.boundary.db.CRUD.user_crud import user_crud
from toolbox.boundary.db.serializers import tool_to_dict
from toolbox.core.exceptions import DatabaseNotConfiguredError, NotFoundError
from toolbox.data import get_tools_dataset

logger = logging.getLogger(__name__)

TOOLS_COUNT_FALLBACK = 600
VOTE_POINTS = 5


def filter_tools(
    tools: list[dict],
    category: str | None = None,
    search: str | None = None,
    limit: int | None = None,
    offset: int | None = None,
) -> list[dict]:
    """Apply the repository's category, search, ordering and paging rules to tool dicts."""
    if category:
        tools = [t for t in tools if t["category"] == category]
    if search:
        query = search.lower()
        tools = [
            t for t in tools
            if query in t["name"].lower() or query in (t.get("tagline") or "").lower()
        ]
    tools = sorted(tools, key=lambda t: (t["votes"], t["rating"]), reverse=True)
    if limit:
        start = offset or 0
        tools = tools[start:start + limit]
    return tools


class ToolService:
    """Tool service orchestrator."""

    def __init__(self, db: AsyncSession | None) -> None:
        """
        Initialize tool service.

        Args:
            db: Async SQLAlchemy session, or None when no database is configured
        """
        self.db = db

    async def _fall_back(self, operation: str, error: Exception) -> None:
        logger.error(f"Failed to {operation}, serving bundled dataset", extra={"error": str(error)})
        await self.db.rollback()

    async def list_tools(
        self,
        category: str | None = None,
        search: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[dict]:
        """
        List tools, most voted first.

        Returns:
            list[dict]: Tool dicts
        """
        if self.db is None:
            return filter_tools(get_tools_dataset(), category, search, limit, offset)
        try:
            tools = await tool_crud.find_all(
                self.db, category=category, search=search, limit=limit, offset=offset
            )
            return [tool_to_dict(t) for t in tools]
        except Exception as e:
            await self._fall_back("fetch tools", e)
            return filter_tools(get_tools_dataset(), category, search, limit, offset)

    async def get_trending_tools(self, limit: int = 8) -> list[dict]:
        """Return the most popular tools."""
        if self.db is None:
            tools = sorted(get_tools_dataset(), key=lambda t: t["popularity"], reverse=True)
            return tools[:limit]
        tools = await tool_crud.find_trending(self.db, limit=limit)
        return [tool_to_dict(t) for t in tools]

    async def get_tool(self, tool_id: str) -> dict:
        """
        Get tool by ID.

        Raises:
            NotFoundError: If the tool does not exist
        """
        if self.db is None:
            tool = next((t for t in get_tools_dataset() if t["id"] == tool_id), None)
        else:
            row = await tool_crud.get_by_id(self.db, tool_id)
            tool = tool_to_dict(row) if row else None
        if tool is None:
            raise NotFoundError("Tool not found", resource="tool", resource_id=tool_id)
        return tool

    async def get_tool_enrichment(self, tool_id: str) -> dict[str, list]:
        """FAQs and use cases of a tool; empty lists when none were generated."""
        if self.db is None:
            return {"faqs": [], "use_cases": []}
        return await tool_crud.get_enrichment(self.db, tool_id)

    async def count_tools(self) -> int:
        """Number of tools in the directory; 600 when it cannot be counted."""
        if self.db is None:
            return TOOLS_COUNT_FALLBACK
        try:
            count = await tool_crud.count(self.db)
        except Exception as e:
            await self._fall_back("count tools", e)
            return TOOLS_COUNT_FALLBACK
        return count or TOOLS_COUNT_FALLBACK

    async def vote(self, tool_id: str, user_id: str) -> None:
        """
        Add a vote, record it as an interaction and credit the voter.

        Raises:
            DatabaseNotConfiguredError: If no database is available
        """
        if self.db is None:
            raise DatabaseNotConfiguredError()
        try:
            await tool_crud.increment_votes(self.db, tool_id)
            await user_crud.add_interaction(self.db, user_id, tool_id, "vote")
            user = await user_crud.get_by_id(self.db, user_id)
            if user is not None:
                await user_crud.update_points(self.db, user_id, user.points + VOTE_POINTS)
            logger.info("Tool vote recorded", extra={"tool_id": tool_id, "user_id": user_id})
        except Exception as e:
            logger.error(
                "Failed to vote on tool",
                extra={"error": str(e), "tool_id": tool_id, "user_id": user_id},
            )
            raise
