"""
Tool CRUD operations.

Directory queries (search, trending, top-rated), idempotent upsert for
seeding and discovery, vote counting, and the FAQ / use-case enrichment
columns.

Dependencies: sqlalchemy, toolbox.boundary.db.models
System role: Tool persistence operations
"""

from typing import Any, Sequence

from sqlalchemy import String, cast, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from toolbox.boundary.db.base import utcnow
from toolbox.boundary.db.CRUD.base_crud import BaseCRUD
from toolbox.boundary.db.models.tool_model import ToolModel

# Written only when the incoming value is not None, so a manual re-seed
# does not wipe what discovery recorded.
DISCOVERY_FIELDS = (
    "discovered_at",
    "discovery_source",
    "last_verified_at",
    "verification_status",
    "growth_rate_6mo",
    "is_rapidly_growing",
    "monthly_visits",
)

CATALOGUE_FIELDS = (
    "name",
    "tagline",
    "category",
    "sub_category",
    "description",
    "strengths",
    "weaknesses",
    "pricing",
    "rating",
    "popularity",
    "votes",
    "alternatives",
    "best_for",
    "overkill_for",
    "is_verified",
    "launch_date",
    "website_url",
)

_EMPTY_JSON = ("[]", "null")


def _missing_faqs():
    return or_(
        ToolModel.faqs.is_(None),
        cast(ToolModel.faqs, String).in_(_EMPTY_JSON),
        ToolModel.faqs_generated_at.is_(None),
    )


def _missing_use_cases():
    return or_(
        ToolModel.use_cases.is_(None),
        cast(ToolModel.use_cases, String).in_(_EMPTY_JSON),
        ToolModel.use_cases_generated_at.is_(None),
    )


class ToolCRUD(BaseCRUD[ToolModel]):
    """CRUD operations for ToolModel."""

    def __init__(self) -> None:
        """Initialize ToolCRUD with ToolModel."""
        super().__init__(ToolModel)

    async def find_all(
        self,
        session: AsyncSession,
        category: str | None = None,
        search: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Sequence[ToolModel]:
        """
        List tools, most voted first.

        Args:
            session: Async database session
            category: Exact category filter
            search: Case-insensitive substring matched against name or tagline
            limit: Maximum number of tools
            offset: Number of tools to skip

        Returns:
            Sequence of ToolModel ordered by votes desc, rating desc
        """
        stmt = select(ToolModel)
        if category:
            stmt = stmt.where(ToolModel.category == category)
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(ToolModel.name.ilike(pattern), ToolModel.tagline.ilike(pattern))
            )
        stmt = stmt.order_by(ToolModel.votes.desc(), ToolModel.rating.desc())
        if limit:
            stmt = stmt.limit(limit)
        if offset:
            stmt = stmt.offset(offset)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def find_trending(self, session: AsyncSession, limit: int = 8) -> Sequence[ToolModel]:
        """Return the most popular tools."""
        stmt = select(ToolModel).order_by(ToolModel.popularity.desc()).limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def find_top_rated_by_category(
        self,
        session: AsyncSession,
        category: str,
        limit: int = 5,
    ) -> Sequence[ToolModel]:
        """Return the highest rated tools in one category."""
        stmt = (
            select(ToolModel)
            .where(ToolModel.category == category)
            .order_by(ToolModel.rating.desc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def find_by_ids(self, session: AsyncSession, ids: list[str]) -> Sequence[ToolModel]:
        """Return the tools with the given ids, highest rated first."""
        if not ids:
            return []
        stmt = select(ToolModel).where(ToolModel.id.in_(ids)).order_by(ToolModel.rating.desc())
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count(self, session: AsyncSession) -> int:
        """Return the number of tools in the directory."""
        result = await session.execute(select(func.count()).select_from(ToolModel))
        return int(result.scalar_one())

    async def upsert(self, session: AsyncSession, data: dict[str, Any]) -> ToolModel:
        """
        Insert a tool, or update the existing row with the same id.

        Catalogue fields are always overwritten. Discovery fields keep their
        stored value when the incoming value is None.

        Args:
            session: Async database session
            data: Column values keyed by column name; must include "id"

        Returns:
            The stored ToolModel
        """
        tool = await self.get_by_id(session, data["id"])
        if tool is None:
            values = {k: v for k, v in data.items() if v is not None or k not in DISCOVERY_FIELDS}
            values.setdefault("discovery_source", "manual")
            values.setdefault("verification_status", "pending")
            values.setdefault("is_rapidly_growing", False)
            return await self.create(session, **values)

        for field in CATALOGUE_FIELDS:
            if field in data:
                setattr(tool, field, data[field])
        for field in DISCOVERY_FIELDS:
            if data.get(field) is not None:
                setattr(tool, field, data[field])
        await session.flush()
        await session.refresh(tool)
        return tool

    async def increment_votes(self, session: AsyncSession, tool_id: str) -> None:
        """Add one vote to a tool."""
        stmt = (
            update(ToolModel)
            .where(ToolModel.id == tool_id)
            .values(votes=ToolModel.votes + 1)
        )
        await session.execute(stmt)

    async def update_faqs(self, session: AsyncSession, tool_id: str, faqs: list[dict]) -> None:
        """Store generated FAQs and stamp faqs_generated_at."""
        stmt = (
            update(ToolModel)
            .where(ToolModel.id == tool_id)
            .values(faqs=faqs, faqs_generated_at=utcnow())
        )
        await session.execute(stmt)

    async def update_use_cases(
        self,
        session: AsyncSession,
        tool_id: str,
        use_cases: list[dict],
    ) -> None:
        """Store generated use cases and stamp use_cases_generated_at."""
        stmt = (
            update(ToolModel)
            .where(ToolModel.id == tool_id)
            .values(use_cases=use_cases, use_cases_generated_at=utcnow())
        )
        await session.execute(stmt)

    async def get_enrichment(self, session: AsyncSession, tool_id: str) -> dict[str, list]:
        """
        Return the enrichment payload for one tool.

        Returns:
            dict: {"faqs": [...], "use_cases": [...]} (empty lists when unset)
        """
        stmt = select(ToolModel.faqs, ToolModel.use_cases).where(ToolModel.id == tool_id)
        row = (await session.execute(stmt)).first()
        if row is None:
            return {"faqs": [], "use_cases": []}
        faqs, use_cases = row
        return {
            "faqs": faqs if isinstance(faqs, list) else [],
            "use_cases": use_cases if isinstance(use_cases, list) else [],
        }

    async def find_tools_needing_enrichment(
        self,
        session: AsyncSession,
        limit: int = 50,
    ) -> Sequence[ToolModel]:
        """
        Return tools missing FAQs or use cases, most voted first.

        A column counts as missing when it is NULL, an empty JSON list, or
        its generated_at stamp is NULL.
        """
        stmt = (
            select(ToolModel)
            .where(or_(_missing_faqs(), _missing_use_cases()))
            .order_by(ToolModel.votes.desc(), ToolModel.rating.desc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def enrichment_counts(self, session: AsyncSession) -> dict[str, int]:
        """
        Count tools by enrichment state.

        Returns:
            dict: total, with_faqs, with_use_cases, with_both, needing_enrichment
        """
        has_faqs = ~_missing_faqs()
        has_use_cases = ~_missing_use_cases()

        async def count_where(*criteria) -> int:
            stmt = select(func.count()).select_from(ToolModel)
            if criteria:
                stmt = stmt.where(*criteria)
            return (await session.execute(stmt)).scalar_one()

        return {
            "total": await count_where(),
            "with_faqs": await count_where(has_faqs),
            "with_use_cases": await count_where(has_use_cases),
            "with_both": await count_where(has_faqs, has_use_cases),
            "needing_enrichment": await count_where(or_(_missing_faqs(), _missing_use_cases())),
        }

    async def find_recently_enriched(self, session: AsyncSession, limit: int = 5) -> Sequence[ToolModel]:
        """Tools with any enrichment, most recently generated first."""
        stamp = func.coalesce(ToolModel.faqs_generated_at, ToolModel.use_cases_generated_at)
        stmt = (
            select(ToolModel)
            .where(or_(ToolModel.faqs_generated_at.isnot(None), ToolModel.use_cases_generated_at.isnot(None)))
            .order_by(stamp.desc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


tool_crud = ToolCRUD()
