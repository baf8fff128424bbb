"""
Prompt template CRUD operations.

Dependencies: sqlalchemy, toolbox.boundary.db.models
System role: Prompt library persistence operations
"""

from typing import Any, Sequence

from sqlalchemy import or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from toolbox.boundary.db.CRUD.base_crud import BaseCRUD
from toolbox.boundary.db.models.prompt_model import PromptTemplateModel


class PromptCRUD(BaseCRUD[PromptTemplateModel]):
    """CRUD operations for PromptTemplateModel."""

    def __init__(self) -> None:
        """Initialize PromptCRUD with PromptTemplateModel."""
        super().__init__(PromptTemplateModel)

    async def find_all(
        self,
        session: AsyncSession,
        category: str | None = None,
        search: str | None = None,
    ) -> Sequence[PromptTemplateModel]:
        """
        List prompts, most copied first.

        Args:
            session: Async database session
            category: Exact category; "All" or None disables the filter
            search: Case-insensitive substring matched against title or prompt

        Returns:
            Sequence of PromptTemplateModel
        """
        stmt = select(PromptTemplateModel)
        if category and category != "All":
            stmt = stmt.where(PromptTemplateModel.category == category)
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(
                    PromptTemplateModel.title.ilike(pattern),
                    PromptTemplateModel.prompt.ilike(pattern),
                )
            )
        stmt = stmt.order_by(PromptTemplateModel.copy_count.desc())
        result = await session.execute(stmt)
        return result.scalars().all()

    async def increment_copy_count(self, session: AsyncSession, prompt_id: str) -> None:
        """Add one to a prompt's copy counter."""
        stmt = (
            update(PromptTemplateModel)
            .where(PromptTemplateModel.id == prompt_id)
            .values(copy_count=PromptTemplateModel.copy_count + 1)
        )
        await session.execute(stmt)

    async def upsert(self, session: AsyncSession, data: dict[str, Any]) -> PromptTemplateModel:
        """
        Insert a prompt or update the row with the same id.

        copy_count is only written on insert.
        """
        prompt = await self.get_by_id(session, data["id"])
        if prompt is None:
            values = dict(data)
            values["copy_count"] = values.get("copy_count") or 0
            return await self.create(session, **values)

        for field in ("title", "category", "use_case", "prompt", "level"):
            if field in data:
                setattr(prompt, field, data[field])
        await session.flush()
        await session.refresh(prompt)
        return prompt


prompt_crud = PromptCRUD()
