"""
User stack CRUD operations.

Dependencies: sqlalchemy, toolbox.boundary.db.models
System role: Stack builder persistence operations
"""

import time
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from toolbox.boundary.db.CRUD.base_crud import BaseCRUD
from toolbox.boundary.db.models.stack_model import UserStackModel

DEFAULT_STACK_NAME = "My Stack"


class StackCRUD(BaseCRUD[UserStackModel]):
    """CRUD operations for UserStackModel."""

    def __init__(self) -> None:
        """Initialize StackCRUD with UserStackModel."""
        super().__init__(UserStackModel)

    async def find_by_user_id(self, session: AsyncSession, user_id: str) -> Sequence[UserStackModel]:
        """Return a user's stacks, most recently updated first."""
        stmt = (
            select(UserStackModel)
            .where(UserStackModel.user_id == user_id)
            .order_by(UserStackModel.updated_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def create_stack(
        self,
        session: AsyncSession,
        user_id: str,
        tool_ids: list[str],
        name: str | None = None,
    ) -> UserStackModel:
        """
        Create a stack with id "stack-{user_id}-{epoch_ms}".

        Args:
            session: Async database session
            user_id: Owner id
            tool_ids: Ordered tool ids
            name: Display name, "My Stack" when omitted

        Returns:
            Created UserStackModel
        """
        stack_id = f"stack-{user_id}-{int(time.time() * 1000)}"
        return await self.create(
            session,
            id=stack_id,
            user_id=user_id,
            name=name or DEFAULT_STACK_NAME,
            tool_ids=list(tool_ids),
        )

    async def update_stack(
        self,
        session: AsyncSession,
        stack_id: str,
        tool_ids: list[str],
        name: str | None = None,
    ) -> UserStackModel | None:
        """Replace a stack's tools; the name only changes when given."""
        values: dict = {"tool_ids": list(tool_ids)}
        if name:
            values["name"] = name
        return await self.update_by_id(session, stack_id, **values)


stack_crud = StackCRUD()
