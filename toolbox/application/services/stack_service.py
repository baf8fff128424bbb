"""
Stack builder service orchestrator.

Dependencies: toolbox.boundary.db.CRUD
System role: Stack builder use case orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from toolbox.boundary.db.CRUD.stack_crud import stack_crud
from toolbox.boundary.db.serializers import stack_to_dict
from toolbox.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class StackService:
    """Stack builder service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_stacks(self, user_id: str) -> list[dict]:
        """Return a user's stacks, most recently updated first."""
        stacks = await stack_crud.find_by_user_id(self.db, user_id)
        return [stack_to_dict(s) for s in stacks]

    async def create_stack(self, user_id: str, tool_ids: list[str], name: str | None = None) -> dict:
        try:
            stack = await stack_crud.create_stack(self.db, user_id=user_id, tool_ids=tool_ids, name=name)
            logger.info("Stack created", extra={"stack_id": stack.id, "user_id": user_id})
            return stack_to_dict(stack)
        except Exception as e:
            logger.error("Failed to create stack", extra={"error": str(e), "user_id": user_id})
            raise

    async def update_stack(self, stack_id: str, tool_ids: list[str], name: str | None = None) -> dict:
        """
        Replace a stack's tools and optionally rename it.

        Raises:
            NotFoundError: If the stack does not exist
        """
        stack = await stack_crud.update_stack(self.db, stack_id, tool_ids=tool_ids, name=name)
        if stack is None:
            raise NotFoundError("Stack not found", resource="stack", resource_id=stack_id)
        return stack_to_dict(stack)

    async def delete_stack(self, stack_id: str) -> bool:
        """Delete a stack; False when it did not exist."""
        return await stack_crud.delete_by_id(self.db, stack_id)
