"""
Prompt library service orchestrator.

Reads fall back to the bundled prompt dataset when no database is
available or the query fails.

Dependencies: toolbox.boundary.db.CRUD, toolbox.data
System role: Prompt library use case orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from toolbox.boundary.db.CRUD.prompt_crud import prompt_crud
from toolbox.boundary.db.serializers import prompt_to_dict
from toolbox.core.exceptions import DatabaseNotConfiguredError, NotFoundError
from toolbox.data import get_prompts_dataset

logger = logging.getLogger(__name__)


def filter_prompts(prompts: list[dict], category: str | None = None, search: str | None = None) -> list[dict]:
    if category and category != "All":
        prompts = [p for p in prompts if p["category"] == category]
    if search:
        query = search.lower()
        prompts = [
            p for p in prompts
            if query in p["title"].lower() or query in p["prompt"].lower()
        ]
    return sorted(prompts, key=lambda p: p["copy_count"], reverse=True)


class PromptService:
    """Prompt library service orchestrator."""

    def __init__(self, db: AsyncSession | None) -> None:
        self.db = db

    async def list_prompts(self, category: str | None = None, search: str | None = None) -> list[dict]:
        """
        List prompts, most copied first.

        Args:
            category: Category name; "All" disables the filter
            search: Substring of title or prompt text

        Returns:
            list[dict]: Prompt dicts
        """
        if self.db is None:
            return filter_prompts(get_prompts_dataset(), category, search)
        try:
            prompts = await prompt_crud.find_all(self.db, category=category or "All", search=search)
            return [prompt_to_dict(p) for p in prompts]
        except Exception as e:
            logger.error("Failed to fetch prompts, serving bundled dataset", extra={"error": str(e)})
            await self.db.rollback()
            return filter_prompts(get_prompts_dataset(), category, search)

    async def copy_prompt(self, prompt_id: str) -> dict:
        """
        Count a copy of a prompt and return it.

        Raises:
            NotFoundError: If the prompt does not exist
        """
        if self.db is None:
            raise DatabaseNotConfiguredError()
        await prompt_crud.increment_copy_count(self.db, prompt_id)
        prompt = await prompt_crud.get_by_id(self.db, prompt_id)
        if prompt is None:
            raise NotFoundError("Prompt not found", resource="prompt", resource_id=prompt_id)
        await self.db.refresh(prompt)
        return prompt_to_dict(prompt)
