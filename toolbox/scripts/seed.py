"""
Seed the database with the bundled dataset.

Upserts every bundled tool and prompt, so running it twice is harmless.

Usage:
    python -m toolbox.scripts.seed

Dependencies: python-dotenv, toolbox.boundary.db, toolbox.data
System role: Initial data load
"""

import asyncio
import logging

from dotenv import load_dotenv

from toolbox.boundary.db.connection import SessionScope, dispose_engine, session_scope
from toolbox.boundary.db.CRUD.prompt_crud import prompt_crud
from toolbox.boundary.db.CRUD.tool_crud import tool_crud
from toolbox.data import get_prompts_dataset, get_tools_dataset
from toolbox.observability import configure_logging

logger = logging.getLogger(__name__)


async def seed_database(session_factory: SessionScope = session_scope) -> dict[str, int]:
    """
    Returns:
        dict: {"tools", "prompts"} upsert counts
    """
    tools = get_tools_dataset()
    prompts = get_prompts_dataset()

    async with session_factory() as session:
        for tool in tools:
            await tool_crud.upsert(session, tool)
        logger.info(f"Seeded {len(tools)} tools")

        for prompt in prompts:
            await prompt_crud.upsert(session, prompt)
        logger.info(f"Seeded {len(prompts)} prompts")

    return {"tools": len(tools), "prompts": len(prompts)}


async def _main() -> None:
    try:
        await seed_database()
    finally:
        await dispose_engine()


if __name__ == "__main__":
    load_dotenv()
    configure_logging()
    asyncio.run(_main())
