"""
Generate FAQs and use cases for every tool that lacks them.

Usage:
    python -m toolbox.scripts.seed_tool_enrichment [--limit N]

Dependencies: python-dotenv, toolbox.core.agents.gemini.tool_enrichment
System role: One-off enrichment backfill
"""

import argparse
import asyncio
import logging

from dotenv import load_dotenv

from toolbox.boundary.db.connection import dispose_engine
from toolbox.core.agents.gemini.tool_enrichment import enrich_tools
from toolbox.observability import configure_logging

logger = logging.getLogger(__name__)

BACKFILL_LIMIT = 1000


async def _main(limit: int) -> None:
    try:
        stats = await enrich_tools(limit=limit)
        logger.info(
            f"Enrichment backfill done: {stats['processed']} processed, {stats['errors']} errors",
            extra=stats,
        )
    finally:
        await dispose_engine()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Backfill tool FAQs and use cases")
    parser.add_argument("--limit", type=int, default=BACKFILL_LIMIT)
    args = parser.parse_args()

    load_dotenv()
    configure_logging()
    asyncio.run(_main(args.limit))
