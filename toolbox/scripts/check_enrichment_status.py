"""
Report how far tool enrichment has progressed.

Usage:
    python -m toolbox.scripts.check_enrichment_status

Dependencies: python-dotenv, toolbox.boundary.db
System role: Operator diagnostics
"""

import asyncio
import logging

from dotenv import load_dotenv

from toolbox.boundary.db.connection import SessionScope, dispose_engine, session_scope
from toolbox.boundary.db.CRUD.tool_crud import tool_crud
from toolbox.observability import configure_logging

logger = logging.getLogger(__name__)


def percentage(part: int, total: int) -> str:
    if not total:
        return "0.0%"
    return f"{part / total * 100:.1f}%"


async def check_enrichment_status(session_factory: SessionScope = session_scope) -> dict[str, int]:
    """Log enrichment coverage and the most recently enriched tools."""
    async with session_factory() as session:
        counts = await tool_crud.enrichment_counts(session)
        recent = await tool_crud.find_recently_enriched(session, limit=5)
        recent_rows = [(t.name, t.faqs_generated_at, t.use_cases_generated_at) for t in recent]

    total = counts["total"]
    logger.info(f"Total tools: {total}")
    logger.info(f"Tools with FAQs: {counts['with_faqs']} ({percentage(counts['with_faqs'], total)})")
    logger.info(
        f"Tools with use cases: {counts['with_use_cases']} "
        f"({percentage(counts['with_use_cases'], total)})"
    )
    logger.info(f"Tools with both: {counts['with_both']} ({percentage(counts['with_both'], total)})")
    logger.info(
        f"Tools needing enrichment: {counts['needing_enrichment']} "
        f"({percentage(counts['needing_enrichment'], total)})"
    )

    if counts["needing_enrichment"] == 0:
        logger.info("Enrichment complete")
    for name, faqs_at, use_cases_at in recent_rows:
        logger.info(f"Recently enriched: {name}", extra={"faqs_at": faqs_at, "use_cases_at": use_cases_at})

    return counts


async def _main() -> None:
    try:
        await check_enrichment_status()
    finally:
        await dispose_engine()


if __name__ == "__main__":
    load_dotenv()
    configure_logging()
    asyncio.run(_main())
