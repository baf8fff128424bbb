"""
Daily update script.

Runs every discovery and generation pipeline in sequence: news, tools,
prompts, then SEO pages. A failing step is counted as one error and the
run moves on to the next step.

Usage:
    python -m toolbox.scripts.daily_update

Dependencies: python-dotenv, toolbox.core.agents.gemini
System role: Scheduled batch entry point
"""

import asyncio
import logging
import sys
import time
from typing import Any, Awaitable, Callable

from dotenv import load_dotenv

from toolbox.boundary.db.connection import dispose_engine
from toolbox.core.agents.gemini.news_agent import fetch_and_save_news
from toolbox.core.agents.gemini.prompts_agent import discover_and_save_prompts
from toolbox.core.agents.gemini.seo_agent import generate_seo_pages
from toolbox.core.agents.gemini.tools_agent import discover_and_save_tools
from toolbox.observability import configure_logging

logger = logging.getLogger(__name__)

STEP_DELAY_SECONDS = 2.0

Step = tuple[str, Callable[[], Awaitable[dict[str, Any]]], dict[str, int]]


def default_steps() -> list[Step]:
    """(name, pipeline, result used when the pipeline raises)."""
    return [
        ("news", fetch_and_save_news, {"fetched": 0, "saved": 0, "errors": 0}),
        ("tools", discover_and_save_tools, {"discovered": 0, "saved": 0, "skipped": 0, "errors": 0}),
        ("prompts", discover_and_save_prompts, {"discovered": 0, "saved": 0, "skipped": 0, "errors": 0}),
        ("seo", generate_seo_pages, {"researched": 0, "generated": 0, "errors": 0}),
    ]


async def run_daily_update(
    steps: list[Step] | None = None,
    delay: float = STEP_DELAY_SECONDS,
) -> dict[str, dict[str, int]]:
    """
    Run all pipelines and log a summary.

    Returns:
        dict: Per-step result dicts keyed by step name
    """
    steps = steps if steps is not None else default_steps()
    started = time.perf_counter()
    results: dict[str, dict[str, int]] = {}

    for index, (name, run, empty_result) in enumerate(steps, start=1):
        logger.info(f"Step {index}/{len(steps)}: {name}")
        try:
            results[name] = await run()
            logger.info(f"{name} finished", extra=results[name])
        except Exception as e:
            logger.error(f"{name} failed", extra={"error": str(e)})
            results[name] = {**empty_result, "errors": 1}
        if index < len(steps):
            await asyncio.sleep(delay)

    total_errors = sum(r.get("errors", 0) for r in results.values())
    logger.info(
        f"Daily update finished in {time.perf_counter() - started:.2f}s with {total_errors} error(s)",
        extra={
            "news_saved": results.get("news", {}).get("saved", 0),
            "tools_saved": results.get("tools", {}).get("saved", 0),
            "prompts_saved": results.get("prompts", {}).get("saved", 0),
            "seo_generated": results.get("seo", {}).get("generated", 0),
        },
    )
    return results


async def _main() -> None:
    try:
        await run_daily_update()
    finally:
        await dispose_engine()


if __name__ == "__main__":
    load_dotenv()
    configure_logging()
    try:
        asyncio.run(_main())
    except Exception:
        logger.exception("Fatal error in daily update")
        sys.exit(1)
