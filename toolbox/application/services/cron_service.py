"""
Cron job runner.

Starts the Gemini pipelines as fire-and-forget asyncio tasks so cron
routes can answer 202 immediately. Completion and failure are only
reported in the logs.

Dependencies: asyncio, toolbox.core.agents.gemini
System role: Background execution for cron-triggered pipelines
"""

import asyncio
import logging
import random
import string
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable

from toolbox.core.agents.gemini.news_agent import fetch_and_save_news
from toolbox.core.agents.gemini.prompts_agent import discover_and_save_prompts
from toolbox.core.agents.gemini.seo_agent import generate_seo_pages
from toolbox.core.agents.gemini.tools_agent import discover_and_save_tools
from toolbox.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)

JobFactory = Callable[[], Awaitable[dict[str, Any]]]

BACKGROUND_NOTE = "Job is running asynchronously. Check logs for completion status."


@dataclass(frozen=True)
class CronJobSpec:
    """How one pipeline is announced and started."""

    name: str
    id_prefix: str
    message: str
    run: JobFactory


CRON_JOBS: dict[str, CronJobSpec] = {
    "news": CronJobSpec("News fetch", "cron", "News fetch job started in background", fetch_and_save_news),
    "tools": CronJobSpec("Tools discovery", "tools", "Tools discovery job started in background", discover_and_save_tools),
    "prompts": CronJobSpec("Prompts discovery", "prompts", "Prompts discovery job started in background", discover_and_save_prompts),
    "seo": CronJobSpec("SEO generation", "seo", "SEO generation job started in background", generate_seo_pages),
}


def generate_job_id(prefix: str) -> str:
    """"{prefix}-{epoch_ms}-{7 random base-36 chars}"."""
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=7))
    return f"{prefix}-{int(time.time() * 1000)}-{suffix}"


class CronJobRunner:
    """Starts cron jobs in the background and keeps their tasks alive until they finish."""

    def __init__(self, jobs: dict[str, CronJobSpec] | None = None) -> None:
        self.jobs = jobs if jobs is not None else CRON_JOBS
        self._tasks: set[asyncio.Task] = set()

    async def _execute(self, spec: CronJobSpec, job_id: str) -> None:
        started = time.perf_counter()
        try:
            result = await spec.run()
        except Exception as e:
            log_exception_with_context(
                logger,
                f"[CRON] Job {job_id} failed after {time.perf_counter() - started:.2f}s",
                e,
                job_id=job_id,
            )
            return
        log_with_context(
            logger,
            logging.INFO,
            f"[CRON] Job {job_id} completed in {time.perf_counter() - started:.2f}s",
            job_id=job_id,
            **result,
        )

    def start(self, kind: str) -> dict[str, Any]:
        """
        Start a job and return the 202 response body.

        Args:
            kind: One of "news", "tools", "prompts", "seo"

        Returns:
            dict: success, message, job_id, timestamp, note
        """
        spec = self.jobs[kind]
        job_id = generate_job_id(spec.id_prefix)
        timestamp = datetime.now(timezone.utc).isoformat()
        logger.info(f"[CRON] {spec.name} job started at {timestamp} (Job ID: {job_id})")

        task = asyncio.create_task(self._execute(spec, job_id))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

        return {
            "success": True,
            "message": spec.message,
            "job_id": job_id,
            "timestamp": timestamp,
            "note": BACKGROUND_NOTE,
        }

    async def shutdown(self) -> None:
        """Cancel jobs still running (called on application shutdown)."""
        for task in list(self._tasks):
            task.cancel()
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)
        self._tasks.clear()
