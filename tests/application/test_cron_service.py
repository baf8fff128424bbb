"""
Test suite for CronJobRunner.

System role: Verification of fire-and-forget job execution
"""

import asyncio
import re
from unittest.mock import AsyncMock

import pytest

from toolbox.application.services.cron_service import (
    CRON_JOBS,
    CronJobRunner,
    CronJobSpec,
    generate_job_id,
)


def test_generate_job_id_shape() -> None:
    assert re.fullmatch(r"seo-\d{13}-[a-z0-9]{7}", generate_job_id("seo"))


def test_registered_jobs_and_prefixes() -> None:
    assert {kind: spec.id_prefix for kind, spec in CRON_JOBS.items()} == {
        "news": "cron",
        "tools": "tools",
        "prompts": "prompts",
        "seo": "seo",
    }


@pytest.mark.asyncio
async def test_start_returns_immediately_and_runs_job() -> None:
    # Arrange
    release = asyncio.Event()

    async def slow_job():
        await release.wait()
        return {"saved": 3}

    run = AsyncMock(side_effect=slow_job)
    runner = CronJobRunner(jobs={"news": CronJobSpec("News fetch", "cron", "started", run)})

    # Act
    response = runner.start("news")

    # Assert
    assert response["success"] is True
    assert response["message"] == "started"
    assert response["job_id"].startswith("cron-")
    assert response["note"] == "Job is running asynchronously. Check logs for completion status."

    release.set()
    await asyncio.sleep(0.01)
    run.assert_awaited_once()
    assert not runner._tasks


@pytest.mark.asyncio
async def test_failed_job_is_logged_not_raised(caplog) -> None:
    run = AsyncMock(side_effect=RuntimeError("quota"))
    runner = CronJobRunner(jobs={"seo": CronJobSpec("SEO generation", "seo", "started", run)})

    runner.start("seo")
    await asyncio.sleep(0.01)

    assert any("failed" in record.getMessage() for record in caplog.records)


@pytest.mark.asyncio
async def test_shutdown_cancels_running_jobs() -> None:
    never = asyncio.Event()

    async def hang():
        await never.wait()
        return {}

    runner = CronJobRunner(jobs={"tools": CronJobSpec("Tools discovery", "tools", "started", hang)})
    runner.start("tools")

    await runner.shutdown()

    assert not runner._tasks
