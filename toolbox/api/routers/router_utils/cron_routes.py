"""
Cron route registration.

Every cron endpoint accepts GET and POST (schedulers differ), checks the
cron secret and answers 202 as soon as the job has been started.

Dependencies: fastapi, toolbox.application.services.cron_service
System role: Shared wiring for cron-triggered endpoints
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from toolbox.api.deps.dependencies import get_cron_runner, verify_cron_secret
from toolbox.application.services.cron_service import CronJobRunner
from toolbox.models.cron import CronJobResponse

logger = logging.getLogger(__name__)


def add_cron_route(router: APIRouter, path: str, kind: str) -> None:
    """
    Register GET and POST `path` on `router` to start the `kind` job.

    Args:
        router: Router to extend
        path: Route path relative to the router prefix
        kind: Job key understood by CronJobRunner
    """

    async def start_job(runner: CronJobRunner = Depends(get_cron_runner)) -> CronJobResponse:
        try:
            return CronJobResponse(**runner.start(kind))
        except Exception as e:
            logger.error(f"[CRON] Error starting {kind} job", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to start {kind} job",
            )

    start_job.__name__ = f"start_{kind}_job"
    router.add_api_route(
        path,
        start_job,
        methods=["GET", "POST"],
        response_model=CronJobResponse,
        status_code=status.HTTP_202_ACCEPTED,
        dependencies=[Depends(verify_cron_secret)],
    )
