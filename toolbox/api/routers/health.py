"""
Health check API endpoint.

Routes: GET /health

Dependencies: toolbox.configs
System role: Health check HTTP API
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from toolbox.api.deps.dependencies import get_settings_dependency
from toolbox.configs import Settings
from toolbox.models.health import HealthResponse

SERVICE_NAME = "ai-tool-box"

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings_dependency)) -> HealthResponse:
    """Liveness check; does not touch the database."""
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat(),
        service=SERVICE_NAME,
        environment=settings.environment,
    )
