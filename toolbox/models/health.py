"""Health check schema."""

from toolbox.models.common import CamelModel


class HealthResponse(CamelModel):
    status: str
    timestamp: str
    service: str
    environment: str
