"""
Cron job models and schemas.

Dependencies: pydantic
System role: Background job API contracts
"""

from toolbox.models.common import CamelModel


class CronJobResponse(CamelModel):
    """202 body returned when a background job has been started."""

    success: bool = True
    message: str
    job_id: str
    timestamp: str
    note: str
