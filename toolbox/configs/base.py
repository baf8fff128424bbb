"""
Shared settings base.

Every settings area (database, LLM providers, S3, app) inherits the .env
handling and the process-wide fields defined here.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Reads .env (case-insensitive, unknown keys ignored)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(default="production", description="Reported by /api/health")
    debug: bool = False
    log_level: str = Field(default="INFO", description="Root level passed to configure_logging")
