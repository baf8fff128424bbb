"""
Application-level settings.

Cron authorisation, public site URL and third-party image search.

Dependencies: pydantic_settings
System role: Site and job configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import SettingsConfigDict

from toolbox.configs.base import BaseSettings


class AppSettings(BaseSettings):
    """Site-wide settings shared by routes and jobs."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    cron_secret: str | None = Field(
        default=None,
        validation_alias=AliasChoices("CRON_SECRET"),
        description="Bearer token required by cron endpoints when set",
    )
    site_url: str = Field(
        default="https://tools.10ex.ai",
        validation_alias=AliasChoices("SITE_URL", "NEXT_PUBLIC_SITE_URL"),
        description="Public base URL used for canonical links",
    )
    unsplash_access_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("UNSPLASH_ACCESS_KEY"),
    )
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins",
    )
