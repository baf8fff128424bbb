"""
Process-wide settings: one object per area (database, Anthropic, Gemini,
S3 images, app), read from the environment and .env once.

Dependencies: toolbox.configs.*
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from toolbox.configs.app import AppSettings
from toolbox.configs.base import BaseSettings
from toolbox.configs.database import DatabaseSettings
from toolbox.configs.llm import AnthropicSettings, GeminiSettings
from toolbox.configs.s3_images import S3ImagesSettings


class Settings(BaseSettings):
    """Every settings area, nested by concern."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    anthropic: AnthropicSettings = Field(default_factory=AnthropicSettings)
    gemini: GeminiSettings = Field(default_factory=GeminiSettings)
    s3_images: S3ImagesSettings = Field(default_factory=S3ImagesSettings)
    app: AppSettings = Field(default_factory=AppSettings)


@lru_cache
def get_settings() -> Settings:
    """Cached Settings, read once per process."""
    return Settings()
