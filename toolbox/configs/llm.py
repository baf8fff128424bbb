"""
LLM provider configuration settings.

Anthropic powers the interactive micro agents; Gemini powers the
discovery, news, SEO and enrichment pipelines.

Dependencies: pydantic_settings
System role: Credentials and model selection for LLM clients
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from toolbox.configs.base import BaseSettings


class AnthropicSettings(BaseSettings):
    """Anthropic Messages API configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ANTHROPIC_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(default=None, description="Anthropic API key")
    model: str = Field(
        default="claude-3-5-sonnet-latest",
        description="Claude model used by the micro agents",
    )

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.api_key.strip())


class GeminiSettings(BaseSettings):
    """Google Gemini configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GEMINI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(default=None, description="Gemini API key")
    text_model: str = Field(
        default="gemini-2.0-flash-exp",
        description="Model for research, discovery and content generation",
    )
    image_model: str = Field(
        default="gemini-2.5-flash-image",
        description="Model for featured image generation",
    )

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.api_key.strip())
