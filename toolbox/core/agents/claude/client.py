"""
Anthropic client factory.

Dependencies: anthropic, toolbox.configs
System role: Shared Claude API client
"""

from functools import lru_cache

from anthropic import AsyncAnthropic

from toolbox.configs import get_settings
from toolbox.core.exceptions import LLMNotConfiguredError


def is_anthropic_configured() -> bool:
    """True when ANTHROPIC_API_KEY is set."""
    return get_settings().anthropic.is_configured


@lru_cache
def get_anthropic_client() -> AsyncAnthropic:
    """
    Return the process-wide AsyncAnthropic client.

    Raises:
        LLMNotConfiguredError: If ANTHROPIC_API_KEY is missing
    """
    settings = get_settings().anthropic
    if not settings.is_configured:
        raise LLMNotConfiguredError("anthropic", "ANTHROPIC_API_KEY")
    return AsyncAnthropic(api_key=settings.api_key)


def get_anthropic_model() -> str:
    """Model id from ANTHROPIC_MODEL, defaulting to claude-3-5-sonnet-latest."""
    return get_settings().anthropic.model
