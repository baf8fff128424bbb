"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_agent_service,
    get_cron_runner,
    get_news_service,
    get_prompt_service,
    get_recommendation_service,
    get_seo_service,
    get_settings_dependency,
    get_stack_service,
    get_tool_service,
    get_user_service,
    verify_cron_secret,
)

__all__ = [
    "get_agent_service",
    "get_cron_runner",
    "get_news_service",
    "get_prompt_service",
    "get_recommendation_service",
    "get_seo_service",
    "get_settings_dependency",
    "get_stack_service",
    "get_tool_service",
    "get_user_service",
    "verify_cron_secret",
]
