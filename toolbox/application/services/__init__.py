"""Service orchestrators."""

from .agent_service import AgentService
from .cron_service import CronJobRunner
from .news_service import NewsService
from .prompt_service import PromptService
from .recommendation_service import RecommendationService
from .seo_service import SEOService
from .stack_service import StackService
from .tool_service import ToolService
from .user_service import UserService

__all__ = [
    "AgentService",
    "CronJobRunner",
    "NewsService",
    "PromptService",
    "RecommendationService",
    "SEOService",
    "StackService",
    "ToolService",
    "UserService",
]
