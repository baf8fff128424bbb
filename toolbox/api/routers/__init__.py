"""API routers."""

from .agents import router as agents_router
from .health import router as health_router
from .news import router as news_router
from .prompts import router as prompts_router
from .recommendations import router as recommendations_router
from .seo import blog_router
from .seo import router as seo_router
from .stacks import router as stacks_router
from .tools import router as tools_router
from .users import router as users_router

__all__ = [
    "agents_router",
    "blog_router",
    "health_router",
    "news_router",
    "prompts_router",
    "recommendations_router",
    "seo_router",
    "stacks_router",
    "tools_router",
    "users_router",
]
