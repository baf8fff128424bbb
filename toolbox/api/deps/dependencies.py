"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Read services take an optional session (None without DATABASE_URL) so
they can serve the bundled dataset; write services require a database.

Dependencies: toolbox.configs, toolbox.application, toolbox.boundary
System role: DI container for service injection
"""

import secrets
from functools import lru_cache

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from toolbox.application.services import (
    AgentService,
    CronJobRunner,
    NewsService,
    PromptService,
    RecommendationService,
    SEOService,
    StackService,
    ToolService,
    UserService,
)
from toolbox.boundary.db import get_async_db, get_optional_async_db
from toolbox.configs import Settings, get_settings


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._cron_runner = None
        self._agent_service = None

    @property
    def cron_runner(self) -> CronJobRunner:
        """Get cached cron job runner."""
        if self._cron_runner is None:
            self._cron_runner = CronJobRunner()
        return self._cron_runner

    @property
    def agent_service(self) -> AgentService:
        """Get cached agent service."""
        if self._agent_service is None:
            self._agent_service = AgentService()
        return self._agent_service

    async def shutdown(self) -> None:
        """Cancel background jobs and clear all cached instances."""
        if self._cron_runner is not None:
            await self._cron_runner.shutdown()
        self._cron_runner = None
        self._agent_service = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_tool_service(db: AsyncSession | None = Depends(get_optional_async_db)) -> ToolService:
    """
    Get tool service instance.

    Args:
        db: Async database session, None without DATABASE_URL

    Returns:
        ToolService: Tool service instance
    """
    return ToolService(db=db)


def get_prompt_service(db: AsyncSession | None = Depends(get_optional_async_db)) -> PromptService:
    """Get prompt service instance (bundled dataset without a database)."""
    return PromptService(db=db)


def get_user_service(db: AsyncSession = Depends(get_async_db)) -> UserService:
    """
    Get user service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        UserService: User service instance
    """
    return UserService(db=db)


def get_stack_service(db: AsyncSession = Depends(get_async_db)) -> StackService:
    """Get stack service instance."""
    return StackService(db=db)


def get_news_service(db: AsyncSession | None = Depends(get_optional_async_db)) -> NewsService:
    """
    Get news service instance.

    The session is optional because the RSS proxy needs none; listing
    articles without a database fails with DatabaseNotConfiguredError.
    """
    return NewsService(db=db)


def get_seo_service(db: AsyncSession = Depends(get_async_db)) -> SEOService:
    """Get SEO page service instance."""
    return SEOService(db=db)


def get_recommendation_service(
    tool_service: ToolService = Depends(get_tool_service),
) -> RecommendationService:
    """Get recommendation service backed by the tool directory."""
    return RecommendationService(tool_service=tool_service)


def get_agent_service() -> AgentService:
    """Get cached agent service."""
    return get_service_cache().agent_service


def get_cron_runner() -> CronJobRunner:
    """Get cached cron job runner."""
    return get_service_cache().cron_runner


def verify_cron_secret(
    authorization: str | None = Header(default=None),
    settings: Settings = Depends(get_settings_dependency),
) -> None:
    """
    Require "Bearer {CRON_SECRET}" when a secret is configured.

    Raises:
        HTTPException(401): If the header does not match
    """
    cron_secret = settings.app.cron_secret
    if not cron_secret:
        return
    if not secrets.compare_digest(authorization or "", f"Bearer {cron_secret}"):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
