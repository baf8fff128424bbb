"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - get_optional_async_db(), session_scope(), is_database_configured(): DB-optional helpers
  - ToolModel, UserModel, ... : ORM models for every toolbox_ table
  - tool_crud, user_crud, ... : CRUD operation singletons

Dependencies: sqlalchemy, asyncpg, toolbox.configs
System role: Database adapter for the tool directory, community features,
news, SEO pages and agent analytics.
"""

from toolbox.boundary.db.base import Base, TimestampMixin
from toolbox.boundary.db.connection import (
    dispose_engine,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
    get_optional_async_db,
    is_database_configured,
    SessionScope,
    session_scope,
)
from toolbox.boundary.db.models import (
    AgentEventModel,
    NewsModel,
    PromptTemplateModel,
    SEOPageModel,
    ToolModel,
    UserModel,
    UserStackModel,
    UserToolInteractionModel,
)
from toolbox.boundary.db.CRUD import (
    BaseCRUD,
    agent_event_crud,
    news_crud,
    prompt_crud,
    seo_page_crud,
    stack_crud,
    tool_crud,
    user_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    # Connection
    "dispose_engine",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    "get_optional_async_db",
    "is_database_configured",
    "session_scope",
    "SessionScope",
    # Models
    "AgentEventModel",
    "NewsModel",
    "PromptTemplateModel",
    "SEOPageModel",
    "ToolModel",
    "UserModel",
    "UserStackModel",
    "UserToolInteractionModel",
    # CRUD
    "BaseCRUD",
    "agent_event_crud",
    "news_crud",
    "prompt_crud",
    "seo_page_crud",
    "stack_crud",
    "tool_crud",
    "user_crud",
]
