"""
CRUD operations for database models.

Exports the base CRUD class and table-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from toolbox.boundary.db.CRUD import tool_crud, user_crud

    tool = await tool_crud.get_by_id(db, "chatgpt")
"""

from toolbox.boundary.db.CRUD.base_crud import BaseCRUD
from toolbox.boundary.db.CRUD.tool_crud import ToolCRUD, tool_crud
from toolbox.boundary.db.CRUD.user_crud import UserCRUD, user_crud
from toolbox.boundary.db.CRUD.prompt_crud import PromptCRUD, prompt_crud
from toolbox.boundary.db.CRUD.stack_crud import StackCRUD, stack_crud
from toolbox.boundary.db.CRUD.news_crud import NewsCRUD, news_crud
from toolbox.boundary.db.CRUD.seo_page_crud import SEOPageCRUD, seo_page_crud
from toolbox.boundary.db.CRUD.agent_event_crud import AgentEventCRUD, agent_event_crud

__all__ = [
    "BaseCRUD",
    "ToolCRUD",
    "tool_crud",
    "UserCRUD",
    "user_crud",
    "PromptCRUD",
    "prompt_crud",
    "StackCRUD",
    "stack_crud",
    "NewsCRUD",
    "news_crud",
    "SEOPageCRUD",
    "seo_page_crud",
    "AgentEventCRUD",
    "agent_event_crud",
]
