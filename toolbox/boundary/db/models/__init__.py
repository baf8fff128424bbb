"""
Database models package.

Exports:
  - ToolModel: AI tool directory entry
  - UserModel, UserToolInteractionModel: Users and their tool interactions
  - PromptTemplateModel: Prompt library entry
  - UserStackModel: User-built tool stacks
  - NewsModel: Aggregated news article
  - SEOPageModel: Generated SEO content page
  - AgentEventModel: Micro agent analytics event

Dependencies: sqlalchemy, toolbox.boundary.db.base
System role: Database model definitions for domain entities
"""

from toolbox.boundary.db.models.tool_model import ToolModel
from toolbox.boundary.db.models.user_model import UserModel, UserToolInteractionModel
from toolbox.boundary.db.models.prompt_model import PromptTemplateModel
from toolbox.boundary.db.models.stack_model import UserStackModel
from toolbox.boundary.db.models.news_model import NewsModel
from toolbox.boundary.db.models.seo_page_model import SEOPageModel
from toolbox.boundary.db.models.agent_event_model import AgentEventModel

__all__ = [
    "ToolModel",
    "UserModel",
    "UserToolInteractionModel",
    "PromptTemplateModel",
    "UserStackModel",
    "NewsModel",
    "SEOPageModel",
    "AgentEventModel",
]
