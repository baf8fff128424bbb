"""
Recommendation service orchestrator.

Dependencies: toolbox.application.services.tool_service, toolbox.core.agents.gemini
System role: Chat recommendation use case orchestration
"""

import logging

from toolbox.application.services.tool_service import ToolService
from toolbox.core.agents.gemini.recommendations import get_ai_recommendations

logger = logging.getLogger(__name__)


class RecommendationService:
    """Answers tool questions using the directory as context."""

    def __init__(self, tool_service: ToolService) -> None:
        self.tool_service = tool_service

    async def recommend(self, query: str) -> dict:
        """
        Returns:
            dict: {"text", "recommended_tool_ids"}
        """
        tools = await self.tool_service.list_tools()
        result = await get_ai_recommendations(query, tools)
        logger.info(
            "Recommendations generated",
            extra={"recommended": len(result["recommended_tool_ids"])},
        )
        return result
