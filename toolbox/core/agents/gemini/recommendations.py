"""
Chat recommendations.

Answers a free-text question about which tools to use and picks the tool
ids the answer refers to from a trailing TOOLS_JSON:[...] marker.

Dependencies: toolbox.core.agents.gemini.client
System role: Backend for POST /api/recommendations
"""

import logging
import re
from typing import Any

from toolbox.core.agents.gemini.client import GeminiClient, get_gemini_client, is_gemini_configured
from toolbox.core.agents.gemini.prompts.enrichment_prompt import build_recommendation_prompt

logger = logging.getLogger(__name__)

FALLBACK_COUNT = 3

NOT_CONFIGURED_TEXT = (
    "API key not configured. Please set GEMINI_API_KEY in your .env.local file. "
    "For now, here are some popular tools that might help with your query."
)
SERVICE_ERROR_TEXT = (
    "I encountered an issue connecting to the AI service. "
    "Here are some popular tools that might help:"
)

_TOOLS_MARKER = re.compile(r"TOOLS_JSON:\[(.*?)\]", re.DOTALL)


def _fallback_ids(tools: list[dict]) -> list[str]:
    return [t["id"] for t in tools[:FALLBACK_COUNT] if t.get("id")]


def parse_recommendation(text: str, tools: list[dict]) -> dict[str, Any]:
    """
    Split a model answer into display text and tool ids.

    Without a marker the text is kept as-is and the first three tools are
    recommended.
    """
    match = _TOOLS_MARKER.search(text)
    if not match:
        return {"text": text.strip(), "recommended_tool_ids": _fallback_ids(tools)}

    ids = [
        part.strip().strip("\"'").strip()
        for part in match.group(1).split(",")
    ]
    return {
        "text": _TOOLS_MARKER.sub("", text).strip(),
        "recommended_tool_ids": [tool_id for tool_id in ids if tool_id],
    }


async def get_ai_recommendations(
    query: str,
    tools: list[dict],
    client: GeminiClient | None = None,
) -> dict[str, Any]:
    """
    Recommend tools for a user question.

    Args:
        query: The user's question
        tools: Candidate tools (dicts with id, name, tagline)
        client: Gemini client; the shared one when omitted

    Returns:
        dict: {"text": str, "recommended_tool_ids": list[str]}
    """
    if client is None and not is_gemini_configured():
        return {"text": NOT_CONFIGURED_TEXT, "recommended_tool_ids": _fallback_ids(tools)}

    try:
        client = client or get_gemini_client()
        text = await client.generate_text(build_recommendation_prompt(query, tools))
    except Exception as e:
        logger.error("Gemini API Error", extra={"error": str(e)})
        return {"text": SERVICE_ERROR_TEXT, "recommended_tool_ids": _fallback_ids(tools)}

    return parse_recommendation(text, tools)
