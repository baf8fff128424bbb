"""
Gemini pipelines.

Exports:
  - GeminiClient / get_gemini_client: Shared async access to google-genai
  - NewsAgent, ToolsDiscoveryAgent, PromptsDiscoveryAgent, SEOAgent: Batch pipelines
  - fetch_and_save_news, discover_and_save_tools, discover_and_save_prompts,
    generate_seo_pages: One-shot entry points used by cron jobs and scripts
  - generate_tool_faq, generate_tool_use_cases, enrich_tools: Tool detail enrichment
  - get_ai_recommendations: Chat recommendations
"""

from toolbox.core.agents.gemini.client import (
    GeminiClient,
    GeneratedImage,
    get_gemini_client,
    is_gemini_configured,
)
from toolbox.core.agents.gemini.news_agent import NewsAgent, fetch_ai_news_with_agent, fetch_and_save_news
from toolbox.core.agents.gemini.prompts_agent import PromptsDiscoveryAgent, discover_and_save_prompts
from toolbox.core.agents.gemini.recommendations import get_ai_recommendations
from toolbox.core.agents.gemini.seo_agent import SEOAgent, generate_seo_pages, generate_single_seo_page
from toolbox.core.agents.gemini.tool_enrichment import (
    enrich_tools,
    generate_tool_faq,
    generate_tool_use_cases,
)
from toolbox.core.agents.gemini.tools_agent import ToolsDiscoveryAgent, discover_and_save_tools

__all__ = [
    "GeminiClient",
    "GeneratedImage",
    "NewsAgent",
    "PromptsDiscoveryAgent",
    "SEOAgent",
    "ToolsDiscoveryAgent",
    "discover_and_save_prompts",
    "discover_and_save_tools",
    "enrich_tools",
    "fetch_ai_news_with_agent",
    "fetch_and_save_news",
    "generate_seo_pages",
    "generate_single_seo_page",
    "generate_tool_faq",
    "generate_tool_use_cases",
    "get_ai_recommendations",
    "get_gemini_client",
    "is_gemini_configured",
]
