"""
Tool detail enrichment.

Generates FAQs and use cases for tool detail pages and backfills them for
tools that are missing either.

Dependencies: toolbox.core.agents.gemini.client, toolbox.boundary.db
System role: Content backfill for tool detail pages
"""

import asyncio
import logging
from typing import Any

from toolbox.boundary.db.connection import SessionScope, session_scope
from toolbox.boundary.db.CRUD.tool_crud import tool_crud
from toolbox.boundary.db.serializers import tool_to_dict
from toolbox.core.agents.gemini.client import GeminiClient, get_gemini_client, is_gemini_configured
from toolbox.core.agents.gemini.parsing import parse_fenced_json
from toolbox.core.agents.gemini.prompts.enrichment_prompt import (
    build_tool_faq_prompt,
    build_tool_use_cases_prompt,
)

logger = logging.getLogger(__name__)

MAX_FAQS = 8
MAX_USE_CASES = 7


def _resolve_client(client: GeminiClient | None) -> GeminiClient | None:
    if client is not None:
        return client
    if not is_gemini_configured():
        return None
    return get_gemini_client()


async def _generate_list(client: GeminiClient, prompt: str) -> list:
    text = await client.generate_text(
        prompt, temperature=0.7, top_k=40, top_p=0.95, max_output_tokens=2048
    )
    items = parse_fenced_json(text, expect="array")
    return items if isinstance(items, list) else []


async def generate_tool_faq(tool: dict, client: GeminiClient | None = None) -> list[dict]:
    """
    Generate up to eight FAQs for a tool.

    Args:
        tool: Tool dict (snake_case keys)
        client: Gemini client; the shared one when omitted

    Returns:
        list[dict]: {"question", "answer"} items; [] without a key or on failure
    """
    client = _resolve_client(client)
    if client is None:
        logger.warning("GEMINI_API_KEY not configured, skipping FAQ generation")
        return []
    try:
        items = await _generate_list(client, build_tool_faq_prompt(tool))
    except Exception as e:
        logger.error(f"Error generating FAQs for {tool.get('name')}", extra={"error": str(e)})
        return []
    faqs = [
        {"question": str(item["question"]), "answer": str(item["answer"])}
        for item in items
        if isinstance(item, dict) and item.get("question") and item.get("answer")
    ]
    return faqs[:MAX_FAQS]


async def generate_tool_use_cases(tool: dict, client: GeminiClient | None = None) -> list[dict]:
    """
    Generate up to seven use cases for a tool.

    Returns:
        list[dict]: {"title", "description", "example"?} items; [] without a key or on failure
    """
    client = _resolve_client(client)
    if client is None:
        logger.warning("GEMINI_API_KEY not configured, skipping use case generation")
        return []
    try:
        items = await _generate_list(client, build_tool_use_cases_prompt(tool))
    except Exception as e:
        logger.error(f"Error generating use cases for {tool.get('name')}", extra={"error": str(e)})
        return []

    use_cases = []
    for item in items:
        if not isinstance(item, dict) or not item.get("title") or not item.get("description"):
            continue
        use_case = {"title": str(item["title"]), "description": str(item["description"])}
        if item.get("example"):
            use_case["example"] = str(item["example"])
        use_cases.append(use_case)
    return use_cases[:MAX_USE_CASES]


async def enrich_tools(
    limit: int = 50,
    client: GeminiClient | None = None,
    session_factory: SessionScope = session_scope,
    delay: float = 2.0,
) -> dict[str, Any]:
    """
    Fill in missing FAQs and use cases.

    Only the missing half is generated for each tool. Empty generations are
    not stored, so the tool is picked up again by the next run.

    Returns:
        dict: {"processed", "faqs_generated", "use_cases_generated", "errors"}
    """
    async with session_factory() as session:
        tools = await tool_crud.find_tools_needing_enrichment(session, limit=limit)
        pending = [(tool_to_dict(t), t.faqs, t.use_cases) for t in tools]

    logger.info(f"Found {len(pending)} tools needing enrichment")
    stats = {"processed": 0, "faqs_generated": 0, "use_cases_generated": 0, "errors": 0}

    for tool, faqs, use_cases in pending:
        try:
            if not faqs:
                new_faqs = await generate_tool_faq(tool, client)
                if new_faqs:
                    async with session_factory() as session:
                        await tool_crud.update_faqs(session, tool["id"], new_faqs)
                    stats["faqs_generated"] += 1
            if not use_cases:
                new_use_cases = await generate_tool_use_cases(tool, client)
                if new_use_cases:
                    async with session_factory() as session:
                        await tool_crud.update_use_cases(session, tool["id"], new_use_cases)
                    stats["use_cases_generated"] += 1
            stats["processed"] += 1
            logger.info(f"Enriched: {tool['name']}")
        except Exception as e:
            logger.error(f"Error enriching {tool['name']}", extra={"error": str(e)})
            stats["errors"] += 1
        await asyncio.sleep(delay)

    logger.info("Tool enrichment complete", extra=stats)
    return stats
