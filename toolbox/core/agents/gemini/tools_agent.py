"""
AI tools discovery agent.

Searches for new and trending AI tools with Gemini, validates and probes
their websites, enriches each tool with strengths, weaknesses, rating and
growth metrics, and upserts the result into the directory.

Flow per query:
1. Ask for a JSON array of tools
2. Drop entries without a name or with an unusable URL
3. Skip tools already in the directory or whose site is unreachable
4. Enrich and save (discovery_source "ai_search")

Dependencies: toolbox.core.agents.gemini.client, toolbox.boundary.http, toolbox.boundary.db
System role: Directory growth pipeline behind /api/tools/discover
"""

import asyncio
import logging
from datetime import date, datetime, timezone
from typing import Any

from toolbox.boundary.db.connection import SessionScope, session_scope
from toolbox.boundary.db.CRUD.tool_crud import tool_crud
from toolbox.boundary.http.url_check import check_url_accessible, validate_and_clean_url
from toolbox.core.agents.gemini.client import GeminiClient, get_gemini_client
from toolbox.core.agents.gemini.parsing import parse_fenced_json
from toolbox.core.agents.gemini.prompts.discovery_prompt import (
    build_tool_enrichment_prompt,
    build_tool_search_prompt,
)
from toolbox.core.agents.gemini.utils import long_date, slugify
from toolbox.core.taxonomy import CATEGORIES, DEFAULT_CATEGORY, PRICING_TIERS

logger = logging.getLogger(__name__)

RAPID_GROWTH_THRESHOLD = 50


def generate_tool_id(name: str) -> str:
    """Slug of the tool name, at most 100 characters."""
    return slugify(name)


def build_tool_queries(today: datetime) -> list[str]:
    """The sixteen discovery queries for one run."""
    month = f"{today:%B}"
    year = today.year
    return [
        f"trending AI tools {month} {year}",
        f"new AI tools launched {month} {year}",
        f"best AI tools {month} {year}",
        "Product Hunt trending AI tools this week",
        "Product Hunt AI tools launched today",
        "Hacker News trending AI tools",
        "Twitter trending AI tools",
        "Reddit r/artificial trending AI tools",
        f"trending AI writing tools {year}",
        f"trending AI coding tools {year}",
        f"trending AI design tools {year}",
        f"trending AI video tools {year}",
        f"trending AI automation tools {year}",
        f"AI tools funded {month} {year}",
        f"AI startups launched {year}",
        f"Y Combinator AI tools {year}",
    ]


def default_enrichment() -> dict[str, Any]:
    return {
        "strengths": [],
        "weaknesses": [],
        "best_for": "",
        "overkill_for": "",
        "sub_category": "",
        "rating": 50,
        "growth_rate_6mo": None,
        "monthly_visits": None,
    }


def _clamp_rating(value: Any) -> int:
    try:
        rating = int(round(float(value))) if value else 50
    except (TypeError, ValueError):
        rating = 50
    return max(0, min(100, rating))


def _parse_launch_date(value: Any) -> date:
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            pass
    return datetime.now(timezone.utc).date()


def _number_or_none(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not value:
        return None
    return value


class ToolsDiscoveryAgent:
    """Gemini-backed tool discovery."""

    def __init__(
        self,
        client: GeminiClient | None = None,
        session_factory: SessionScope = session_scope,
        tool_delay: float = 2.0,
        query_delay: float = 7.0,
        results_per_query: int = 10,
    ) -> None:
        self._client = client
        self.session_factory = session_factory
        self.tool_delay = tool_delay
        self.query_delay = query_delay
        self.results_per_query = results_per_query

    @property
    def client(self) -> GeminiClient:
        if self._client is None:
            self._client = get_gemini_client()
        return self._client

    async def search(self, query: str, max_results: int = 10) -> list[dict]:
        """
        Ask Gemini for tools matching one query.

        Returns:
            list[dict]: Search results (camelCase keys) with cleaned websiteUrl;
            [] when the response is not valid JSON
        """
        today = datetime.now(timezone.utc)
        prompt = build_tool_search_prompt(query, long_date(today), today.date().isoformat())
        text = await self.client.generate_text(
            prompt, temperature=0.7, top_k=40, top_p=0.95, max_output_tokens=8192
        )

        try:
            tools = parse_fenced_json(text, expect="array")
        except ValueError as e:
            logger.warning(
                f"Failed to parse tools JSON: {e}", extra={"response_preview": text[:200]}
            )
            return []
        if not isinstance(tools, list):
            tools = [tools]

        valid: list[dict] = []
        for tool in tools:
            if not isinstance(tool, dict) or not tool.get("name") or not tool.get("websiteUrl"):
                logger.info(f"Skipping tool missing name or URL: {tool}")
                continue
            cleaned_url = validate_and_clean_url(tool["websiteUrl"])
            if not cleaned_url:
                logger.info(f"Invalid URL for tool \"{tool['name']}\": {tool['websiteUrl']}")
                continue
            valid.append({**tool, "websiteUrl": cleaned_url})
        return valid[:max_results]

    async def enrich_tool_data(self, tool: dict) -> dict[str, Any]:
        """
        Ask Gemini for strengths, weaknesses, audience, rating and growth.

        Returns:
            dict: snake_case enrichment fields; defaults when the call or parse fails
        """
        try:
            text = await self.client.generate_text(
                build_tool_enrichment_prompt(tool),
                temperature=0.5,
                top_k=40,
                top_p=0.95,
                max_output_tokens=2048,
            )
            enriched = parse_fenced_json(text, expect="object")
            if not isinstance(enriched, dict):
                raise ValueError("Enrichment response is not a JSON object")
        except Exception as e:
            logger.warning(f"Failed to enrich tool data for \"{tool.get('name')}\": {e}")
            return default_enrichment()

        return {
            "strengths": enriched.get("strengths") or [],
            "weaknesses": enriched.get("weaknesses") or [],
            "best_for": enriched.get("bestFor") or "",
            "overkill_for": enriched.get("overkillFor") or "",
            "sub_category": enriched.get("subCategory") or "",
            "rating": _clamp_rating(enriched.get("rating")),
            "growth_rate_6mo": _number_or_none(enriched.get("growthRate6mo")),
            "monthly_visits": _number_or_none(enriched.get("monthlyVisits")),
        }

    async def tool_exists(self, name: str, website_url: str) -> bool:
        """True when a tool with an overlapping name or the same URL is stored."""
        async with self.session_factory() as session:
            candidates = await tool_crud.find_all(session, search=name, limit=10)
        lowered = name.lower()
        for tool in candidates:
            existing = tool.name.lower()
            if existing == lowered or lowered in existing or existing in lowered:
                return True
            if tool.website_url == website_url:
                return True
        return False

    def build_tool_record(self, result: dict, enriched: dict) -> dict[str, Any]:
        """Combine a search result and its enrichment into a tool row."""
        now = datetime.now(timezone.utc)
        category = result.get("category") if result.get("category") in CATEGORIES else DEFAULT_CATEGORY
        pricing = result.get("pricing") if result.get("pricing") in PRICING_TIERS else "Freemium"
        growth = enriched.get("growth_rate_6mo")
        monthly_visits = enriched.get("monthly_visits")
        return {
            "id": generate_tool_id(result["name"]),
            "name": result["name"],
            "tagline": result.get("tagline") or "",
            "category": category,
            "sub_category": enriched.get("sub_category") or "",
            "description": result.get("description") or "",
            "strengths": enriched.get("strengths") or [],
            "weaknesses": enriched.get("weaknesses") or [],
            "pricing": pricing,
            "rating": enriched.get("rating") or 50,
            "popularity": 0,
            "votes": 0,
            "alternatives": [],
            "best_for": enriched.get("best_for") or "",
            "overkill_for": enriched.get("overkill_for") or "",
            "is_verified": False,
            "launch_date": _parse_launch_date(result.get("launchDate")),
            "website_url": result["websiteUrl"],
            "discovered_at": now,
            "discovery_source": "ai_search",
            "last_verified_at": now,
            "verification_status": "verified",
            "growth_rate_6mo": float(growth) if growth is not None else None,
            "is_rapidly_growing": bool(growth and growth > RAPID_GROWTH_THRESHOLD),
            "monthly_visits": int(monthly_visits) if monthly_visits is not None else None,
        }

    async def run(self) -> dict[str, int]:
        """
        Run one discovery pass over all queries.

        Returns:
            dict: {"discovered", "saved", "skipped", "errors"} counters
        """
        discovered = saved = skipped = errors = 0

        for query in build_tool_queries(datetime.now(timezone.utc)):
            logger.info(f"Searching: \"{query}\"")
            try:
                results = await self.search(query, self.results_per_query)
            except Exception as e:
                logger.error(f"Error searching with query \"{query}\"", extra={"error": str(e)})
                errors += 1
                continue
            discovered += len(results)

            for result in results:
                try:
                    if await self.tool_exists(result["name"], result["websiteUrl"]):
                        logger.info(f"Skipping duplicate: {result['name']}")
                        skipped += 1
                        continue
                    if not await check_url_accessible(result["websiteUrl"]):
                        logger.info(f"Skipping inaccessible URL: {result['name']}")
                        skipped += 1
                        continue

                    enriched = await self.enrich_tool_data(result)
                    record = self.build_tool_record(result, enriched)
                    async with self.session_factory() as session:
                        await tool_crud.upsert(session, record)
                    logger.info(f"Saved: {result['name']}")
                    saved += 1

                    await asyncio.sleep(self.tool_delay)
                except Exception as e:
                    logger.error(
                        f"Error processing tool \"{result.get('name')}\"",
                        extra={"error": str(e)},
                    )
                    errors += 1

            await asyncio.sleep(self.query_delay)

        logger.info(
            "Tools discovery complete",
            extra={"discovered": discovered, "saved": saved, "skipped": skipped, "errors": errors},
        )
        return {"discovered": discovered, "saved": saved, "skipped": skipped, "errors": errors}


async def discover_and_save_tools(agent: ToolsDiscoveryAgent | None = None) -> dict[str, int]:
    """Run the tools discovery agent once."""
    return await (agent or ToolsDiscoveryAgent()).run()
