"""
Prompt library discovery agent.

Searches for popular, high-quality prompts with Gemini and adds the ones
not already in the library. Near-duplicates are detected by title overlap
or word-level Jaccard similarity of the prompt text.

Dependencies: toolbox.core.agents.gemini.client, toolbox.boundary.db
System role: Prompt library growth pipeline behind /api/prompts/discover
"""

import asyncio
import logging
import random
import string
import time
from datetime import datetime, timezone
from typing import Any

from toolbox.boundary.db.connection import SessionScope, session_scope
from toolbox.boundary.db.CRUD.prompt_crud import prompt_crud
from toolbox.core.agents.gemini.client import GeminiClient, get_gemini_client
from toolbox.core.agents.gemini.parsing import parse_fenced_json
from toolbox.core.agents.gemini.prompts.discovery_prompt import build_prompt_search_prompt
from toolbox.core.agents.gemini.utils import jaccard_similarity, long_date, slugify, word_set
from toolbox.core.taxonomy import CATEGORIES, PROMPT_LEVELS

logger = logging.getLogger(__name__)

MIN_PROMPT_LENGTH = 50
DUPLICATE_SIMILARITY = 0.8
REQUIRED_FIELDS = ("title", "prompt", "category", "useCase", "level")


def generate_prompt_id(title: str) -> str:
    """Slug of the title; a random "prompt-{ms}-{rand}" id when the slug is empty."""
    prompt_id = slugify(title)
    if not prompt_id:
        suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=7))
        prompt_id = f"prompt-{int(time.time() * 1000)}-{suffix}"
    return prompt_id


def calculate_similarity(text1: str, text2: str) -> float:
    """Word-level Jaccard similarity; 0.0 when either text is empty."""
    if not text1 or not text2:
        return 0.0
    return jaccard_similarity(word_set(text1), word_set(text2))


def build_prompt_queries(today: datetime) -> list[str]:
    """The twenty-eight discovery queries for one run."""
    month = f"{today:%B}"
    year = today.year
    return [
        f"best AI prompts {month} {year}",
        f"trending ChatGPT prompts {year}",
        f"most popular AI prompts {year}",
        "PromptBase trending prompts",
        "FlowGPT top prompts",
        "GitHub awesome prompts repository",
        "Reddit r/ChatGPT best prompts",
        "Reddit r/PromptEngineering top prompts",
        "best AI prompts for writing content",
        "best AI prompts for coding",
        "best AI prompts for marketing",
        "best AI prompts for design",
        "best AI prompts for research",
        "best AI prompts for sales",
        "best AI prompts for automation",
        "best AI prompts for data analysis",
        "AI prompts for email writing",
        "AI prompts for social media",
        "AI prompts for code generation",
        "AI prompts for image generation",
        "AI prompts for customer support",
        "AI prompts for content strategy",
        "AI prompts for SEO",
        "AI prompts for product descriptions",
        "advanced prompt engineering techniques",
        "system prompts for AI assistants",
        "chain of thought prompts",
        "few-shot learning prompts",
    ]


class PromptsDiscoveryAgent:
    """Gemini-backed prompt library discovery."""

    def __init__(
        self,
        client: GeminiClient | None = None,
        session_factory: SessionScope = session_scope,
        prompt_delay: float = 2.0,
        query_delay: float = 7.0,
        results_per_query: int = 15,
    ) -> None:
        self._client = client
        self.session_factory = session_factory
        self.prompt_delay = prompt_delay
        self.query_delay = query_delay
        self.results_per_query = results_per_query

    @property
    def client(self) -> GeminiClient:
        if self._client is None:
            self._client = get_gemini_client()
        return self._client

    async def search(self, query: str, max_results: int = 15) -> list[dict]:
        """
        Ask Gemini for prompts matching one query.

        Results missing a required field or with a prompt of 50 characters
        or fewer are dropped.
        """
        today = datetime.now(timezone.utc)
        prompt = build_prompt_search_prompt(query, long_date(today), today.date().isoformat())
        text = await self.client.generate_text(
            prompt, temperature=0.7, top_k=40, top_p=0.95, max_output_tokens=8192
        )

        try:
            prompts = parse_fenced_json(text, expect="array")
        except ValueError as e:
            logger.warning(f"Failed to parse prompts JSON: {e}")
            return []
        if not isinstance(prompts, list):
            prompts = [prompts]

        valid = [
            p
            for p in prompts
            if isinstance(p, dict)
            and all(p.get(field) for field in REQUIRED_FIELDS)
            and len(str(p["prompt"])) > MIN_PROMPT_LENGTH
        ]
        return valid[:max_results]

    async def prompt_exists(self, title: str, prompt_text: str) -> bool:
        """True when a stored prompt has an overlapping title or a very similar text."""
        async with self.session_factory() as session:
            candidates = await prompt_crud.find_all(session, search=title)
        lowered = title.lower()
        for existing in candidates:
            existing_title = existing.title.lower()
            if existing_title == lowered or lowered in existing_title or existing_title in lowered:
                return True
            if calculate_similarity(existing.prompt.lower(), prompt_text.lower()) > DUPLICATE_SIMILARITY:
                return True
        return False

    async def save_prompt(self, result: dict) -> dict[str, Any]:
        """Upsert one discovered prompt and return the stored values."""
        level = result["level"] if result["level"] in PROMPT_LEVELS else "Beginner"
        async with self.session_factory() as session:
            prompt_id = generate_prompt_id(result["title"])
            existing = await prompt_crud.get_by_id(session, prompt_id)
            if existing is not None and existing.title != result["title"]:
                prompt_id = f"{prompt_id}-{int(time.time() * 1000)}"
                logger.info(f"ID collision detected, using unique ID: {prompt_id}")

            record = {
                "id": prompt_id,
                "title": result["title"],
                "category": result["category"],
                "use_case": result["useCase"],
                "prompt": result["prompt"],
                "level": level,
                "copy_count": 0,
            }
            await prompt_crud.upsert(session, record)
        return record

    async def run(self) -> dict[str, int]:
        """
        Run one discovery pass over all queries.

        Returns:
            dict: {"discovered", "saved", "skipped", "errors"} counters
        """
        discovered = saved = skipped = errors = 0

        for query in build_prompt_queries(datetime.now(timezone.utc)):
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
                    if result["category"] not in CATEGORIES:
                        logger.info(f"Skipping prompt with unknown category: {result['category']}")
                        skipped += 1
                        continue
                    if await self.prompt_exists(result["title"], result["prompt"]):
                        logger.info(f"Skipping duplicate: {result['title']}")
                        skipped += 1
                        continue

                    await self.save_prompt(result)
                    logger.info(f"Saved: {result['title']} ({result['category']})")
                    saved += 1

                    await asyncio.sleep(self.prompt_delay)
                except Exception as e:
                    logger.error(
                        f"Error processing prompt \"{result.get('title')}\"",
                        extra={"error": str(e)},
                    )
                    errors += 1

            await asyncio.sleep(self.query_delay)

        logger.info(
            "Prompts discovery complete",
            extra={"discovered": discovered, "saved": saved, "skipped": skipped, "errors": errors},
        )
        return {"discovered": discovered, "saved": saved, "skipped": skipped, "errors": errors}


async def discover_and_save_prompts(agent: PromptsDiscoveryAgent | None = None) -> dict[str, int]:
    """Run the prompts discovery agent once."""
    return await (agent or PromptsDiscoveryAgent()).run()
