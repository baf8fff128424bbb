"""
AI news agent.

Asks Gemini for recent AI news across a set of date-aware queries, filters
the results (missing fields, duplicates, articles older than a week), tags
them from a keyword list and stores them. The newest non-featured articles
are promoted to featured at the end of a run.

Dependencies: toolbox.core.agents.gemini.client, toolbox.boundary.db, toolbox.core.retry
System role: News ingestion pipeline behind /api/news/cron and the daily update
"""

import asyncio
import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Any
from urllib.parse import urlsplit

from toolbox.boundary.db.connection import SessionScope, session_scope
from toolbox.boundary.db.CRUD.news_crud import news_crud
from toolbox.core.agents.gemini.client import GeminiClient, get_gemini_client
from toolbox.core.agents.gemini.parsing import parse_outer_json
from toolbox.core.agents.gemini.prompts.news_prompt import build_news_search_prompt
from toolbox.core.agents.gemini.utils import long_date
from toolbox.core.exceptions import FatalDatabaseError
from toolbox.core.retry import is_duplicate_error, is_fatal_db_error, with_db_retry

logger = logging.getLogger(__name__)

AI_KEYWORDS = (
    "ai",
    "artificial intelligence",
    "machine learning",
    "ml",
    "deep learning",
    "neural network",
    "llm",
    "gpt",
    "chatgpt",
    "claude",
    "openai",
    "anthropic",
    "generative ai",
    "genai",
    "computer vision",
    "nlp",
    "natural language",
    "automation",
    "robotics",
    "algorithm",
    "data science",
    "big data",
    "transformer",
    "diffusion",
    "reinforcement learning",
)

MAX_TAGS = 5
MAX_ARTICLE_AGE = timedelta(days=7)
FEATURED_COUNT = 3

_URL = re.compile(r"https?://[^\s)]+")


def build_news_queries(today: datetime) -> list[str]:
    """The seven search queries for one run, stamped with today's date."""
    current_date = long_date(today)
    month = f"{today:%B}"
    year = today.year
    return [
        f"latest AI news {year} {month}",
        f"artificial intelligence breakthroughs {current_date}",
        f"AI tools and startups {year}",
        f"machine learning research {month} {year}",
        f"ChatGPT alternatives and AI models {current_date}",
        f"AI industry news {current_date}",
        f"generative AI updates {month} {year}",
    ]


def extract_source_from_url(url: str) -> str:
    """Capitalised second-level domain ("https://www.wired.com/x" -> "Wired")."""
    try:
        hostname = urlsplit(url).hostname or ""
    except ValueError:
        return "AI News"
    if not hostname:
        return "AI News"
    source = re.sub(r"^www\.", "", hostname).split(".")[0]
    return source[:1].upper() + source[1:]


def extract_news_from_text(text: str) -> list[dict[str, Any]]:
    """
    Recover articles from an unstructured response.

    Every line holding a URL becomes an article; the previous line is taken
    as the title and the next line as the snippet.
    """
    lines = [line for line in text.split("\n") if line.strip()]
    results: list[dict[str, Any]] = []
    for i, line in enumerate(lines):
        match = _URL.search(line)
        if not match:
            continue
        url = match.group(0)
        title = lines[i - 1] if i > 0 else line[:100]
        results.append(
            {
                "title": title.replace(url, "").strip() or "AI News Article",
                "url": url,
                "snippet": lines[i + 1] if i + 1 < len(lines) else "Latest AI news article",
                "source": extract_source_from_url(url),
            }
        )
    return results[:10]


def extract_tags(text: str) -> list[str]:
    """AI keywords found in the lowercased text, at most five."""
    return [keyword for keyword in AI_KEYWORDS if keyword in text][:MAX_TAGS]


def parse_published_date(value: Any, now: datetime) -> datetime:
    """Parse an ISO date; unparseable or missing values mean "now"."""
    if isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return now
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed
    return now


class NewsAgent:
    """Gemini-backed news collector."""

    def __init__(
        self,
        client: GeminiClient | None = None,
        session_factory: SessionScope = session_scope,
        query_delay: float = 1.0,
        results_per_query: int = 5,
    ) -> None:
        """
        Initialize the agent.

        Args:
            client: Gemini client (defaults to the shared one on first use)
            session_factory: Source of transactional sessions
            query_delay: Seconds to sleep between queries
            results_per_query: Articles requested per query
        """
        self._client = client
        self.session_factory = session_factory
        self.query_delay = query_delay
        self.results_per_query = results_per_query

    @property
    def client(self) -> GeminiClient:
        if self._client is None:
            self._client = get_gemini_client()
        return self._client

    async def search(self, query: str, max_results: int = 10, today: datetime | None = None) -> list[dict]:
        """
        Ask Gemini for recent articles matching one query.

        Returns:
            list[dict]: Raw results with title, url, snippet, source, publishedDate

        Raises:
            LLMNotConfiguredError: If GEMINI_API_KEY is missing
        """
        today = today or datetime.now(timezone.utc)
        prompt = build_news_search_prompt(query, long_date(today), today.date().isoformat())
        text = await self.client.generate_text(prompt, retry_on_rate_limit=False)

        try:
            results = parse_outer_json(text, expect="array")
        except ValueError as e:
            logger.error("Error parsing JSON from Gemini", extra={"error": str(e)})
            return extract_news_from_text(text)
        if results is None:
            return extract_news_from_text(text)
        if not isinstance(results, list):
            return []
        return [r for r in results if isinstance(r, dict)][:max_results]

    async def _db(self, operation, max_attempts: int, base_delay: float):
        async def _run():
            async with self.session_factory() as session:
                return await operation(session)

        return await with_db_retry(_run, max_attempts=max_attempts, base_delay=base_delay)

    async def _save_result(self, result: dict, now: datetime) -> str:
        """Store one search result; returns "saved", "skipped" or "duplicate"."""
        title = result.get("title")
        url = result.get("url")
        if not title or not url:
            return "skipped"

        try:
            existing = await self._db(lambda s: news_crud.find_by_url(s, url), 2, 0.5)
        except Exception as e:
            if is_fatal_db_error(e) and "does not exist" in str(e).lower():
                raise FatalDatabaseError(
                    "News table does not exist. Run create_tables first.",
                    operation="find_by_url",
                ) from e
            logger.warning(f"Database error checking {url}", extra={"error": str(e)})
            existing = None

        if existing is not None:
            logger.info(f"Skipping duplicate: {title[:50]}")
            return "duplicate"

        published_at = parse_published_date(result.get("publishedDate"), now)
        age = now - published_at
        if age > MAX_ARTICLE_AGE:
            logger.info(f"Skipping old article ({age.days} days old): {title[:50]}")
            return "skipped"

        snippet = result.get("snippet") or ""
        article = {
            "title": title.strip(),
            "description": snippet or None,
            "url": url,
            "source": result.get("source") or "AI News",
            "author": None,
            "image_url": result.get("imageUrl") or None,
            "published_at": published_at,
            "category": "AI",
            "tags": extract_tags(f"{title} {snippet}".lower()),
            "is_featured": False,
        }
        try:
            await self._db(lambda s: news_crud.upsert(s, article), 3, 1.0)
        except Exception as e:
            if is_duplicate_error(e):
                logger.info(f"Skipping duplicate: {title[:50]}")
                return "duplicate"
            raise
        logger.info(f"Saved: {title[:60]}")
        return "saved"

    async def _feature_latest(self) -> None:
        try:
            recent = await self._db(
                lambda s: news_crud.find_all(s, limit=10, featured=False), 2, 1.0
            )
        except Exception as e:
            logger.warning("Error setting featured articles", extra={"error": str(e)})
            return

        for article in list(recent)[:FEATURED_COUNT]:
            article_id = article.id
            try:
                await self._db(lambda s: news_crud.set_featured(s, article_id, True), 2, 0.5)
                logger.info(f"Featured: {article.title[:50]}")
            except Exception as e:
                logger.warning(
                    f"Failed to set featured for article {article_id}",
                    extra={"error": str(e)},
                )

    async def run(self) -> dict[str, int]:
        """
        Run one collection pass.

        Returns:
            dict: {"fetched", "saved", "errors"} counters

        Raises:
            FatalDatabaseError: If the database is unreachable or the news table is missing
        """
        try:
            await self._db(lambda s: news_crud.find_all(s, limit=1), 2, 0.5)
        except Exception as e:
            raise FatalDatabaseError(
                f"Database connection failed: {e}", operation="connection_test"
            ) from e

        fetched = saved = errors = 0
        today = datetime.now(timezone.utc)

        for query in build_news_queries(today):
            try:
                logger.info(f"Searching for: {query}")
                results = await self.search(query, self.results_per_query, today=today)
                fetched += len(results)

                for result in results:
                    try:
                        outcome = await self._save_result(result, datetime.now(timezone.utc))
                    except FatalDatabaseError:
                        raise
                    except Exception as e:
                        logger.error(
                            f"Error processing article {result.get('url')}",
                            extra={"error": str(e)},
                        )
                        errors += 1
                        continue
                    if outcome == "saved":
                        saved += 1

                await asyncio.sleep(self.query_delay)
            except FatalDatabaseError:
                raise
            except Exception as e:
                logger.error(f"Error processing query \"{query}\"", extra={"error": str(e)})
                errors += 1

        await self._feature_latest()

        logger.info(
            f"News agent summary: fetched {fetched}, saved {saved}, errors {errors}",
            extra={"fetched": fetched, "saved": saved, "errors": errors},
        )
        return {"fetched": fetched, "saved": saved, "errors": errors}


async def fetch_ai_news_with_agent(agent: NewsAgent | None = None) -> dict[str, int]:
    """Run the news agent once and return its counters."""
    return await (agent or NewsAgent()).run()


async def fetch_and_save_news(agent: NewsAgent | None = None) -> dict[str, int]:
    """
    Entry point for cron jobs and scripts.

    Never raises: any failure of the run is logged and reported as
    {"fetched": 0, "saved": 0, "errors": 1}.
    """
    try:
        return await fetch_ai_news_with_agent(agent)
    except Exception as e:
        logger.error("Error fetching news with AI agent", extra={"error": str(e)})
        return {"fetched": 0, "saved": 0, "errors": 1}
