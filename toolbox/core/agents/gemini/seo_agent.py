"""
SEO page generator.

Researches keyword opportunities with Gemini, writes a long-form page for
each one backed by matching directory tools, validates the page against
on-page SEO rules, scores it, attaches a featured image and stores it.

Pipeline (generate_seo_pages):
1. Research 3-5 keywords
2. Per keyword: skip existing slugs, keywords with no related tools and
   near-duplicates of published pages
3. Generate content, validate, add image, score, upsert
4. Pause between keywords

Dependencies: toolbox.core.agents.gemini.client, toolbox.boundary.db,
    toolbox.boundary.aws, httpx
System role: Programmatic SEO content pipeline behind /api/seo/generate
"""

import asyncio
import base64
import logging
import re
from datetime import datetime, timezone
from typing import Any
from urllib.parse import urlsplit

import httpx

from toolbox.boundary.aws.s3_client import generate_image_filename, upload_image_to_s3
from toolbox.boundary.db.connection import SessionScope, session_scope
from toolbox.boundary.db.CRUD.seo_page_crud import (
    content_year,
    default_page_summary,
    default_page_title,
    normalise_structured_data,
    seo_page_crud,
)
from toolbox.boundary.db.CRUD.tool_crud import tool_crud
from toolbox.boundary.db.serializers import tool_to_dict
from toolbox.configs import get_settings
from toolbox.core.agents.gemini.client import GeminiClient, get_gemini_client, is_gemini_configured
from toolbox.core.agents.gemini.parsing import parse_outer_json
from toolbox.core.agents.gemini.prompts.seo_prompt import (
    build_featured_image_prompt,
    build_keyword_research_prompt,
    build_page_content_prompt,
    build_semantic_similarity_prompt,
)
from toolbox.core.agents.gemini.utils import jaccard_similarity, long_date, slugify
from toolbox.core.exceptions import LLMResponseError

logger = logging.getLogger(__name__)

UNSPLASH_SEARCH_URL = "https://api.unsplash.com/search/photos"
MAX_RELATED_TOOLS = 20

DUPLICATE_THRESHOLD = 0.8
SEMANTIC_CHECK_THRESHOLD = 0.6
SEMANTIC_FALLBACK_THRESHOLD = 0.7

_NON_WORD = re.compile(r"[^a-z0-9\s]")


def generate_slug(keyword: str) -> str:
    return slugify(keyword)


def build_page_title(keyword: str) -> str:
    return default_page_title(keyword)


def build_meta_description(keyword: str) -> str:
    return (
        f"Discover the best {keyword.lower()} in {content_year()}. "
        "Comprehensive guide with reviews, comparisons, and recommendations."
    )


def _keyword_words(keyword: str) -> set[str]:
    return set(_NON_WORD.sub("", keyword.lower()).split())


def keyword_similarity(keyword1: str, keyword2: str) -> float:
    """Jaccard similarity of the normalised word sets of two keywords."""
    return jaccard_similarity(_keyword_words(keyword1), _keyword_words(keyword2))


def validate_seo_best_practices(
    title: str,
    meta_description: str,
    keyword: str,
    introduction: str,
    sections: list[dict],
) -> dict[str, Any]:
    """
    Check a page against on-page SEO rules.

    Issues (blocking quality problems): title under 30 characters, meta
    description under 120. Warnings: long title or meta description,
    keyword missing from either, under 1000 words, fewer than 3 sections,
    keyword density outside 0.5-3%.

    Returns:
        dict: {"is_valid": bool, "issues": [...], "warnings": [...]}
    """
    issues: list[str] = []
    warnings: list[str] = []

    if len(title) < 30:
        issues.append(f"Title too short ({len(title)} chars, minimum 30)")
    elif len(title) > 70:
        warnings.append(
            f"Title may be truncated in search results ({len(title)} chars, optimal 50-60)"
        )

    if len(meta_description) < 120:
        issues.append(
            f"Meta description too short ({len(meta_description)} chars, minimum 120)"
        )
    elif len(meta_description) > 160:
        warnings.append(
            f"Meta description may be truncated ({len(meta_description)} chars, optimal 120-160)"
        )

    keyword_lower = keyword.lower()
    if keyword_lower not in title.lower():
        warnings.append("Primary keyword not found in title")
    if keyword_lower not in meta_description.lower():
        warnings.append("Primary keyword not found in meta description")

    section_text = " ".join(f"{s.get('heading', '')} {s.get('content', '')}" for s in sections)
    total_content = f"{introduction} {section_text}"
    word_count = len(total_content.split())
    if word_count < 1000:
        warnings.append(
            f"Content may be too short ({word_count} words, recommended 1500+ for SEO)"
        )

    if len(sections) < 3:
        warnings.append("Few content sections (recommended 3-5 sections for better SEO)")

    keyword_words = [re.escape(w) for w in keyword_lower.split() if w]
    if keyword_words and word_count:
        matches = len(re.findall("|".join(keyword_words), total_content.lower()))
        density = matches / word_count * 100
        if density > 3:
            warnings.append(f"High keyword density ({density:.1f}%, optimal 1-2%)")
        elif density < 0.5:
            warnings.append(f"Low keyword density ({density:.1f}%, optimal 1-2%)")

    return {"is_valid": not issues, "issues": issues, "warnings": warnings}


def calculate_seo_score(
    validation: dict[str, Any],
    search_volume: int,
    competition_score: int,
    section_count: int,
) -> int:
    """Quality score in 0-100 from validation results and keyword metrics."""
    score = 100
    score -= len(validation["issues"]) * 15
    score -= len(validation["warnings"]) * 5

    if search_volume > 5000:
        score += 5
    elif search_volume < 1000:
        score -= 10

    if competition_score < 30:
        score += 10
    elif competition_score > 70:
        score -= 10

    if section_count >= 5:
        score += 5

    return max(0, min(100, score))


def _as_int(value: Any, default: int) -> int:
    """Integer form of a model-reported metric; default when missing or non-numeric."""
    if isinstance(value, bool):
        return default
    try:
        return int(float(value)) or default
    except (TypeError, ValueError):
        return default


def get_placeholder_image(keyword: str) -> str:
    """Deterministic picsum.photos URL seeded from the keyword."""
    query = _image_query(keyword)
    seed = base64.b64encode(query.encode("utf-8")).decode("ascii")[:10]
    return f"https://picsum.photos/seed/{seed}/1200/630"


def _image_query(keyword: str) -> str:
    query = re.sub(rf"best |top |for |in |{content_year()}|ai |tools?", "", keyword.lower())
    return re.sub(r"\s+", "-", query)[:50]


def find_related_tools(keyword: str, tools: list[dict]) -> list[dict]:
    """
    Tools whose name, tagline or category mention the keyword or one of its words.

    Returns:
        list[dict]: Up to 20 matches, highest rated first
    """
    lowered = keyword.lower()
    words = [w for w in lowered.split(" ") if w]

    def matches(tool: dict) -> bool:
        text = f"{tool.get('name', '')} {tool.get('tagline', '')} {tool.get('category', '')}".lower()
        return lowered in text or any(word in text for word in words)

    related = [tool for tool in tools if matches(tool)]
    related.sort(key=lambda t: t.get("rating") or 0, reverse=True)
    return related[:MAX_RELATED_TOOLS]


class SEOAgent:
    """Gemini-backed SEO page generator."""

    def __init__(
        self,
        client: GeminiClient | None = None,
        session_factory: SessionScope = session_scope,
        keyword_delay: float = 2.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._client = client
        self.session_factory = session_factory
        self.keyword_delay = keyword_delay
        self.http_client = http_client

    @property
    def client(self) -> GeminiClient:
        if self._client is None:
            self._client = get_gemini_client()
        return self._client

    def _has_gemini(self) -> bool:
        return self._client is not None or is_gemini_configured()

    async def check_semantic_similarity(
        self,
        keyword1: str,
        keyword2: str,
        existing_keywords: list[str],
    ) -> dict[str, Any]:
        """
        Ask Gemini whether two keywords would produce duplicate content.

        Falls back to keyword Jaccard > 0.7 without a key or on any failure.

        Returns:
            dict: {"is_similar": bool, "similarity_score": float, "reason": str | None}
        """
        if self._has_gemini():
            try:
                text = await self.client.generate_text(
                    build_semantic_similarity_prompt(keyword1, keyword2, existing_keywords)
                )
                result = parse_outer_json(text, expect="object")
                if isinstance(result, dict):
                    score = result.get("similarityScore") or 0
                    return {
                        "is_similar": result.get("isSimilar") is True or score > SEMANTIC_FALLBACK_THRESHOLD,
                        "similarity_score": score,
                        "reason": result.get("reason"),
                    }
            except Exception as e:
                logger.warning(f"Error checking semantic similarity, using fallback: {e}")

        similarity = keyword_similarity(keyword1, keyword2)
        return {
            "is_similar": similarity > SEMANTIC_FALLBACK_THRESHOLD,
            "similarity_score": similarity,
            "reason": None,
        }

    async def check_for_duplicates(self, keyword: str, slug: str) -> dict[str, Any]:
        """
        Compare a candidate keyword against published pages.

        Returns:
            dict: {"is_duplicate": bool, "reason": str | None, "similar_keyword": str | None}
        """
        async with self.session_factory() as session:
            pages = await seo_page_crud.find_all(session, published=True)
        existing_keywords = [page.keyword for page in pages]

        for page in pages:
            if page.slug == slug:
                return {"is_duplicate": True, "reason": "Exact slug match", "similar_keyword": page.keyword}

        for page in pages:
            similarity = keyword_similarity(keyword, page.keyword)
            if similarity > DUPLICATE_THRESHOLD:
                return {
                    "is_duplicate": True,
                    "reason": f"High keyword similarity ({similarity * 100:.0f}%)",
                    "similar_keyword": page.keyword,
                }
            if similarity > SEMANTIC_CHECK_THRESHOLD:
                semantic = await self.check_semantic_similarity(keyword, page.keyword, existing_keywords)
                if semantic["is_similar"]:
                    return {
                        "is_duplicate": True,
                        "reason": f"Semantically similar: {semantic['reason'] or 'Similar search intent'}",
                        "similar_keyword": page.keyword,
                    }

        return {"is_duplicate": False, "reason": None, "similar_keyword": None}

    async def research_seo_keywords(self) -> list[dict[str, Any]]:
        """
        Ask Gemini for keyword opportunities.

        Returns:
            list[dict]: keyword, slug, title, meta_description, search_volume,
            competition_score, target_keywords; [] when the answer has no valid JSON
        """
        today = datetime.now(timezone.utc)
        site_host = urlsplit(get_settings().app.site_url).hostname or "tools.10ex.ai"
        text = await self.client.generate_text(
            build_keyword_research_prompt(long_date(today), site_host, content_year())
        )
        try:
            results = parse_outer_json(text, expect="array")
        except ValueError as e:
            logger.error("Error parsing SEO research JSON", extra={"error": str(e)})
            return []
        if not isinstance(results, list):
            return []

        opportunities = []
        for item in results:
            if not isinstance(item, dict) or not item.get("keyword"):
                continue
            keyword = str(item["keyword"])
            opportunities.append(
                {
                    "keyword": keyword,
                    "slug": generate_slug(keyword),
                    "title": build_page_title(keyword),
                    "meta_description": build_meta_description(keyword),
                    "search_volume": _as_int(item.get("searchVolume"), 0),
                    "competition_score": _as_int(item.get("competitionScore"), 50),
                    "target_keywords": item.get("targetKeywords") or [],
                }
            )
        return opportunities

    async def generate_page_content(self, keyword: str, related_tools: list[dict]) -> dict[str, Any]:
        """
        Write the page body for a keyword.

        Returns:
            dict: introduction, sections, conclusion, structured_data

        Raises:
            LLMResponseError: If the response holds no parseable JSON object
        """
        text = await self.client.generate_text(
            build_page_content_prompt(keyword, related_tools, content_year())
        )
        try:
            content = parse_outer_json(text, expect="object")
        except ValueError as e:
            raise LLMResponseError("Failed to parse generated content", agent_id="seo") from e
        if not isinstance(content, dict):
            raise LLMResponseError("No valid JSON found in Gemini response", agent_id="seo")

        title = build_page_title(keyword)
        return {
            "introduction": content.get("introduction") or "",
            "sections": [s for s in content.get("sections") or [] if isinstance(s, dict)],
            "conclusion": content.get("conclusion") or "",
            "structured_data": normalise_structured_data(
                content.get("structuredData"),
                keyword,
                title,
                default_page_summary(keyword),
            ),
        }

    async def _unsplash_image(self, keyword: str, access_key: str) -> str | None:
        query = _image_query(keyword)
        params = {"query": query, "per_page": 1, "orientation": "landscape"}
        headers = {"Authorization": f"Client-ID {access_key}"}
        try:
            if self.http_client is not None:
                response = await self.http_client.get(UNSPLASH_SEARCH_URL, params=params, headers=headers)
            else:
                async with httpx.AsyncClient(timeout=10.0) as client:
                    response = await client.get(UNSPLASH_SEARCH_URL, params=params, headers=headers)
            response.raise_for_status()
            results = response.json().get("results") or []
            if results:
                return results[0]["urls"]["regular"]
        except (httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning(f"Unsplash fetch failed: {e}")
        return None

    async def generate_featured_image(self, keyword: str) -> str:
        """
        Featured image URL for a page, never a data URI.

        Order: Gemini image uploaded to S3, Unsplash search, picsum placeholder.
        """
        if not self._has_gemini():
            logger.warning("GEMINI_API_KEY not configured, using placeholder image")
            return get_placeholder_image(keyword)

        try:
            image = await self.client.generate_image(build_featured_image_prompt(keyword))
            if image is not None:
                filename = generate_image_filename(keyword, image.extension)
                s3_url = await upload_image_to_s3(image.base64_data, filename, image.mime_type)
                if s3_url:
                    logger.info(f"Image uploaded to S3: {s3_url}")
                    return s3_url
                logger.warning("S3 upload failed, falling back to Unsplash")
        except Exception as e:
            logger.warning(f"Image generation API call failed: {e}")

        access_key = get_settings().app.unsplash_access_key
        if access_key:
            try:
                unsplash_url = await self._unsplash_image(keyword, access_key)
            except Exception as e:
                logger.warning(f"Unsplash lookup failed: {e}")
                unsplash_url = None
            if unsplash_url:
                return unsplash_url

        logger.info("Using placeholder image")
        return get_placeholder_image(keyword)

    async def _load_tools(self) -> list[dict]:
        async with self.session_factory() as session:
            tools = await tool_crud.find_all(session)
        return [tool_to_dict(t) for t in tools]

    async def _build_page(self, opportunity: dict, related_tools: list[dict]) -> dict[str, Any]:
        keyword = opportunity["keyword"]
        content = await self.generate_page_content(keyword, related_tools)

        validation = validate_seo_best_practices(
            title=opportunity["title"],
            meta_description=opportunity["meta_description"],
            keyword=keyword,
            introduction=content["introduction"],
            sections=content["sections"],
        )
        for issue in validation["issues"]:
            logger.info(f"SEO issue: {issue}", extra={"keyword": keyword})
        for warning in validation["warnings"]:
            logger.info(f"SEO warning: {warning}", extra={"keyword": keyword})

        featured_image_url = await self.generate_featured_image(keyword)
        seo_score = calculate_seo_score(
            validation,
            opportunity["search_volume"],
            opportunity["competition_score"],
            len(content["sections"]),
        )
        site_url = get_settings().app.site_url.rstrip("/")

        return {
            "id": opportunity["slug"],
            "slug": opportunity["slug"],
            "keyword": keyword,
            "title": opportunity["title"],
            "meta_description": opportunity["meta_description"],
            "featured_image_url": featured_image_url,
            "introduction": content["introduction"],
            "sections": content["sections"],
            "target_keywords": opportunity["target_keywords"],
            "search_volume": opportunity["search_volume"],
            "competition_score": opportunity["competition_score"],
            "related_tools": [t["id"] for t in related_tools if t.get("id")],
            "structured_data": content["structured_data"],
            "canonical_url": f"{site_url}/seo/{opportunity['slug']}",
            "seo_score": seo_score,
            "validation_issues": validation["issues"] + validation["warnings"],
            "is_published": True,
        }

    async def generate_seo_pages(self) -> dict[str, int]:
        """
        Research keywords and generate a page for each new one.

        Returns:
            dict: {"researched", "generated", "errors"} counters
        """
        researched = generated = errors = 0

        opportunities = await self.research_seo_keywords()
        researched = len(opportunities)
        all_tools = await self._load_tools()
        logger.info(f"Found {researched} SEO opportunities, {len(all_tools)} tools loaded")

        for opportunity in opportunities:
            keyword = opportunity["keyword"]
            try:
                async with self.session_factory() as session:
                    existing = await seo_page_crud.find_by_slug(session, opportunity["slug"])
                if existing is not None:
                    logger.info(f"Page already exists, skipping: {keyword}")
                    continue

                related_tools = find_related_tools(keyword, all_tools)
                if not related_tools:
                    logger.info(f"Skipping - no related tools found: {keyword}")
                    errors += 1
                    continue

                duplicate = await self.check_for_duplicates(keyword, opportunity["slug"])
                if duplicate["is_duplicate"]:
                    logger.info(
                        f"Skipping duplicate: {duplicate['reason']}",
                        extra={"keyword": keyword, "similar_keyword": duplicate["similar_keyword"]},
                    )
                    errors += 1
                    continue

                page = await self._build_page(opportunity, related_tools)
                async with self.session_factory() as session:
                    await seo_page_crud.upsert(session, page)
                logger.info(f"Saved SEO page: {keyword}", extra={"seo_score": page["seo_score"]})
                generated += 1

                await asyncio.sleep(self.keyword_delay)
            except Exception as e:
                logger.error(f"Error generating page for {keyword}", extra={"error": str(e)})
                errors += 1

        logger.info(f"Summary: Researched {researched}, Generated {generated}, Errors {errors}")
        return {"researched": researched, "generated": generated, "errors": errors}

    async def generate_single_seo_page(self, keyword: str) -> dict[str, Any] | None:
        """
        Preview a page for one keyword without saving it.

        Returns:
            dict with keyword, slug, title, meta_description, sections and
            related_tools, or None when generation failed
        """
        try:
            related_tools = find_related_tools(keyword, await self._load_tools())
            if not related_tools:
                raise LLMResponseError("No related tools found for keyword", agent_id="seo")
            content = await self.generate_page_content(keyword, related_tools)
        except Exception as e:
            logger.error(f"Error generating single SEO page for {keyword}", extra={"error": str(e)})
            return None

        return {
            "keyword": keyword,
            "slug": generate_slug(keyword),
            "title": build_page_title(keyword),
            "meta_description": build_meta_description(keyword),
            "search_volume": 0,
            "competition_score": 50,
            "target_keywords": keyword.split(" "),
            "introduction": content["introduction"],
            "sections": content["sections"],
            "related_tools": [t["id"] for t in related_tools],
        }


async def generate_seo_pages(agent: SEOAgent | None = None) -> dict[str, int]:
    """Run the SEO pipeline once."""
    return await (agent or SEOAgent()).generate_seo_pages()


async def generate_single_seo_page(keyword: str, agent: SEOAgent | None = None) -> dict[str, Any] | None:
    return await (agent or SEOAgent()).generate_single_seo_page(keyword)
