"""
Tests for the SEO page generator's pure rules and duplicate detection.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from toolbox.boundary.db.CRUD.seo_page_crud import default_structured_data, seo_page_crud
from toolbox.core.exceptions import LLMResponseError
from toolbox.core.agents.gemini.seo_agent import (
    SEOAgent,
    build_page_title,
    calculate_seo_score,
    find_related_tools,
    generate_slug,
    get_placeholder_image,
    keyword_similarity,
    validate_seo_best_practices,
)

LONG_META = (
    "Compare the best AI writing tools with honest reviews, pricing and real use cases "
    "so your team can pick the right AI writing tools today."
)


class TestValidation:
    def test_short_title_and_meta_are_issues(self):
        result = validate_seo_best_practices("Short", "Too short", "ai tools", "intro", [])

        assert result["is_valid"] is False
        assert result["issues"] == [
            "Title too short (5 chars, minimum 30)",
            "Meta description too short (9 chars, minimum 120)",
        ]

    def test_thin_content_produces_warnings_only(self):
        title = "Best AI Writing Tools for 2026"

        result = validate_seo_best_practices(title, LONG_META, "ai writing tools", "intro", [])

        assert result["is_valid"] is True
        assert result["issues"] == []
        assert "Few content sections (recommended 3-5 sections for better SEO)" in result["warnings"]
        assert any(w.startswith("Content may be too short") for w in result["warnings"])

    def test_missing_keyword_warnings(self):
        result = validate_seo_best_practices(
            "A perfectly reasonable page title here", LONG_META, "video editors", "", []
        )

        assert "Primary keyword not found in title" in result["warnings"]
        assert "Primary keyword not found in meta description" in result["warnings"]


class TestScore:
    def test_score_is_capped_at_100(self):
        validation = {"issues": [], "warnings": []}

        assert calculate_seo_score(validation, 6000, 20, 5) == 100

    def test_penalties_accumulate(self):
        validation = {"issues": ["a", "b"], "warnings": ["c"]}

        assert calculate_seo_score(validation, 500, 80, 2) == 45

    def test_score_never_negative(self):
        validation = {"issues": ["x"] * 10, "warnings": []}

        assert calculate_seo_score(validation, 0, 100, 0) == 0


class TestHelpers:
    def test_slug_and_title(self):
        assert generate_slug("Best AI Tools for Marketing!") == "best-ai-tools-for-marketing"
        assert build_page_title("AI Video Tools").startswith("Best AI Video Tools for ")

    def test_default_structured_data_uses_same_year_as_title(self):
        data = default_structured_data("AI Video Tools", None, None)

        assert data["@type"] == "CollectionPage"
        assert data["name"] == build_page_title("AI Video Tools")

    def test_keyword_similarity(self):
        assert keyword_similarity("ai writing tools", "ai writing tools") == 1.0
        assert keyword_similarity("ai writing tools", "video editing") == 0.0

    def test_placeholder_image_is_deterministic(self):
        url = get_placeholder_image("ai writing tools")

        assert url.startswith("https://picsum.photos/")
        assert url == get_placeholder_image("ai writing tools")

    def test_related_tools_top_rated_first(self):
        tools = [
            {"id": "a", "name": "Writer A", "tagline": "AI writing", "category": "Writing & Content", "description": "", "rating": 70},
            {"id": "b", "name": "Writer B", "tagline": "AI writing", "category": "Writing & Content", "description": "", "rating": 95},
            {"id": "c", "name": "Cutter", "tagline": "video", "category": "Video & Audio", "description": "", "rating": 99},
        ]

        related = find_related_tools("ai writing", tools)

        assert [t["id"] for t in related][:2] == ["b", "a"]


class TestDuplicateDetection:
    @pytest.fixture
    async def agent(self, session_factory):
        async with session_factory() as session:
            await seo_page_crud.upsert(
                session,
                {
                    "id": "best-ai-writing-tools",
                    "slug": "best-ai-writing-tools",
                    "keyword": "best ai writing tools",
                    "title": "Best best ai writing tools for 2026",
                    "is_published": True,
                },
            )
        return SEOAgent(session_factory=session_factory, keyword_delay=0)

    @pytest.mark.asyncio
    async def test_exact_slug_is_duplicate(self, agent):
        result = await agent.check_for_duplicates("anything", "best-ai-writing-tools")

        assert result == {
            "is_duplicate": True,
            "reason": "Exact slug match",
            "similar_keyword": "best ai writing tools",
        }

    @pytest.mark.asyncio
    async def test_high_keyword_overlap_is_duplicate(self, agent):
        result = await agent.check_for_duplicates("best ai writing tools", "other-slug")

        assert result["is_duplicate"] is True
        assert result["reason"].startswith("High keyword similarity")

    @pytest.mark.asyncio
    async def test_unrelated_keyword_is_not_duplicate(self, agent):
        with patch("toolbox.core.agents.gemini.seo_agent.is_gemini_configured", return_value=False):
            result = await agent.check_for_duplicates("ai video editors", "ai-video-editors")

        assert result["is_duplicate"] is False


@pytest.mark.asyncio
async def test_generate_page_content_rejects_bad_json():
    client = AsyncMock()
    client.generate_text.return_value = "not json at all"
    agent = SEOAgent(client=client, keyword_delay=0)

    with pytest.raises(LLMResponseError):
        await agent.generate_page_content("ai writing tools", [])


def _settings(**app_values):
    settings = MagicMock()
    settings.app.site_url = "https://tools.10ex.ai"
    settings.app.unsplash_access_key = None
    for key, value in app_values.items():
        setattr(settings.app, key, value)
    return settings


class TestFeaturedImage:
    @pytest.mark.asyncio
    async def test_malformed_unsplash_result_falls_back_to_placeholder(self):
        client = AsyncMock()
        client.generate_image.return_value = None
        http_client = AsyncMock()
        http_client.get.return_value = httpx.Response(
            200,
            json={"results": [{"urls": {}}]},
            request=httpx.Request("GET", "https://api.unsplash.com/search/photos"),
        )
        agent = SEOAgent(client=client, keyword_delay=0, http_client=http_client)

        with patch(
            "toolbox.core.agents.gemini.seo_agent.get_settings",
            return_value=_settings(unsplash_access_key="key"),
        ):
            url = await agent.generate_featured_image("ai writing tools")

        assert url == get_placeholder_image("ai writing tools")

    @pytest.mark.asyncio
    async def test_unsplash_url_used_when_present(self):
        client = AsyncMock()
        client.generate_image.return_value = None
        http_client = AsyncMock()
        http_client.get.return_value = httpx.Response(
            200,
            json={"results": [{"urls": {"regular": "https://images.unsplash.com/photo-1"}}]},
            request=httpx.Request("GET", "https://api.unsplash.com/search/photos"),
        )
        agent = SEOAgent(client=client, keyword_delay=0, http_client=http_client)

        with patch(
            "toolbox.core.agents.gemini.seo_agent.get_settings",
            return_value=_settings(unsplash_access_key="key"),
        ):
            url = await agent.generate_featured_image("ai writing tools")

        assert url == "https://images.unsplash.com/photo-1"


@pytest.mark.asyncio
async def test_research_coerces_string_metrics():
    client = AsyncMock()
    client.generate_text.return_value = (
        '[{"keyword": "ai writing tools", "searchVolume": "5000", "competitionScore": "20"},'
        ' {"keyword": "ai video tools", "searchVolume": "lots", "competitionScore": null}]'
    )
    agent = SEOAgent(client=client, keyword_delay=0)

    with patch("toolbox.core.agents.gemini.seo_agent.get_settings", return_value=_settings()):
        opportunities = await agent.research_seo_keywords()

    assert [(o["search_volume"], o["competition_score"]) for o in opportunities] == [(5000, 20), (0, 50)]
    validation = {"issues": [], "warnings": []}
    assert calculate_seo_score(validation, opportunities[0]["search_volume"], opportunities[0]["competition_score"], 5) == 100
