"""
Tests for chat recommendations and tool enrichment generation.
"""

from unittest.mock import AsyncMock, patch

import pytest

from toolbox.core.agents.gemini.recommendations import (
    NOT_CONFIGURED_TEXT,
    SERVICE_ERROR_TEXT,
    get_ai_recommendations,
    parse_recommendation,
)
from toolbox.core.agents.gemini.tool_enrichment import generate_tool_faq, generate_tool_use_cases

TOOLS = [
    {"id": "chatgpt", "name": "ChatGPT", "tagline": "Chat"},
    {"id": "claude", "name": "Claude", "tagline": "Chat"},
    {"id": "cursor", "name": "Cursor", "tagline": "Code"},
    {"id": "heygen", "name": "HeyGen", "tagline": "Video"},
]


class TestParseRecommendation:
    def test_marker_ids_are_extracted_and_removed(self):
        text = 'Cursor is great for code.\nTOOLS_JSON:["cursor", "claude"]'

        result = parse_recommendation(text, TOOLS)

        assert result == {"text": "Cursor is great for code.", "recommended_tool_ids": ["cursor", "claude"]}

    def test_missing_marker_falls_back_to_first_three(self):
        result = parse_recommendation("Try a chat assistant.", TOOLS)

        assert result["text"] == "Try a chat assistant."
        assert result["recommended_tool_ids"] == ["chatgpt", "claude", "cursor"]


class TestGetAIRecommendations:
    @pytest.mark.asyncio
    async def test_without_key(self):
        with patch(
            "toolbox.core.agents.gemini.recommendations.is_gemini_configured", return_value=False
        ):
            result = await get_ai_recommendations("video editing", TOOLS)

        assert result["text"] == NOT_CONFIGURED_TEXT
        assert result["recommended_tool_ids"] == ["chatgpt", "claude", "cursor"]

    @pytest.mark.asyncio
    async def test_model_failure_falls_back(self):
        client = AsyncMock()
        client.generate_text.side_effect = RuntimeError("429")

        result = await get_ai_recommendations("video editing", TOOLS, client=client)

        assert result["text"] == SERVICE_ERROR_TEXT
        assert len(result["recommended_tool_ids"]) == 3

    @pytest.mark.asyncio
    async def test_model_answer_is_parsed(self):
        client = AsyncMock()
        client.generate_text.return_value = 'HeyGen makes avatar videos. TOOLS_JSON:["heygen"]'

        result = await get_ai_recommendations("video avatars", TOOLS, client=client)

        assert result["recommended_tool_ids"] == ["heygen"]


class TestToolEnrichment:
    @pytest.mark.asyncio
    async def test_faqs_capped_at_eight(self):
        client = AsyncMock()
        faqs = ",".join(f'{{"question": "Q{i}?", "answer": "A{i}"}}' for i in range(10))
        client.generate_text.return_value = f"```json\n[{faqs}]\n```"

        result = await generate_tool_faq({"name": "Cursor"}, client=client)

        assert len(result) == 8
        assert result[0] == {"question": "Q0?", "answer": "A0"}

    @pytest.mark.asyncio
    async def test_use_case_example_is_optional(self):
        client = AsyncMock()
        client.generate_text.return_value = (
            '[{"title": "Refactor", "description": "Large refactors", "example": "Rename a module"},'
            ' {"title": "Review", "description": "Code review"},'
            ' {"title": "Missing description"}]'
        )

        result = await generate_tool_use_cases({"name": "Cursor"}, client=client)

        assert result == [
            {"title": "Refactor", "description": "Large refactors", "example": "Rename a module"},
            {"title": "Review", "description": "Code review"},
        ]

    @pytest.mark.asyncio
    async def test_errors_return_empty_list(self):
        client = AsyncMock()
        client.generate_text.side_effect = RuntimeError("quota exceeded")

        assert await generate_tool_faq({"name": "Cursor"}, client=client) == []

    @pytest.mark.asyncio
    async def test_no_key_returns_empty_list(self):
        with patch(
            "toolbox.core.agents.gemini.tool_enrichment.is_gemini_configured", return_value=False
        ):
            assert await generate_tool_use_cases({"name": "Cursor"}) == []
