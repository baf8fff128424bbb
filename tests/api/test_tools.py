"""
Tests for the tools router.

Covers the bundled-dataset fallback (no database), vote validation and
error mapping with a mocked ToolService.
"""

from unittest.mock import AsyncMock

import pytest

from toolbox.api.deps import get_tool_service
from toolbox.core.exceptions import NotFoundError


@pytest.fixture
def mock_tool_service():
    return AsyncMock()


class TestToolsWithoutDatabase:
    """The directory stays browsable without DATABASE_URL."""

    def test_list_tools_serves_bundled_dataset(self, client, no_database):
        response = client.get("/api/tools", params={"limit": 5})

        assert response.status_code == 200
        tools = response.json()["tools"]
        assert len(tools) == 5
        assert {"id", "name", "subCategory", "websiteUrl", "isVerified"} <= tools[0].keys()

    def test_list_tools_filters_by_category_and_search(self, client, no_database):
        response = client.get(
            "/api/tools", params={"category": "Writing & Content", "search": "claude"}
        )

        assert response.status_code == 200
        tools = response.json()["tools"]
        assert [t["id"] for t in tools] == ["claude"]

    def test_trending_sorted_by_popularity(self, client, no_database):
        response = client.get("/api/tools/trending", params={"limit": 3})

        popularity = [t["popularity"] for t in response.json()["tools"]]
        assert len(popularity) == 3
        assert popularity == sorted(popularity, reverse=True)

    def test_get_tool_from_dataset(self, client, no_database):
        response = client.get("/api/tools/cursor")

        assert response.status_code == 200
        assert response.json()["tool"]["name"] == "Cursor"

    def test_get_unknown_tool_returns_404(self, client, no_database):
        response = client.get("/api/tools/not-a-tool")

        assert response.status_code == 404
        assert response.json() == {"error": "Tool not found"}

    def test_count_falls_back_to_600(self, client, no_database):
        response = client.get("/api/tools/count")

        assert response.status_code == 200
        assert response.json() == {"count": 600}

    def test_enrichment_is_empty(self, client, no_database):
        response = client.get("/api/tools/chatgpt/enrichment")

        assert response.json() == {"faqs": [], "useCases": []}

    def test_vote_requires_database(self, client, no_database):
        response = client.post("/api/tools/vote", json={"toolId": "chatgpt", "userId": "u-1"})

        assert response.status_code == 503
        assert "error" in response.json()


class TestVote:
    def test_vote_missing_fields_returns_400(self, client, app, mock_tool_service):
        app.dependency_overrides[get_tool_service] = lambda: mock_tool_service

        response = client.post("/api/tools/vote", json={"toolId": "chatgpt"})

        assert response.status_code == 400
        assert response.json() == {"error": "toolId and userId are required"}
        mock_tool_service.vote.assert_not_called()

    def test_vote_success(self, client, app, mock_tool_service):
        app.dependency_overrides[get_tool_service] = lambda: mock_tool_service

        response = client.post("/api/tools/vote", json={"toolId": "chatgpt", "userId": "u-1"})

        assert response.status_code == 200
        assert response.json() == {"success": True}
        mock_tool_service.vote.assert_awaited_once_with(tool_id="chatgpt", user_id="u-1")


class TestErrorMapping:
    def test_not_found_error_maps_to_404(self, client, app, mock_tool_service):
        mock_tool_service.get_tool.side_effect = NotFoundError("Tool not found", "tool", "x")
        app.dependency_overrides[get_tool_service] = lambda: mock_tool_service

        response = client.get("/api/tools/x")

        assert response.status_code == 404
        assert response.json() == {"error": "Tool not found"}

    def test_unexpected_error_maps_to_500(self, client, app, mock_tool_service):
        mock_tool_service.list_tools.side_effect = RuntimeError("boom")
        app.dependency_overrides[get_tool_service] = lambda: mock_tool_service

        response = client.get("/api/tools")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch tools"}
