from unittest.mock import AsyncMock

import pytest

from toolbox.api.deps import get_prompt_service, get_stack_service
from toolbox.core.exceptions import NotFoundError


@pytest.fixture
def mock_stack_service(app):
    service = AsyncMock()
    app.dependency_overrides[get_stack_service] = lambda: service
    return service


def _stack(**overrides):
    stack = {"id": "stack-1", "user_id": "u-1", "name": "My Stack", "tool_ids": ["chatgpt"]}
    stack.update(overrides)
    return stack


class TestStacks:
    def test_list_requires_user_id(self, client, mock_stack_service):
        response = client.get("/api/stacks")

        assert response.status_code == 400
        assert response.json() == {"error": "userId is required"}

    def test_list_stacks(self, client, mock_stack_service):
        mock_stack_service.list_stacks.return_value = [_stack()]

        response = client.get("/api/stacks", params={"userId": "u-1"})

        assert response.status_code == 200
        assert response.json()["stacks"][0]["toolIds"] == ["chatgpt"]
        mock_stack_service.list_stacks.assert_awaited_once_with("u-1")

    def test_create_stack(self, client, mock_stack_service):
        mock_stack_service.create_stack.return_value = _stack()

        response = client.post("/api/stacks", json={"userId": "u-1", "toolIds": ["chatgpt"]})

        assert response.status_code == 200
        assert response.json()["stack"]["name"] == "My Stack"
        mock_stack_service.create_stack.assert_awaited_once_with(
            user_id="u-1", tool_ids=["chatgpt"], name=None
        )

    def test_update_missing_stack_returns_404(self, client, mock_stack_service):
        mock_stack_service.update_stack.side_effect = NotFoundError("Stack not found", "stack", "s")

        response = client.put("/api/stacks/s", json={"name": "Renamed"})

        assert response.status_code == 404
        assert response.json() == {"error": "Stack not found"}

    def test_delete_stack(self, client, mock_stack_service):
        mock_stack_service.delete_stack.return_value = True

        response = client.delete("/api/stacks/stack-1")

        assert response.json() == {"success": True}


class TestPrompts:
    def test_list_prompts_without_database(self, client, no_database):
        response = client.get("/api/prompts", params={"category": "All"})

        assert response.status_code == 200
        prompts = response.json()["prompts"]
        assert len(prompts) == 120
        copies = [p["copyCount"] for p in prompts]
        assert copies == sorted(copies, reverse=True)

    def test_copy_unknown_prompt_returns_404(self, client, app):
        service = AsyncMock()
        service.copy_prompt.side_effect = NotFoundError("Prompt not found", "prompt", "x")
        app.dependency_overrides[get_prompt_service] = lambda: service

        response = client.post("/api/prompts/x/copy")

        assert response.status_code == 404
        assert response.json() == {"error": "Prompt not found"}
