from unittest.mock import AsyncMock

import pytest

from toolbox.api.deps import get_user_service
from toolbox.core.exceptions import NotFoundError


def _user(**overrides):
    user = {
        "id": "u-abc123xyz",
        "name": "Ada",
        "email": "ada@example.com",
        "points": 100,
        "referral_code": "BETA-AB12",
        "joined_at": "2024-05-01T00:00:00+00:00",
        "liked_tool_ids": [],
        "starred_tool_ids": [],
        "bookmarked_tool_ids": [],
    }
    user.update(overrides)
    return user


@pytest.fixture
def mock_user_service(app):
    service = AsyncMock()
    app.dependency_overrides[get_user_service] = lambda: service
    return service


def test_create_user(client, mock_user_service):
    mock_user_service.create_user.return_value = _user()

    response = client.post("/api/users", json={"name": "Ada", "email": "ada@example.com"})

    assert response.status_code == 200
    user = response.json()["user"]
    assert user["referralCode"] == "BETA-AB12"
    assert user["likedToolIds"] == []
    mock_user_service.create_user.assert_awaited_once_with(name="Ada", email="ada@example.com")


def test_create_user_requires_name_and_email(client, mock_user_service):
    response = client.post("/api/users", json={"name": "Ada"})

    assert response.status_code == 400
    assert response.json() == {"error": "Name and email are required"}


def test_get_user_requires_email_or_id(client, mock_user_service):
    response = client.get("/api/users")

    assert response.status_code == 400
    assert response.json() == {"error": "Email or id is required"}


def test_get_user_not_found(client, mock_user_service):
    mock_user_service.get_user.side_effect = NotFoundError("User not found", "user", "nobody")

    response = client.get("/api/users", params={"email": "nobody@example.com"})

    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


def test_interaction_missing_fields(client, mock_user_service):
    response = client.post("/api/users/interactions", json={"userId": "u-1", "toolId": "chatgpt"})

    assert response.status_code == 400
    assert response.json() == {"error": "userId, toolId, and interactionType are required"}


def test_interaction_invalid_type(client, mock_user_service):
    response = client.post(
        "/api/users/interactions",
        json={"userId": "u-1", "toolId": "chatgpt", "interactionType": "vote"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid interaction type"}


def test_interaction_success(client, mock_user_service):
    mock_user_service.update_interaction.return_value = _user(points=102, liked_tool_ids=["chatgpt"])

    response = client.post(
        "/api/users/interactions",
        json={"userId": "u-1", "toolId": "chatgpt", "interactionType": "like"},
    )

    assert response.status_code == 200
    assert response.json()["user"]["likedToolIds"] == ["chatgpt"]
    mock_user_service.update_interaction.assert_awaited_once_with(
        user_id="u-1", tool_id="chatgpt", interaction_type="like", action=None
    )
