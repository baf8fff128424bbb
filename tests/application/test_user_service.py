"""
Test suite for UserService against the in-memory database.

System role: Verification of sign-up and interaction orchestration
"""

import re

import pytest

from toolbox.application.services.user_service import (
    UserService,
    generate_referral_code,
    generate_user_id,
)
from toolbox.boundary.db.CRUD.tool_crud import tool_crud
from toolbox.core.exceptions import NotFoundError
from toolbox.data import get_tools_dataset


def test_generated_ids_have_expected_shape() -> None:
    assert re.fullmatch(r"u-[a-z0-9]{9}", generate_user_id())
    assert re.fullmatch(r"BETA-[A-Z0-9]{4}", generate_referral_code())


@pytest.fixture
async def service(test_async_db) -> UserService:
    tool = next(t for t in get_tools_dataset() if t["id"] == "chatgpt")
    await tool_crud.upsert(test_async_db, tool)
    return UserService(db=test_async_db)


@pytest.mark.asyncio
async def test_create_user_starts_with_100_points(service) -> None:
    user = await service.create_user("Ada", "ada@example.com")

    assert user["points"] == 100
    assert user["email"] == "ada@example.com"
    assert user["liked_tool_ids"] == []


@pytest.mark.asyncio
async def test_create_user_returns_existing_for_same_email(service) -> None:
    first = await service.create_user("Ada", "ada@example.com")

    second = await service.create_user("Someone Else", "ada@example.com")

    assert second["id"] == first["id"]
    assert second["name"] == "Ada"


@pytest.mark.asyncio
async def test_get_user_not_found(service) -> None:
    with pytest.raises(NotFoundError, match="User not found"):
        await service.get_user(email="nobody@example.com")


@pytest.mark.asyncio
async def test_add_interaction_awards_two_points(service) -> None:
    # Arrange
    user = await service.create_user("Ada", "ada@example.com")

    # Act
    updated = await service.update_interaction(user["id"], "chatgpt", "like")

    # Assert
    assert updated["points"] == 102
    assert updated["liked_tool_ids"] == ["chatgpt"]


@pytest.mark.asyncio
async def test_remove_interaction_keeps_points(service) -> None:
    # Arrange
    user = await service.create_user("Ada", "ada@example.com")
    await service.update_interaction(user["id"], "chatgpt", "star")

    # Act
    updated = await service.update_interaction(user["id"], "chatgpt", "star", action="remove")

    # Assert
    assert updated["starred_tool_ids"] == []
    assert updated["points"] == 102
