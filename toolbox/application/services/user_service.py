"""
User service orchestrator.

Sign-up, lookup and tool interactions. Every interaction added through
the API earns the user points.

Dependencies: toolbox.boundary.db.CRUD
System role: Community use case orchestration
"""

import logging
import random
import string

from sqlalchemy.ext.asyncio import AsyncSession

from toolbox.boundary.db.CRUD.user_crud import user_crud
from toolbox.boundary.db.serializers import user_to_dict
from toolbox.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)

INTERACTION_POINTS = 2

_BASE36 = string.ascii_lowercase + string.digits


def generate_user_id() -> str:
    """"u-" followed by nine random base-36 characters."""
    return "u-" + "".join(random.choices(_BASE36, k=9))


def generate_referral_code() -> str:
    """"BETA-" followed by four random uppercase base-36 characters."""
    return "BETA-" + "".join(random.choices(_BASE36, k=4)).upper()


class UserService:
    """User service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _to_dict(self, user) -> dict:
        interactions = await user_crud.get_user_interactions(self.db, user.id)
        return user_to_dict(user, interactions)

    async def create_user(self, name: str, email: str) -> dict:
        """
        Create a user, or return the existing one with the same email.

        Args:
            name: Display name
            email: Email address

        Returns:
            dict: User with interaction lists
        """
        try:
            existing = await user_crud.find_by_email(self.db, email)
            if existing is not None:
                return await self._to_dict(existing)

            user = await user_crud.create_user(
                self.db,
                id=generate_user_id(),
                name=name,
                email=email,
                referral_code=generate_referral_code(),
            )
            logger.info("User created", extra={"user_id": user.id})
            return await self._to_dict(user)
        except Exception as e:
            logger.error("Failed to create user", extra={"error": str(e)})
            raise

    async def get_user(self, user_id: str | None = None, email: str | None = None) -> dict:
        """
        Look a user up by id (preferred) or email.

        Raises:
            NotFoundError: If no user matches
        """
        if user_id:
            user = await user_crud.get_by_id(self.db, user_id)
        else:
            user = await user_crud.find_by_email(self.db, email)
        if user is None:
            raise NotFoundError("User not found", resource="user", resource_id=user_id or email)
        return await self._to_dict(user)

    async def update_interaction(
        self,
        user_id: str,
        tool_id: str,
        interaction_type: str,
        action: str | None = None,
    ) -> dict:
        """
        Add or remove an interaction and return the updated user.

        Adding awards two points; removing does not take them back.

        Raises:
            NotFoundError: If the user does not exist afterwards
        """
        try:
            if action == "remove":
                await user_crud.remove_interaction(self.db, user_id, tool_id, interaction_type)
            else:
                await user_crud.add_interaction(self.db, user_id, tool_id, interaction_type)
                user = await user_crud.get_by_id(self.db, user_id)
                if user is not None:
                    await user_crud.update_points(self.db, user_id, user.points + INTERACTION_POINTS)
        except Exception as e:
            logger.error(
                "Failed to update interaction",
                extra={"error": str(e), "user_id": user_id, "tool_id": tool_id},
            )
            raise
        return await self.get_user(user_id=user_id)
