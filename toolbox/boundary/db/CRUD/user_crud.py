"""
User CRUD operations.

Users plus their like / star / bookmark / vote interactions with tools.

Dependencies: sqlalchemy, toolbox.boundary.db.models
System role: Community persistence operations
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from toolbox.boundary.db.CRUD.base_crud import BaseCRUD
from toolbox.boundary.db.models.user_model import UserModel, UserToolInteractionModel

INTERACTION_LISTS = {
    "like": "liked_tool_ids",
    "star": "starred_tool_ids",
    "bookmark": "bookmarked_tool_ids",
}


class UserCRUD(BaseCRUD[UserModel]):
    """
    CRUD operations for UserModel and its interactions.

    New users start with 100 points.
    """

    def __init__(self) -> None:
        """Initialize UserCRUD with UserModel."""
        super().__init__(UserModel)

    async def find_by_email(self, session: AsyncSession, email: str) -> UserModel | None:
        """
        Retrieve a user by email.

        Args:
            session: Async database session
            email: Exact email address

        Returns:
            UserModel if found, None otherwise
        """
        stmt = select(UserModel).where(UserModel.email == email)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def create_user(
        self,
        session: AsyncSession,
        id: str,
        name: str,
        email: str,
        referral_code: str,
    ) -> UserModel:
        """Create a user with the 100 point sign-up balance."""
        return await self.create(
            session,
            id=id,
            name=name,
            email=email,
            referral_code=referral_code,
            points=100,
        )

    async def update_points(self, session: AsyncSession, user_id: str, points: int) -> None:
        """Set a user's absolute points balance."""
        await self.update_by_id(session, user_id, points=points)

    async def get_user_interactions(
        self,
        session: AsyncSession,
        user_id: str,
    ) -> dict[str, list[str]]:
        """
        Group a user's interactions by type.

        Votes are stored but not listed.

        Returns:
            dict: liked_tool_ids, starred_tool_ids and bookmarked_tool_ids lists
        """
        stmt = select(
            UserToolInteractionModel.tool_id,
            UserToolInteractionModel.interaction_type,
        ).where(UserToolInteractionModel.user_id == user_id)
        rows = (await session.execute(stmt)).all()

        grouped: dict[str, list[str]] = {key: [] for key in INTERACTION_LISTS.values()}
        for tool_id, interaction_type in rows:
            key = INTERACTION_LISTS.get(interaction_type)
            if key:
                grouped[key].append(tool_id)
        return grouped

    async def add_interaction(
        self,
        session: AsyncSession,
        user_id: str,
        tool_id: str,
        interaction_type: str,
    ) -> None:
        """
        Record an interaction; a repeat of an existing one is a no-op.

        The row id is "{user_id}-{tool_id}-{interaction_type}".
        """
        interaction_id = f"{user_id}-{tool_id}-{interaction_type}"
        stmt = select(UserToolInteractionModel.id).where(
            UserToolInteractionModel.user_id == user_id,
            UserToolInteractionModel.tool_id == tool_id,
            UserToolInteractionModel.interaction_type == interaction_type,
        )
        if (await session.execute(stmt)).scalar_one_or_none() is not None:
            return

        session.add(
            UserToolInteractionModel(
                id=interaction_id,
                user_id=user_id,
                tool_id=tool_id,
                interaction_type=interaction_type,
            )
        )
        await session.flush()

    async def remove_interaction(
        self,
        session: AsyncSession,
        user_id: str,
        tool_id: str,
        interaction_type: str,
    ) -> None:
        """Delete one interaction if present."""
        stmt = delete(UserToolInteractionModel).where(
            UserToolInteractionModel.user_id == user_id,
            UserToolInteractionModel.tool_id == tool_id,
            UserToolInteractionModel.interaction_type == interaction_type,
        )
        await session.execute(stmt)


user_crud = UserCRUD()
