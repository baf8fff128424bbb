"""
User and user-tool interaction ORM models.

Users collect points for voting and interacting with tools. Interactions
(like, star, bookmark, vote) are unique per (user, tool, type).

Dependencies: sqlalchemy, toolbox.boundary.db.base
System role: Community persistence
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from toolbox.boundary.db.base import Base, TimestampMixin, utcnow


class UserModel(Base, TimestampMixin):
    """
    User ORM model.

    Attributes:
        id: "u-" prefixed random id
        email: Unique login email
        points: Reward balance (100 on sign-up)
        referral_code: Unique "BETA-XXXX" code
    """

    __tablename__ = "toolbox_users"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    points: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    referral_code: Mapped[str | None] = mapped_column(String(50), nullable=True, unique=True)
    joined_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)


class UserToolInteractionModel(Base):
    """
    One user's interaction with one tool.

    Rows cascade away with either the user or the tool.
    """

    __tablename__ = "toolbox_user_tool_interactions"
    __table_args__ = (
        UniqueConstraint("user_id", "tool_id", "interaction_type", name="uq_user_tool_interaction"),
    )

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("toolbox_users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    tool_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("toolbox_tools.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    interaction_type: Mapped[str] = mapped_column(String(50), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
