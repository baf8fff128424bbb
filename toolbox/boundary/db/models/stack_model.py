"""
User stack ORM model.

A stack is a named, user-owned list of tool ids.

Dependencies: sqlalchemy, toolbox.boundary.db.base
System role: Stack builder persistence
"""

from sqlalchemy import JSON, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from toolbox.boundary.db.base import Base, TimestampMixin


class UserStackModel(Base, TimestampMixin):
    __tablename__ = "toolbox_user_stacks"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("toolbox_users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="My Stack")
    tool_ids: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
