"""
Prompt template ORM model.

Dependencies: sqlalchemy, toolbox.boundary.db.base
System role: Prompt library persistence
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from toolbox.boundary.db.base import Base, TimestampMixin


class PromptTemplateModel(Base, TimestampMixin):
    """Reusable prompt template; level is Beginner, Advanced or Pro."""

    __tablename__ = "toolbox_prompt_templates"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    use_case: Mapped[str | None] = mapped_column(String(255), nullable=True)
    prompt: Mapped[str] = mapped_column(Text, nullable=False)
    level: Mapped[str | None] = mapped_column(String(50), nullable=True)
    copy_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
