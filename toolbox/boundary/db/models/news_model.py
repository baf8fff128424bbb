"""
News article ORM model.

Articles are keyed by URL; the id is derived from it on insert.

Dependencies: sqlalchemy, toolbox.boundary.db.base
System role: News aggregation persistence
"""

from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from toolbox.boundary.db.base import Base, TimestampMixin, utcnow


class NewsModel(Base, TimestampMixin):
    """
    News article ORM model.

    Attributes:
        url: Unique article URL
        published_at: Publication time reported by the source
        fetched_at: When the aggregator stored the article
        tags: JSON list of lowercase keyword tags
        is_featured: Shown in the featured strip
    """

    __tablename__ = "toolbox_news"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    url: Mapped[str] = mapped_column(String(2048), nullable=False, unique=True)
    source: Mapped[str] = mapped_column(String(255), nullable=False)
    author: Mapped[str | None] = mapped_column(String(255), nullable=True)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    published_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    fetched_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    category: Mapped[str] = mapped_column(String(100), nullable=False, default="AI")
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    view_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
