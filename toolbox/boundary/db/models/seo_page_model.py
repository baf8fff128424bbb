"""
SEO page ORM model.

Holds generated marketing copy and metadata for one programmatic content
page, addressed by slug.

Dependencies: sqlalchemy, toolbox.boundary.db.base
System role: SEO content persistence
"""

from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from toolbox.boundary.db.base import Base, TimestampMixin


class SEOPageModel(Base, TimestampMixin):
    """
    SEO page ORM model.

    Attributes:
        slug: Unique URL slug
        content: Introduction followed by markdown "## heading" sections
        sections: JSON list of {heading, content, type}
        related_tools: JSON list of tool ids
        structured_data: JSON-LD object (CollectionPage by default)
        seo_score: 0-100 score from the best-practice checks
        validation_issues: JSON list of issue and warning strings
    """

    __tablename__ = "toolbox_seo_pages"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    keyword: Mapped[str] = mapped_column(String(255), nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    meta_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    featured_image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    introduction: Mapped[str | None] = mapped_column(Text, nullable=True)
    sections: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    target_keywords: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    search_volume: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    competition_score: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    related_tools: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    structured_data: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    canonical_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    seo_score: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    validation_issues: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    last_generated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
