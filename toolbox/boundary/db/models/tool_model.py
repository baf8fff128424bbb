"""
Tool ORM model.

A directory entry for one AI tool: catalogue fields shown on the site,
discovery metadata written by the discovery agent, and the FAQ / use-case
enrichment generated per tool.

Dependencies: sqlalchemy, toolbox.boundary.db.base
System role: Tool persistence
"""

from datetime import date, datetime

from sqlalchemy import JSON, Boolean, Date, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from toolbox.boundary.db.base import Base, TimestampMixin


class ToolModel(Base, TimestampMixin):
    """
    Tool ORM model.

    Attributes:
        id: Slug-style primary key (e.g. "chatgpt")
        rating: Editorial score, 0-100
        popularity: Trending score used by find_trending
        votes: Community votes, drives default ordering
        strengths, weaknesses, alternatives: JSON string lists
        discovery_source: "manual" for seeded rows, "ai_search" for discovered ones
        faqs, use_cases: JSON lists filled by tool enrichment
    """

    __tablename__ = "toolbox_tools"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    tagline: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    sub_category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    strengths: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    weaknesses: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    pricing: Mapped[str | None] = mapped_column(String(50), nullable=True)
    rating: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    popularity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    alternatives: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    best_for: Mapped[str | None] = mapped_column(Text, nullable=True)
    overkill_for: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    launch_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    website_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Discovery
    discovered_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    discovery_source: Mapped[str | None] = mapped_column(String(50), nullable=True, default="manual")
    last_verified_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    verification_status: Mapped[str | None] = mapped_column(String(50), nullable=True, default="pending")
    growth_rate_6mo: Mapped[float | None] = mapped_column(Float, nullable=True)
    is_rapidly_growing: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=False)
    monthly_visits: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Enrichment
    faqs: Mapped[list | None] = mapped_column(JSON, nullable=True)
    use_cases: Mapped[list | None] = mapped_column(JSON, nullable=True)
    faqs_generated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    use_cases_generated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
