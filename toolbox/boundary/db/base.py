"""
Declarative base for the `toolbox_` tables.

Dependencies: sqlalchemy
System role: Foundation for all database models
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    """Aware UTC now; column default and the stamp for enrichment/generation times."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Registry for every ORM model; create_tables builds from its metadata."""


class TimestampMixin:
    """created_at / updated_at columns; updated_at moves on every ORM update."""

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )
