"""
Database connection management.

Provides the async SQLAlchemy engine, session factory, and the FastAPI
dependencies for session injection. The engine is created lazily on first
use and shared for the life of the process.

Dependencies: sqlalchemy, asyncpg, toolbox.configs
System role: Database connection lifecycle management
"""

import logging
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import AsyncGenerator, Callable

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from toolbox.configs import get_settings
from toolbox.core.exceptions import DatabaseNotConfiguredError

logger = logging.getLogger(__name__)

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker | None = None

# Zero-argument factory yielding a transactional session (session_scope or a test double)
SessionScope = Callable[[], AbstractAsyncContextManager[AsyncSession]]


def is_database_configured() -> bool:
    """True when DATABASE_URL is set."""
    return get_settings().database.is_configured


def get_async_engine() -> AsyncEngine:
    """
    Return the process-wide async engine, creating it on first call.

    pool_size + max_overflow bounds the total number of connections.
    pool_pre_ping=True verifies connections before use.

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine

    Raises:
        DatabaseNotConfiguredError: If DATABASE_URL is not set
    """
    global _engine
    if _engine is None:
        db_config = get_settings().database
        if not db_config.is_configured:
            raise DatabaseNotConfiguredError()

        _engine = create_async_engine(
            db_config.async_database_url,
            echo=db_config.echo_sql,
            pool_size=db_config.pool_size,
            max_overflow=db_config.max_overflow,
            pool_timeout=db_config.pool_timeout,
            pool_pre_ping=True,
        )
        logger.info(
            "Database engine created",
            extra={"pool_size": db_config.pool_size, "max_overflow": db_config.max_overflow},
        )
    return _engine


def get_async_session_factory() -> async_sessionmaker:
    """
    Return the async session factory bound to the shared engine.

    Sessions use autoflush=False and expire_on_commit=False so ORM rows
    can be read after the transaction closes.
    """
    global _session_factory
    if _session_factory is None:
        _session_factory = async_sessionmaker(
            bind=get_async_engine(),
            autoflush=False,
            expire_on_commit=False,
        )
    return _session_factory


async def dispose_engine() -> None:
    """Close pooled connections and forget the engine."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
        logger.info("Database engine disposed")
    _engine = None
    _session_factory = None


@asynccontextmanager
async def session_scope() -> AsyncGenerator[AsyncSession, None]:
    """
    Transactional session for scripts and background jobs.

    Commits when the block exits cleanly and rolls back on error.

    Usage:
        async with session_scope() as db:
            await tool_crud.upsert(db, tool)
    """
    SessionFactory = get_async_session_factory()
    async with SessionFactory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for async database session injection.

    The session is committed after the route completes and rolled back
    if it raised.

    Yields:
        AsyncSession: Async SQLAlchemy database session (scoped to request lifetime)

    Raises:
        DatabaseNotConfiguredError: If DATABASE_URL is not set
    """
    async with session_scope() as session:
        yield session


async def get_optional_async_db() -> AsyncGenerator[AsyncSession | None, None]:
    """
    Like get_async_db, but yields None when no database is configured.

    Used by read routes that can serve the bundled dataset instead.
    """
    if not is_database_configured():
        yield None
        return
    async with session_scope() as session:
        yield session
