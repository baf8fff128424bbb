"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory SQLite database, session factory for pipelines and
scripts, FastAPI test client
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite, fastapi
System role: Test infrastructure and fixture management
"""

from contextlib import asynccontextmanager

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
async def db_engine():
    """
    In-memory SQLite engine with every toolbox_ table created.

    Yields:
        AsyncEngine: Engine shared by all sessions of one test (StaticPool)
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool

    from toolbox.boundary.db import models  # noqa: F401
    from toolbox.boundary.db.base import Base

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_async_db(db_engine):
    """
    Session on the in-memory database, rolled back after the test.

    Yields:
        AsyncSession: Test database session
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    async_session = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with async_session() as session:
        yield session
        await session.rollback()


@pytest.fixture
def session_factory(db_engine):
    """
    Drop-in replacement for toolbox.boundary.db.connection.session_scope.

    Returns:
        Callable returning an async context manager that commits on success
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    async_session = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)

    @asynccontextmanager
    async def scope():
        async with async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    return scope


@pytest.fixture
def app():
    """FastAPI app with dependency overrides reset after the test."""
    from toolbox.api.main import create_app

    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def no_database(app):
    """Make optional-session routes run as if DATABASE_URL were unset."""
    from toolbox.boundary.db import get_optional_async_db

    async def _none():
        yield None

    app.dependency_overrides[get_optional_async_db] = _none
    return app
