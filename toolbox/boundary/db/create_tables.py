"""
Database table creation script.

Creates all `toolbox_` tables defined in the ORM models.

Dependencies: sqlalchemy, toolbox.configs
System role: Database schema initialization

Usage:
    python -m toolbox.boundary.db.create_tables
    python -m toolbox.boundary.db.create_tables --drop
"""

import asyncio
import logging
import sys

from dotenv import load_dotenv

from toolbox.boundary.db.base import Base
from toolbox.boundary.db.connection import dispose_engine, get_async_engine

# Import all models to register them with Base.metadata
from toolbox.boundary.db import models  # noqa: F401
from toolbox.observability import configure_logging

logger = logging.getLogger(__name__)


async def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: CREATE TABLE is only issued for missing tables, so it is
    safe to run on every deploy.

    Raises:
        DatabaseNotConfiguredError: If DATABASE_URL is not set
        SQLAlchemyError: If the connection or DDL fails
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("All tables created successfully", extra={"tables": sorted(Base.metadata.tables)})


async def drop_all_tables() -> None:
    """
    Drop all `toolbox_` tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.warning("All tables dropped")


async def _main(drop: bool) -> None:
    try:
        if drop:
            await drop_all_tables()
        await create_all_tables()
    finally:
        await dispose_engine()


if __name__ == "__main__":
    load_dotenv()
    configure_logging()
    asyncio.run(_main(drop="--drop" in sys.argv[1:]))
