"""
Generic repository over one `toolbox_` table.

Table repositories (tools, users, stacks, news, ...) inherit the
primary-key operations and add their own queries. All writes flush but
never commit; the caller's session scope owns the transaction.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Generic, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from toolbox.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Primary-key operations shared by every repository.

    Attributes:
        model: Mapped class with a string `id` column
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **values) -> ModelT:
        """
        Insert a row and return it with server/column defaults loaded.

        Args:
            session: Async database session
            **values: Column values, including the caller-generated id
        """
        row = self.model(**values)
        session.add(row)
        await session.flush()
        await session.refresh(row)
        return row

    async def get_by_id(self, session: AsyncSession, id: str) -> ModelT | None:
        return await session.get(self.model, id)

    async def update_by_id(self, session: AsyncSession, id: str, **values) -> ModelT | None:
        """Set the given columns; None when no row has this id."""
        row = await self.get_by_id(session, id)
        if row is None:
            return None
        for column, value in values.items():
            setattr(row, column, value)
        await session.flush()
        await session.refresh(row)
        return row

    async def delete_by_id(self, session: AsyncSession, id: str) -> bool:
        """True when a row was removed."""
        result = await session.execute(delete(self.model).where(self.model.id == id))
        return result.rowcount > 0

    async def exists(self, session: AsyncSession, id: str) -> bool:
        result = await session.execute(select(self.model.id).where(self.model.id == id))
        return result.scalar_one_or_none() is not None
