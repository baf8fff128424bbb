"""
Agent event CRUD operations.

Dependencies: sqlalchemy, toolbox.boundary.db.models
System role: Agent analytics persistence operations
"""

from sqlalchemy.ext.asyncio import AsyncSession

from toolbox.boundary.db.CRUD.base_crud import BaseCRUD
from toolbox.boundary.db.models.agent_event_model import AgentEventModel


class AgentEventCRUD(BaseCRUD[AgentEventModel]):
    """Insert-only access to AgentEventModel."""

    def __init__(self) -> None:
        """Initialize AgentEventCRUD with AgentEventModel."""
        super().__init__(AgentEventModel)

    async def insert(
        self,
        session: AsyncSession,
        id: str,
        agent_id: str,
        event_type: str,
        user_id: str | None = None,
        session_id: str | None = None,
        payload: dict | None = None,
    ) -> None:
        """Store one analytics event."""
        session.add(
            AgentEventModel(
                id=id,
                agent_id=agent_id,
                event_type=event_type,
                user_id=user_id,
                session_id=session_id,
                payload=payload or {},
            )
        )
        await session.flush()


agent_event_crud = AgentEventCRUD()
