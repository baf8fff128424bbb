"""
Agent service orchestrator.

Runs the Claude micro agents behind the HTTP routes and records agent
analytics events.

Runs never fail from the caller's point of view: without an Anthropic key,
or when the call or parsing fails, the deterministic fallback generator
answers instead and the response meta says so.

Dependencies: toolbox.core.agents.claude, toolbox.boundary.db
System role: Agent use case orchestration
"""

import logging
import uuid
from typing import Any, Callable

from pydantic import BaseModel

from toolbox.boundary.db.connection import SessionScope, is_database_configured, session_scope
from toolbox.boundary.db.CRUD.agent_event_crud import agent_event_crud
from toolbox.core.agents.claude import (
    AgentRunContext,
    ClaudeAgentBase,
    EmailTemplateGeneratorAgent,
    LeadMagnetGeneratorAgent,
    generate_email_template_fallback,
    generate_lead_magnet_fallback,
    validate_email_template_input,
    validate_lead_magnet_input,
)
from toolbox.core.agents.claude.client import is_anthropic_configured
from toolbox.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

EVENTS_TABLE = "toolbox_agent_events"


class AgentService:
    """Agent service orchestrator."""

    def __init__(
        self,
        session_factory: SessionScope = session_scope,
        email_agent: ClaudeAgentBase | None = None,
        lead_magnet_agent: ClaudeAgentBase | None = None,
    ) -> None:
        """
        Initialize agent service.

        Args:
            session_factory: Source of sessions for event inserts
            email_agent: Email template agent (default instance when omitted)
            lead_magnet_agent: Lead magnet agent (default instance when omitted)
        """
        self.session_factory = session_factory
        self.email_agent = email_agent or EmailTemplateGeneratorAgent()
        self.lead_magnet_agent = lead_magnet_agent or LeadMagnetGeneratorAgent()

    async def _run(
        self,
        agent: ClaudeAgentBase,
        input: BaseModel,
        fallback: Callable[[Any], BaseModel],
        context: AgentRunContext,
    ) -> dict[str, Any]:
        if not is_anthropic_configured():
            return {
                "output": fallback(input).model_dump(by_alias=True),
                "meta": {"requestId": context.request_id, "isFallback": True, "provider": "fallback"},
            }

        try:
            result = await agent.run(input, context)
        except Exception as e:
            log_exception_with_context(
                logger, f"[agents/{agent.id}] error", e, request_id=context.request_id
            )
            return {
                "output": fallback(input).model_dump(by_alias=True),
                "meta": {
                    "requestId": context.request_id,
                    "isFallback": True,
                    "provider": "fallback_after_error",
                },
            }

        return {
            "output": result.output.model_dump(by_alias=True),
            "meta": {
                "requestId": context.request_id,
                "isFallback": False,
                "provider": "anthropic",
                "model": result.model,
                "usage": result.usage.model_dump(),
            },
        }

    async def generate_email_template(self, body: dict, context: AgentRunContext) -> dict[str, Any]:
        """
        Validate the body and produce an email package.

        Raises:
            ValidationError: If the body fails input validation
        """
        input = validate_email_template_input(body)
        return await self._run(self.email_agent, input, generate_email_template_fallback, context)

    async def generate_lead_magnet(self, body: dict, context: AgentRunContext) -> dict[str, Any]:
        """
        Validate the body and produce a lead magnet package.

        Raises:
            ValidationError: If the body fails input validation
        """
        input = validate_lead_magnet_input(body)
        return await self._run(self.lead_magnet_agent, input, generate_lead_magnet_fallback, context)

    async def record_event(
        self,
        agent_id: str,
        event_type: str,
        user_id: str | None = None,
        session_id: str | None = None,
        payload: dict | None = None,
        ip: str | None = None,
    ) -> str:
        """
        Log an analytics event and store it when a database is configured.

        Storage failures are logged, never raised; a missing events table is
        ignored silently.

        Returns:
            str: Generated event id
        """
        event_id = str(uuid.uuid4())
        logger.info(
            "[agent-event]",
            extra={
                "event_id": event_id,
                "agent_id": agent_id,
                "event_type": event_type,
                "user_id": user_id,
                "session_id": session_id,
                "ip": ip,
            },
        )

        if not is_database_configured():
            return event_id

        try:
            async with self.session_factory() as session:
                await agent_event_crud.insert(
                    session,
                    id=event_id,
                    agent_id=agent_id,
                    event_type=event_type,
                    user_id=user_id,
                    session_id=session_id,
                    payload=payload,
                )
        except Exception as e:
            message = str(e)
            if EVENTS_TABLE in message and "does not exist" in message:
                return event_id
            logger.warning("[agent-event] db insert failed", extra={"error": message})
        return event_id
