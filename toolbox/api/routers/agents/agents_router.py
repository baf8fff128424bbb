"""
Agent API endpoints.

Routes:
- POST /agents/email-template-generator - Email sequence generation
- POST /agents/lead-magnet-generator - Lead magnet generation
- POST /agents/events - Agent analytics events

Bodies are read as raw JSON so a malformed body answers
400 "Invalid JSON body" instead of FastAPI's 422.

Dependencies: toolbox.application.services, toolbox.core.agents.claude
System role: Agent HTTP API
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request

from toolbox.api.deps.dependencies import get_agent_service
from toolbox.api.routers.router_utils.request_utils import (
    client_ip,
    read_json_body,
    request_id_from,
)
from toolbox.application.services.agent_service import AgentService
from toolbox.core.agents.claude import AgentRunContext
from toolbox.models.agent import AgentEventRequest, AgentEventResponse, AgentRunResponse

from .agent_error_handling import handle_agent_errors
from .agent_validators import as_trimmed, validate_agent_event

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/agents", tags=["agents"])


def build_run_context(request: Request, body: Any) -> AgentRunContext:
    user_id = body.get("userId") if isinstance(body, dict) else None
    return AgentRunContext(
        request_id=request_id_from(request),
        user_id=user_id if isinstance(user_id, str) else None,
        ip=client_ip(request),
        user_agent=request.headers.get("user-agent"),
    )


@router.post("/email-template-generator", response_model=AgentRunResponse)
@handle_agent_errors("Failed to generate email template")
async def email_template_generator(
    request: Request,
    agent_service: AgentService = Depends(get_agent_service),
) -> AgentRunResponse:
    """
    Generate an email sequence; falls back to templates without Claude.

    Raises:
        HTTPException(400): Invalid JSON or failed input validation
    """
    body = await read_json_body(request)
    result = await agent_service.generate_email_template(body, build_run_context(request, body))
    return AgentRunResponse(**result)


@router.post("/lead-magnet-generator", response_model=AgentRunResponse)
@handle_agent_errors("Failed to generate lead magnet")
async def lead_magnet_generator(
    request: Request,
    agent_service: AgentService = Depends(get_agent_service),
) -> AgentRunResponse:
    body = await read_json_body(request)
    result = await agent_service.generate_lead_magnet(body, build_run_context(request, body))
    return AgentRunResponse(**result)


@router.post("/events", response_model=AgentEventResponse)
@handle_agent_errors("Failed to record agent event")
async def record_event(
    request: Request,
    agent_service: AgentService = Depends(get_agent_service),
) -> AgentEventResponse:
    """
    Record an agent analytics event.

    Raises:
        HTTPException(400): agentId or eventType missing
    """
    body = await read_json_body(request)
    event = AgentEventRequest.model_validate(body if isinstance(body, dict) else {})
    agent_id, event_type = validate_agent_event(event)

    event_id = await agent_service.record_event(
        agent_id=agent_id,
        event_type=event_type,
        user_id=as_trimmed(event.user_id) or None,
        session_id=as_trimmed(event.session_id) or None,
        payload=event.payload if event.payload is not None else {},
        ip=client_ip(request),
    )
    return AgentEventResponse(ok=True, id=event_id)
