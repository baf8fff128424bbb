"""
Tool API endpoints.

Routes:
- GET /tools - List tools (category, search, limit, offset)
- GET /tools/trending - Most popular tools
- GET /tools/count - Directory size
- POST /tools/vote - Vote for a tool
- GET|POST /tools/discover - Start the discovery job (cron)
- GET /tools/{id} - Get single tool
- GET /tools/{id}/enrichment - FAQs and use cases of a tool

Dependencies: toolbox.application.services, toolbox.models
System role: Tool directory HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from toolbox.api.deps.dependencies import get_tool_service
from toolbox.api.routers.router_utils.cron_routes import add_cron_route
from toolbox.application.services.tool_service import ToolService
from toolbox.models.common import SuccessResponse
from toolbox.models.tool import (
    ToolCountResponse,
    ToolEnrichmentResponse,
    ToolEnvelope,
    ToolListResponse,
    VoteRequest,
)

from .tool_error_handling import handle_tool_errors
from .tool_responses import (
    map_enrichment_to_response,
    map_tool_envelope,
    map_tools_to_response,
)
from .tool_validators import validate_vote

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tools", tags=["tools"])


@router.get("", response_model=ToolListResponse)
@handle_tool_errors("Failed to fetch tools")
async def list_tools(
    category: str | None = None,
    search: str | None = None,
    limit: int | None = None,
    offset: int | None = None,
    tool_service: ToolService = Depends(get_tool_service),
) -> ToolListResponse:
    """
    List tools, most voted first.

    Falls back to the bundled dataset without a database.
    """
    tools = await tool_service.list_tools(
        category=category, search=search, limit=limit, offset=offset
    )
    logger.info("Tools retrieved", extra={"count": len(tools), "category": category})
    return map_tools_to_response(tools)


@router.get("/trending", response_model=ToolListResponse)
@handle_tool_errors("Failed to fetch trending tools")
async def trending_tools(
    limit: int = 8,
    tool_service: ToolService = Depends(get_tool_service),
) -> ToolListResponse:
    tools = await tool_service.get_trending_tools(limit=limit)
    return map_tools_to_response(tools)


@router.get("/count", response_model=ToolCountResponse)
@handle_tool_errors("Failed to count tools")
async def count_tools(tool_service: ToolService = Depends(get_tool_service)) -> ToolCountResponse:
    return ToolCountResponse(count=await tool_service.count_tools())


@router.post("/vote", response_model=SuccessResponse)
@handle_tool_errors("Failed to vote on tool")
async def vote_tool(
    request: VoteRequest,
    tool_service: ToolService = Depends(get_tool_service),
) -> SuccessResponse:
    """
    Vote for a tool: +1 vote, a "vote" interaction and 5 points for the user.

    Raises:
        HTTPException(400): toolId or userId missing
    """
    validate_vote(request)
    await tool_service.vote(tool_id=request.tool_id, user_id=request.user_id)
    return SuccessResponse(success=True)


add_cron_route(router, "/discover", "tools")


@router.get("/{tool_id}", response_model=ToolEnvelope)
@handle_tool_errors("Failed to fetch tool")
async def get_tool(
    tool_id: str,
    tool_service: ToolService = Depends(get_tool_service),
) -> ToolEnvelope:
    """
    Get single tool by ID.

    Raises:
        HTTPException(404): Tool not found
    """
    tool = await tool_service.get_tool(tool_id)
    return map_tool_envelope(tool)


@router.get("/{tool_id}/enrichment", response_model=ToolEnrichmentResponse)
@handle_tool_errors("Failed to fetch tool enrichment")
async def get_tool_enrichment(
    tool_id: str,
    tool_service: ToolService = Depends(get_tool_service),
) -> ToolEnrichmentResponse:
    enrichment = await tool_service.get_tool_enrichment(tool_id)
    return map_enrichment_to_response(enrichment)
