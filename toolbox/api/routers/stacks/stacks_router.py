"""
Stack builder API endpoints.

Routes:
- GET /stacks?userId= - List a user's stacks
- POST /stacks - Create a stack
- PUT /stacks/{id} - Rename / replace tools
- DELETE /stacks/{id} - Delete a stack

Dependencies: toolbox.application.services, toolbox.models
System role: Stack builder HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query

from toolbox.api.deps.dependencies import get_stack_service
from toolbox.application.services.stack_service import StackService
from toolbox.models.common import SuccessResponse
from toolbox.models.stack import (
    CreateStackRequest,
    StackEnvelope,
    StackListResponse,
    UpdateStackRequest,
)

from .stack_error_handling import handle_stack_errors
from .stack_responses import map_stack_to_response, map_stacks_to_response
from .stack_validators import validate_stack_creation, validate_stack_name, validate_user_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/stacks", tags=["stacks"])


@router.get("", response_model=StackListResponse)
@handle_stack_errors("Failed to fetch stacks")
async def list_stacks(
    user_id: str | None = Query(default=None, alias="userId"),
    stack_service: StackService = Depends(get_stack_service),
) -> StackListResponse:
    validate_user_id(user_id)
    stacks = await stack_service.list_stacks(user_id)
    return map_stacks_to_response(stacks)


@router.post("", response_model=StackEnvelope)
@handle_stack_errors("Failed to create stack")
async def create_stack(
    request: CreateStackRequest,
    stack_service: StackService = Depends(get_stack_service),
) -> StackEnvelope:
    """Create a stack; the name defaults to "My Stack"."""
    validate_stack_creation(request)
    stack = await stack_service.create_stack(
        user_id=request.user_id, tool_ids=request.tool_ids, name=request.name
    )
    return map_stack_to_response(stack)


@router.put("/{stack_id}", response_model=StackEnvelope)
@handle_stack_errors("Failed to update stack")
async def update_stack(
    stack_id: str,
    request: UpdateStackRequest,
    stack_service: StackService = Depends(get_stack_service),
) -> StackEnvelope:
    """
    Raises:
        HTTPException(404): Stack not found
    """
    validate_stack_name(request.name)
    stack = await stack_service.update_stack(stack_id, tool_ids=request.tool_ids, name=request.name)
    return map_stack_to_response(stack)


@router.delete("/{stack_id}", response_model=SuccessResponse)
@handle_stack_errors("Failed to delete stack")
async def delete_stack(
    stack_id: str,
    stack_service: StackService = Depends(get_stack_service),
) -> SuccessResponse:
    deleted = await stack_service.delete_stack(stack_id)
    logger.info("Stack delete requested", extra={"stack_id": stack_id, "deleted": deleted})
    return SuccessResponse(success=deleted)
