"""
User API endpoints.

Routes:
- POST /users - Sign up (returns the existing user for a known email)
- GET /users?email=|id= - Look a user up
- POST /users/interactions - Add or remove a like / star / bookmark

Dependencies: toolbox.application.services, toolbox.models
System role: Community HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from toolbox.api.deps.dependencies import get_user_service
from toolbox.application.services.user_service import UserService
from toolbox.models.user import CreateUserRequest, InteractionRequest, UserEnvelope

from .user_error_handling import handle_user_errors
from .user_responses import map_user_to_response
from .user_validators import validate_interaction, validate_user_creation, validate_user_lookup

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserEnvelope)
@handle_user_errors("Failed to create user")
async def create_user(
    request: CreateUserRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserEnvelope:
    """
    Create a user with 100 starting points.

    Raises:
        HTTPException(400): Name or email missing
    """
    validate_user_creation(request)
    user = await user_service.create_user(name=request.name, email=request.email)
    return map_user_to_response(user)


@router.get("", response_model=UserEnvelope)
@handle_user_errors("Failed to fetch user")
async def get_user(
    email: str | None = None,
    id: str | None = None,
    user_service: UserService = Depends(get_user_service),
) -> UserEnvelope:
    """
    Raises:
        HTTPException(400): Neither email nor id given
        HTTPException(404): User not found
    """
    validate_user_lookup(id, email)
    user = await user_service.get_user(user_id=id, email=email)
    return map_user_to_response(user)


@router.post("/interactions", response_model=UserEnvelope)
@handle_user_errors("Failed to update interaction")
async def update_interaction(
    request: InteractionRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserEnvelope:
    """
    Add an interaction (+2 points) or remove it when action is "remove".

    Returns:
        UserEnvelope: The updated user
    """
    validate_interaction(request)
    user = await user_service.update_interaction(
        user_id=request.user_id,
        tool_id=request.tool_id,
        interaction_type=request.interaction_type,
        action=request.action,
    )
    logger.info(
        "Interaction updated",
        extra={"user_id": request.user_id, "interaction_type": request.interaction_type},
    )
    return map_user_to_response(user)
