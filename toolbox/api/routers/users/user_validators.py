"""
User validation utilities.

Dependencies: toolbox.models.user, toolbox.core.taxonomy
System role: User request validation
"""

from toolbox.core.exceptions import ValidationError
from toolbox.core.taxonomy import INTERACTION_TYPES
from toolbox.models.user import CreateUserRequest, InteractionRequest


class UserValidationError(ValidationError):
    """Raised when a user request fails validation."""


def validate_user_creation(request: CreateUserRequest) -> None:
    if not request.name or not request.email:
        raise UserValidationError("Name and email are required")


def validate_user_lookup(user_id: str | None, email: str | None) -> None:
    if not user_id and not email:
        raise UserValidationError("Email or id is required")


def validate_interaction(request: InteractionRequest) -> None:
    """
    Raises:
        UserValidationError: Missing fields, or a type other than like / star / bookmark
    """
    if not request.user_id or not request.tool_id or not request.interaction_type:
        raise UserValidationError("userId, toolId, and interactionType are required")
    if request.interaction_type not in INTERACTION_TYPES:
        raise UserValidationError("Invalid interaction type", field="interactionType")
