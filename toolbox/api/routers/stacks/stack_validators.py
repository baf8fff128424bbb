"""
Stack validation utilities.

Dependencies: toolbox.models.stack
System role: Stack request validation
"""

from toolbox.core.exceptions import ValidationError
from toolbox.models.stack import CreateStackRequest

MAX_STACK_NAME_LENGTH = 255


class StackValidationError(ValidationError):
    """Raised when a stack request fails validation."""


def validate_user_id(user_id: str | None) -> None:
    if not user_id:
        raise StackValidationError("userId is required")


def validate_stack_name(name: str | None) -> None:
    if name and len(name) > MAX_STACK_NAME_LENGTH:
        raise StackValidationError("Stack name cannot exceed 255 characters", field="name")


def validate_stack_creation(request: CreateStackRequest) -> None:
    validate_user_id(request.user_id)
    validate_stack_name(request.name)
