"""
Tool validation utilities.

Business validation with the exact messages the site expects; the request
models leave fields optional so these checks decide the 400 response.

Dependencies: toolbox.models.tool
System role: Tool request validation
"""

from toolbox.core.exceptions import ValidationError
from toolbox.models.tool import VoteRequest


class ToolValidationError(ValidationError):
    """Raised when a tool request fails validation."""


def validate_vote(request: VoteRequest) -> None:
    """
    Raises:
        ToolValidationError: If toolId or userId is missing
    """
    if not request.tool_id or not request.user_id:
        raise ToolValidationError("toolId and userId are required")
