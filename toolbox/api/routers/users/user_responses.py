"""
User response mapping utilities.

Dependencies: toolbox.models.user
System role: User response transformation
"""

from typing import Any

from toolbox.models.user import UserEnvelope, UserResponse


def map_user_to_response(user_data: dict[str, Any]) -> UserEnvelope:
    return UserEnvelope(user=UserResponse(**user_data))
