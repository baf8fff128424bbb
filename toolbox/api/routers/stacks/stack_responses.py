"""
Stack response mapping utilities.

Dependencies: toolbox.models.stack
System role: Stack response transformation
"""

from typing import Any

from toolbox.models.stack import StackEnvelope, StackListResponse, StackResponse


def map_stack_to_response(stack_data: dict[str, Any]) -> StackEnvelope:
    return StackEnvelope(stack=StackResponse(**stack_data))


def map_stacks_to_response(stacks_data: list[dict[str, Any]]) -> StackListResponse:
    return StackListResponse(stacks=[StackResponse(**s) for s in stacks_data])
