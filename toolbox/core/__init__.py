"""
Core business logic module.

Contains the exception hierarchy, retry policies and the LLM agents
(Claude micro agents and Gemini discovery / content agents).
"""

from toolbox.core.exceptions import (
    DatabaseNotConfiguredError,
    LLMNotConfiguredError,
    LLMResponseError,
    NotFoundError,
    ToolboxException,
    ValidationError,
)

__all__ = [
    "DatabaseNotConfiguredError",
    "LLMNotConfiguredError",
    "LLMResponseError",
    "NotFoundError",
    "ToolboxException",
    "ValidationError",
]
