"""
Exception hierarchy for the AI Tool Box backend.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class ToolboxException(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(ToolboxException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class NotFoundError(ToolboxException):
    """Raised when a requested record does not exist."""

    def __init__(
        self,
        message: str,
        resource: str | None = None,
        resource_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if resource:
            details["resource"] = resource
        if resource_id:
            details["resource_id"] = resource_id
        super().__init__(message, details)


class LLMNotConfiguredError(ToolboxException):
    """Raised when an LLM provider key is missing."""

    def __init__(self, provider: str, env_var: str) -> None:
        """
        Initialize missing-credentials error.

        Args:
            provider: Provider name (anthropic, gemini)
            env_var: Environment variable that should hold the key
        """
        super().__init__(f"{env_var} is not configured", {"provider": provider})


class LLMResponseError(ToolboxException):
    """Raised when model output cannot be turned into the expected shape."""

    def __init__(
        self,
        message: str,
        agent_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if agent_id:
            details["agent_id"] = agent_id
        super().__init__(message, details)

    def __str__(self) -> str:
        # Surfaced verbatim in API fallbacks and logs
        return self.message


class DatabaseNotConfiguredError(ToolboxException):
    """Raised when a DB-backed operation runs without DATABASE_URL."""

    def __init__(self) -> None:
        super().__init__("DATABASE_URL environment variable is not set")


class FatalDatabaseError(ToolboxException):
    """Raised for database failures that must not be retried."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
