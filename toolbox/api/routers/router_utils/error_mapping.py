"""
Exception to HTTP status mapping.

Shared by the per-router *_error_handling decorators so every route maps
domain errors the same way.

Dependencies: fastapi, pydantic, toolbox.core.exceptions
System role: Uniform error responses
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status
from pydantic import ValidationError as PydanticValidationError

from toolbox.core.exceptions import (
    DatabaseNotConfiguredError,
    NotFoundError,
    ValidationError,
)

F = TypeVar("F", bound=Callable[..., Any])


def to_http_exception(e: Exception, failure_message: str, logger: logging.Logger) -> HTTPException:
    """
    Map an exception raised inside a route to an HTTPException.

    NotFoundError -> 404, ValidationError / ValueError -> 400,
    pydantic ValidationError -> 422, DatabaseNotConfiguredError -> 503,
    anything else -> 500 with failure_message.
    """
    if isinstance(e, HTTPException):
        return e
    if isinstance(e, NotFoundError):
        logger.warning("Resource not found", extra={"error": str(e)})
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    if isinstance(e, ValidationError):
        logger.warning("Invalid request", extra={"error": str(e)})
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    if isinstance(e, PydanticValidationError):
        logger.warning("Pydantic validation error", extra={"error": str(e)})
        return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    if isinstance(e, DatabaseNotConfiguredError):
        logger.error("Database not configured", extra={"error": str(e)})
        return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message)
    if isinstance(e, ValueError):
        logger.warning("Invalid request (ValueError)", extra={"error": str(e)})
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    logger.exception(failure_message, extra={"error": str(e)})
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=failure_message)


def error_handler(logger: logging.Logger) -> Callable[[str], Callable[[F], F]]:
    """
    Build a route decorator factory bound to a router's logger.

    Usage:
        handle_tool_errors = error_handler(logger)

        @handle_tool_errors("Failed to fetch tool")
        async def get_tool(...): ...
    """

    def decorator_factory(failure_message: str) -> Callable[[F], F]:
        def decorator(func: F) -> F:
            @functools.wraps(func)
            async def wrapper(*args: Any, **kwargs: Any) -> Any:
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    raise to_http_exception(e, failure_message, logger) from e

            return wrapper  # type: ignore

        return decorator

    return decorator_factory
