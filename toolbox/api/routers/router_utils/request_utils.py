"""
Request parsing helpers for routes that read raw JSON bodies.

Dependencies: fastapi, toolbox.observability
System role: Request metadata extraction
"""

import json
import uuid
from typing import Any

from fastapi import HTTPException, Request, status

from toolbox.observability.correlation import get_request_id


async def read_json_body(request: Request) -> Any:
    """
    Parse the request body as JSON.

    Raises:
        HTTPException(400): "Invalid JSON body" when the body does not parse
    """
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid JSON body")


def client_ip(request: Request) -> str | None:
    """First X-Forwarded-For entry, if any."""
    forwarded = request.headers.get("x-forwarded-for")
    if not forwarded:
        return None
    return forwarded.split(",")[0].strip() or None


def request_id_from(request: Request) -> str:
    """X-Request-ID header, the id set by RequestIDMiddleware, or a fresh uuid4."""
    return request.headers.get("x-request-id") or get_request_id() or str(uuid.uuid4())
