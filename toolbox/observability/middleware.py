"""
Request logging and request id middleware.

Dependencies: fastapi, starlette, toolbox.observability.correlation
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from toolbox.observability.correlation import clear_request_id, get_request_id, set_request_id

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
CORRELATION_ID_HEADER = "X-Correlation-ID"

# Polled by the load balancer; logged at DEBUG only
QUIET_PATHS = frozenset({"/api/health"})


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One log line per request with status and process_time_ms."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        line = f"{request.method} {request.url.path}"
        context = {"method": request.method, "path": request.url.path, "request_id": get_request_id()}

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{line} - unhandled {type(e).__name__}",
                extra={**context, "process_time_ms": _elapsed_ms(started), "error_msg": str(e)},
            )
            raise

        level = logging.DEBUG if request.url.path in QUIET_PATHS else logging.INFO
        logger.log(
            level,
            f"{line} - {response.status_code}",
            extra={**context, "status_code": response.status_code, "process_time_ms": _elapsed_ms(started)},
        )
        return response


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Bind X-Request-ID (or X-Correlation-ID, or a new uuid4) for the request.

    Agent runs read it as their requestId; it is echoed in the response.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = set_request_id(
            request.headers.get(REQUEST_ID_HEADER) or request.headers.get(CORRELATION_ID_HEADER)
        )
        try:
            response: Response = await call_next(request)
        finally:
            clear_request_id()
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
