"""
FastAPI application with assembled routers.

Initializes the FastAPI app with all API routers and configures the
uvicorn server.

Dependencies: fastapi, toolbox.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from toolbox.api.deps.dependencies import get_service_cache
from toolbox.boundary.db.connection import dispose_engine
from toolbox.configs import get_settings
from toolbox.core.exceptions import DatabaseNotConfiguredError
from toolbox.observability import configure_logging
from toolbox.observability.middleware import RequestIDMiddleware, RequestLoggingMiddleware

from .routers import (
    agents_router,
    blog_router,
    health_router,
    news_router,
    prompts_router,
    recommendations_router,
    seo_router,
    stacks_router,
    tools_router,
    users_router,
)

API_PREFIX = "/api"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    logger = logging.getLogger("uvicorn")

    # Startup
    configure_logging(get_settings().log_level)
    logger.info("AI Toolbox API starting")

    yield

    # Shutdown
    await get_service_cache().shutdown()
    await dispose_engine()
    logger.info("Background jobs cancelled and database engine disposed")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def database_not_configured_handler(
    request: Request, exc: DatabaseNotConfiguredError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"error": exc.message},
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"error": "Invalid request", "details": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()

    app = FastAPI(
        title="AI Toolbox API",
        description="AI tools directory: tools, prompts, news, SEO pages and micro agents",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.app.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Observability middleware (RequestID wraps request logging)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(DatabaseNotConfiguredError, database_not_configured_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Register all routers under /api
    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(tools_router, prefix=API_PREFIX)
    app.include_router(users_router, prefix=API_PREFIX)
    app.include_router(stacks_router, prefix=API_PREFIX)
    app.include_router(prompts_router, prefix=API_PREFIX)
    app.include_router(news_router, prefix=API_PREFIX)
    app.include_router(seo_router, prefix=API_PREFIX)
    app.include_router(blog_router, prefix=API_PREFIX)
    app.include_router(recommendations_router, prefix=API_PREFIX)
    app.include_router(agents_router, prefix=API_PREFIX)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "toolbox.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
