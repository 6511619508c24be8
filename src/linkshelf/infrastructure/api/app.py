"""FastAPI application factory and configuration."""

import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from linkshelf.core.config import get_settings
from linkshelf.core.logging import (
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
)
from linkshelf.infrastructure.api.routes import collections_router
from linkshelf.infrastructure.persistence.database import close_database, init_database

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager: database setup and teardown."""
    settings = get_settings()
    configure_logging(settings)

    logger.info(
        "Starting Linkshelf",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )
    await init_database()

    yield

    await close_database()
    logger.info("Database connection closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url="/docs" if settings.is_development else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.include_router(
        collections_router,
        prefix=f"{settings.api_prefix}/collections",
        tags=["collections"],
    )
    register_exception_handlers(app)
    register_middleware(app)
    return app


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled exception",
            path=str(request.url.path),
            method=request.method,
            error=str(exc),
            exc_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "message": "An unexpected error occurred",
            },
        )


def register_middleware(app: FastAPI) -> None:
    """Register request logging middleware with correlation IDs."""

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", f"cid_{uuid.uuid4().hex[:12]}")
        bind_correlation_id(correlation_id)
        try:
            response = await call_next(request)
            logger.info(
                "Request completed",
                method=request.method,
                path=str(request.url.path),
                status_code=response.status_code,
            )
            response.headers["X-Correlation-ID"] = correlation_id
            return response
        finally:
            clear_context()
