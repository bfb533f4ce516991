"""
Main FastAPI application entry point.

Wires the trace middleware, RFC 9457 exception handlers and the v1 routers,
and runs the expired refresh token sweeper for the lifetime of the app.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.container import (
    get_database,
    get_event_bus,
    get_expired_token_sweeper,
    get_logger,
)
from src.infrastructure.persistence.database import Database
from src.presentation.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.api.v1 import v1_router
from src.presentation.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Build the event bus (wires subscribers), start the sweeper
    - Shutdown: Stop the sweeper, dispose the connection pool

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    get_event_bus()

    sweeper = get_expired_token_sweeper()
    if sweeper is not None:
        sweeper.start()

    logger.info(
        "application_started",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment.value,
    )

    yield

    if sweeper is not None:
        await sweeper.stop()
    await get_database().close()
    logger.info("application_stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Authentication service with rotating refresh tokens and role-based permissions",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 9457 error responses)
register_exception_handlers(app)

# Include API v1 routers
app.include_router(v1_router)


@app.get("/health")
async def health(database: Database = Depends(get_database)) -> JSONResponse:
    """
    Health check endpoint for monitoring and load balancers.

    Reports the database connection; 503 when it is unreachable.

    Returns:
        JSONResponse: Health status indicator.
    """
    database_ok = await database.check_connection()
    return JSONResponse(
        status_code=200 if database_ok else 503,
        content={
            "status": "healthy" if database_ok else "degraded",
            "database": "ok" if database_ok else "unavailable",
            "version": settings.app_version,
        },
    )
