# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""FastAPI Application Factory.

This module provides the main application factory for the shift scheduler API.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded

from shift_scheduler import __version__
from shift_scheduler.api.middleware.auth import AuthMiddleware
from shift_scheduler.api.middleware.rate_limit import limiter, rate_limit_exceeded_handler
from shift_scheduler.api.middleware.request_logging import RequestLoggingMiddleware
from shift_scheduler.api.middleware.tenant import TenantMiddleware
from shift_scheduler.api.responses import register_exception_handlers
from shift_scheduler.api.routes import health
from shift_scheduler.api.v1 import router as v1_router
from shift_scheduler.core.config import get_settings
from shift_scheduler.infrastructure.database.connection import close_database, init_database
from shift_scheduler.utils.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Initializes logging and the database pool on startup and disposes
    the pool on shutdown. A database that cannot be reached at startup
    is reported by /health/ready rather than preventing startup.
    """
    settings = get_settings()
    setup_logging(settings)
    logger.info(
        "Starting Shift Scheduler API",
        extra={"environment": settings.environment, "debug": settings.debug},
    )

    try:
        await init_database(settings)
        logger.info("Database connection initialized")
    except Exception as e:
        logger.warning("Failed to initialize database connection: %s", str(e))

    yield

    try:
        await close_database()
        logger.info("Database connection closed")
    except Exception as e:
        logger.warning("Error closing database connection: %s", str(e))

    logger.info("Shutting down Shift Scheduler API")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    This factory function creates a new FastAPI instance with all
    middleware, routes, and configurations applied.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="Shift Scheduler API",
        description="Tenant profile and admin password reset authorization",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
        # Disable automatic redirects from /path to /path/
        # This prevents 307 redirects that lose Authorization headers
        redirect_slashes=False,
    )

    # =========================================================================
    # State
    # =========================================================================
    app.state.limiter = limiter

    # =========================================================================
    # Exception handlers
    # =========================================================================
    register_exception_handlers(app)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # =========================================================================
    # Middleware (order matters - last added is first executed)
    # =========================================================================

    # Tenant middleware - needs request.state.user, so it runs after auth
    app.add_middleware(TenantMiddleware)

    # Auth middleware - validates JWT tokens
    app.add_middleware(AuthMiddleware)

    # Request logging - binds request_id for everything below it
    app.add_middleware(RequestLoggingMiddleware)

    # CORS middleware (should be last to execute first)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.origins_list,
        allow_credentials=settings.cors.allow_credentials,
        allow_methods=settings.cors.allow_methods,
        allow_headers=settings.cors.allow_headers,
    )

    # =========================================================================
    # Routes
    # =========================================================================
    app.include_router(health.router, tags=["Health"])
    app.include_router(v1_router)

    return app
