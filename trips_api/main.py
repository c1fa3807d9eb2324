"""
Application entry point.

Creates the FastAPI application and wires together:
- Persistence (database handle, model registry)
- Routers and their shared controllers
- Error handlers (centralized AppError rendering)
- Security middleware (headers, rate limiting)
- Logging configuration

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from trips_api.core.config import Settings, settings
from trips_api.infrastructure.persistence.database import Database
from trips_api.infrastructure.persistence.registry import SqlModelRegistry
from trips_api.interfaces.health import router as health_router
from trips_api.interfaces.trips.dependencies import build_trips_controller
from trips_api.interfaces.trips.router import router as trips_router
from trips_api.shared.errors.handlers import register_error_handlers
from trips_api.shared.logging import configure_logging
from trips_api.shared.security.headers import SecurityHeadersMiddleware
from trips_api.shared.security.rate_limiting import (
    build_limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root: one database handle, one model registry
    and one controller per router are built here and shared by every
    request.

    Args:
        app_settings: Settings to use. Defaults to the environment-loaded settings.

    Returns:
        A fully configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    configure_logging(level=app_settings.log_level, sql_echo=app_settings.database_echo)

    database = Database.from_settings(app_settings)
    registry = SqlModelRegistry(database)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        """Application lifespan: release the connection pool on shutdown."""
        logger.info("Starting %s %s", app_settings.project_name, app_settings.version)
        yield
        database.dispose()
        logger.info("Database connections released")

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.database = database
    app.state.model_registry = registry
    app.state.trips_controller = build_trips_controller(registry, app_settings)

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(app_settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    if app_settings.rate_limit_enabled:
        app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(trips_router, prefix="/api/v1")

    return app


app = create_app()
