"""Blacklist Mock API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to a JSON body (404 / 429 / 500)
    - Rate limiting and API docs are toggled from settings, not separate apps
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - create_app() factory: tests build apps with their own settings;
      uvicorn serves the module-level `app`
    - Rate limits are route decorators (general on every route, strict on
      /blacklisted); no middleware route lookup involved
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from blacklist_api.api.error_handlers import register_error_handlers
from blacklist_api.api.routes import blacklisted, health
from blacklist_api.config import Settings, get_settings
from blacklist_api.core.errors import AVAILABLE_ENDPOINTS
from blacklist_api.infrastructure.observability import setup_logging
from blacklist_api.infrastructure.rate_limit import limiter
from blacklist_api.schemas.responses import InternalErrorResponse, NotFoundResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    base_url = f"http://localhost:{settings.port}"
    logger.info(
        f"Mock API server is running on port {settings.port}",
        extra={"port": settings.port},
    )
    logger.info(f"Health endpoint: {base_url}/health")
    logger.info(f"Blacklisted endpoint: {base_url}/blacklisted")
    logger.info(f"Check specific name: {base_url}/blacklisted?name=John%20Smith")
    if settings.docs_enabled:
        logger.info(f"API docs: {base_url}/docs")
    yield
    logger.info("Mock API server shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application from settings (defaults to the process settings)."""
    settings = settings or get_settings()
    docs = settings.docs_enabled

    app = FastAPI(
        title="Blacklisted Names Mock API",
        version="1.0.0",
        description="Endpoints: " + ", ".join(AVAILABLE_ENDPOINTS),
        lifespan=lifespan,
        docs_url="/docs" if docs else None,
        redoc_url=None,
        redirect_slashes=False,
        openapi_url="/openapi.json" if docs else None,
        responses={
            404: {"model": NotFoundResponse},
            500: {"model": InternalErrorResponse},
        },
    )
    app.state.settings = settings

    # Counters are process-wide; rate_limit_enabled is read per app from state
    app.state.limiter = limiter

    app.include_router(health.router)
    app.include_router(blacklisted.router)

    register_error_handlers(app)
    return app


app = create_app()
