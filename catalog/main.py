"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (catalog resources and health)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- Schema creation and optional demo seeding at startup

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from catalog.core.config import settings
from catalog.infrastructure.catalog.database import create_schema
from catalog.infrastructure.catalog.seed import seed_catalog
from catalog.interfaces.catalog.dependencies import get_engine
from catalog.interfaces.catalog.router import router as catalog_router
from catalog.interfaces.health import router as health_router
from catalog.shared.errors.handlers import register_error_handlers
from catalog.shared.logging import configure_logging
from catalog.shared.security.headers import SecurityHeadersMiddleware
from catalog.shared.security.rate_limiting import limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: prepare the database before serving requests."""
    engine = app.dependency_overrides.get(get_engine, get_engine)()
    if settings.create_schema_on_startup:
        create_schema(engine)
    if settings.seed_on_startup:
        seed_catalog(engine)
    logger.info("%s %s started", settings.project_name, settings.version)

    yield

    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level, log_sql=settings.log_sql)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(catalog_router, prefix="/api/v1")

    return app


app = create_app()
