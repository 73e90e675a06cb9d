"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
``/health`` reports the application version; ``/health/db`` also runs a
trivial query to confirm the database answers.
"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.engine import Connection

from catalog.core.config import settings
from catalog.interfaces.catalog.dependencies import get_connection
from catalog.interfaces.catalog.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check() -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", version=settings.version)


@router.get(
    "/health/db",
    response_model=HealthResponse,
    summary="Database health check",
    description="Runs SELECT 1 against the catalog database.",
)
def database_health_check(
    conn: Connection = Depends(get_connection, scope="function"),
) -> HealthResponse:
    conn.execute(text("SELECT 1"))
    return HealthResponse(status="ok", version=settings.version)
