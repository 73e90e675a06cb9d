"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from catalog.domain.catalog.errors import (
    CatalogDomainError,
    DatabaseError,
    InvalidSortPropertyError,
    ResourceNotFoundError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_409 = 409
HTTP_500 = 500


def _error_response(
    request: Request, status_code: int, error: str, message: str | None = None
) -> JSONResponse:
    """Build a consistent JSON error response."""
    body = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": status_code,
        "error": error,
        "message": message,
        "path": request.url.path,
    }
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ResourceNotFoundError)
    async def handle_resource_not_found(
        request: Request, exc: ResourceNotFoundError
    ) -> JSONResponse:
        """Handle lookups and writes on ids that do not exist."""
        logger.warning("Resource not found: %s id=%s", exc.resource, exc.resource_id)
        return _error_response(request, HTTP_404, "Resource not found", exc.message)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(
        request: Request, exc: DatabaseError
    ) -> JSONResponse:
        """Handle writes rejected by integrity constraints."""
        logger.warning("Database conflict on %s: %s", request.url.path, exc.message)
        return _error_response(request, HTTP_409, "Database exception", exc.message)

    @app.exception_handler(InvalidSortPropertyError)
    async def handle_invalid_sort(
        request: Request, exc: InvalidSortPropertyError
    ) -> JSONResponse:
        logger.warning("Invalid sort property: %s", exc.sort)
        return _error_response(request, HTTP_400, "Invalid sort property", exc.message)

    @app.exception_handler(CatalogDomainError)
    async def handle_catalog_domain(
        request: Request, exc: CatalogDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled catalog domain errors."""
        logger.error("Unhandled catalog domain error: %s", exc.message)
        return _error_response(request, HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(request, HTTP_500, "Internal server error")
