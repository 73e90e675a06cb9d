"""
Rate limiting configuration and setup.

Uses slowapi to enforce a per-client default limit on every endpoint,
applied by ``SlowAPIMiddleware`` in the application factory.
"""

from datetime import datetime, timezone

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from catalog.core.config import settings

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit_default],
    enabled=settings.rate_limit_enabled,
)


async def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Args:
        request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response in the standard error format.
    """
    return JSONResponse(
        status_code=429,
        content={
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "status": 429,
            "error": "Rate limit exceeded",
            "message": str(exc.detail),
            "path": request.url.path,
        },
    )
