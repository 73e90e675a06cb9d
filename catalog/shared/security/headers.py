"""
Secure HTTP headers middleware.

Adds security-related headers to every API response. The interactive
docs pages (only mounted in debug mode) load Swagger UI assets from a
CDN, so they are served without the Content-Security-Policy header.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
}

DOCS_PATHS = ("/docs", "/redoc")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that adds secure HTTP headers to every response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        is_docs = request.url.path.startswith(DOCS_PATHS)
        for header_name, header_value in SECURE_HEADERS.items():
            if is_docs and header_name == "Content-Security-Policy":
                continue
            response.headers[header_name] = header_value
        return response
