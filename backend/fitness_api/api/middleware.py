"""HTTP Middleware: API key gate for protected prefixes and security headers.

Invariants:
    - The gate runs before routing, body parsing, and any store access
    - Requests outside the protected prefixes pass through untouched
    - Accepted requests are forwarded unchanged (no headers added, no identity injected)
    - Only header presence and length are logged, never its value
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from fitness_api.core.authorization import API_KEY_HEADER, ApiKeyGate
from fitness_api.core.errors import UnauthorizedError

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Opener-Policy": "same-origin",
}


class ApiKeyMiddleware(BaseHTTPMiddleware):
    """Rejects requests to protected prefixes that lack the shared secret."""

    def __init__(self, app, gate: ApiKeyGate, protected_prefixes: tuple[str, ...]):
        super().__init__(app)
        self.gate = gate
        self.protected_prefixes = tuple(p.rstrip("/") for p in protected_prefixes)

    def is_protected(self, path: str) -> bool:
        return any(
            path == prefix or path.startswith(prefix + "/")
            for prefix in self.protected_prefixes
        )

    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path
        if not self.is_protected(path):
            return await call_next(request)

        candidate = request.headers.get(API_KEY_HEADER)
        logger.debug(
            "API key check",
            extra={
                "path": path,
                "key_present": candidate is not None,
                "key_length": len(candidate or ""),
            },
        )
        if not self.gate.allows(candidate):
            error = UnauthorizedError()
            logger.warning(
                f"Rejected {request.method} {path}: invalid or missing API key",
                extra={
                    "path": path,
                    "method": request.method,
                    "error_code": error.code,
                },
            )
            return JSONResponse(
                status_code=error.http_status, content=error.to_response(),
            )
        return await call_next(request)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds conservative security headers to every response."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response
