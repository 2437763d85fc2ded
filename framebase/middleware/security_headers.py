"""
Security headers middleware.

Adds the browser hardening headers to every response. HSTS is only sent
in production so local HTTP development keeps working.
"""

import logging
from typing import Callable, Dict

from fastapi import Request

logger = logging.getLogger(__name__)

BASE_SECURITY_HEADERS: Dict[str, str] = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Permissions-Policy": "camera=(), microphone=(), geolocation=()",
}

HSTS_HEADER = ("Strict-Transport-Security", "max-age=63072000; includeSubDomains; preload")


def security_headers(production: bool) -> Dict[str, str]:
    """Headers to apply for the given environment."""
    headers = dict(BASE_SECURITY_HEADERS)
    if production:
        name, value = HSTS_HEADER
        headers[name] = value
    return headers


class SecurityHeadersMiddleware:
    """
    FastAPI HTTP middleware that sets the security headers.

    Usage:
        app.middleware("http")(SecurityHeadersMiddleware(production=True))
    """

    def __init__(self, production: bool = False):
        self._headers = security_headers(production)

    async def __call__(self, request: Request, call_next: Callable):
        response = await call_next(request)
        for name, value in self._headers.items():
            response.headers.setdefault(name, value)
        return response
