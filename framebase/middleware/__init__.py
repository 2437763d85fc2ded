"""
Framebase middleware.

HTTP middleware, request logging and exception handlers.
"""

from framebase.middleware.security_headers import SecurityHeadersMiddleware, security_headers
from framebase.middleware.request_log import log_request
from framebase.middleware.errors import register_exception_handlers

__all__ = [
    "SecurityHeadersMiddleware",
    "security_headers",
    "log_request",
    "register_exception_handlers",
]
