"""
Exception handlers.

Every error leaves the API in the standard envelope:

    {"success": false, "error": "..."}

Validation failures become 400s with the first error's message. Anything
unhandled becomes a 500 with a generic message.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from common.utils import APIException, GENERIC_SERVER_ERROR, json_error

from framebase.config import settings
from framebase.middleware.security_headers import security_headers
from framebase.schemas.validation import format_validation_error

logger = logging.getLogger(__name__)


async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
    return json_error(exc.message, status_code=exc.status_code, headers=exc.headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed."
    return json_error(message, status_code=exc.status_code, headers=getattr(exc, "headers", None))


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    return json_error(format_validation_error(exc.errors()), status_code=400)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    if settings.is_production():
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    else:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    # Rendered outside the HTTP middleware stack, so the headers are set here
    return json_error(
        GENERIC_SERVER_ERROR,
        status_code=500,
        headers=security_headers(settings.is_production()),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope exception handlers on an app."""
    app.add_exception_handler(APIException, api_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
