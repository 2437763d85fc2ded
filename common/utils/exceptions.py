"""
Custom HTTP exceptions rendered as the standard error envelope.

Extends FastAPI's HTTPException so the exception handler installed by the
application can turn any of these into {"success": false, "error": message}.

Example:
    from common.utils import BadRequestException

    try:
        body = Model.model_validate(payload)
    except ValidationError:
        raise BadRequestException("Invalid request body.")
"""

from typing import Optional, Dict
from fastapi import HTTPException


class APIException(HTTPException):
    """
    Base API exception.

    The message is what the client sees in the "error" field.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Create an API exception.

        Args:
            status_code: HTTP status code
            message: Human-readable error message
            headers: Optional response headers
        """
        self.message = message
        super().__init__(
            status_code=status_code,
            detail=message,
            headers=headers,
        )


class BadRequestException(APIException):
    """400 Bad Request - Invalid input or malformed request."""

    def __init__(self, message: str = "Invalid request body."):
        super().__init__(400, message)


class InternalServerException(APIException):
    """500 Internal Server Error - Unexpected server error."""

    def __init__(self, message: str = "Something went wrong."):
        super().__init__(500, message)


class ServiceUnavailableException(APIException):
    """503 Service Unavailable - Upstream service not configured or down."""

    def __init__(self, message: str = "Service unavailable"):
        super().__init__(503, message)
