"""
Helpers for turning pydantic validation errors into client messages.
"""

from typing import Any, Dict, Sequence, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from common.utils import BadRequestException

ModelT = TypeVar("ModelT", bound=BaseModel)

# Location prefixes FastAPI adds to request errors
_LOCATION_ROOTS = {"body", "query", "path", "header", "cookie"}


def format_validation_error(errors: Sequence[Dict[str, Any]]) -> str:
    """
    Build a human-readable message from the first validation error.

    Example:
        [{"loc": ("body", "email"), "msg": "value is not a valid email address"}]
        -> "email: value is not a valid email address"
    """
    if not errors:
        return "Invalid request body."

    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in _LOCATION_ROOTS]
    message = first.get("msg") or "Invalid value"

    if first.get("type") == "json_invalid":
        return "Invalid JSON body."
    if first.get("type") == "missing" and not loc:
        return "Request body is required."

    if loc:
        return f"{'.'.join(loc)}: {message}"
    return message


def validate_payload(model: Type[ModelT], payload: Any) -> ModelT:
    """
    Validate an untyped payload against a request model.

    Raises:
        BadRequestException: With the first error's message
    """
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise BadRequestException(format_validation_error(e.errors()))


async def parse_request(request: Request, model: Type[ModelT]) -> ModelT:
    """
    Read the JSON body of a request and validate it.

    Raises:
        BadRequestException: Body is not JSON or fails validation
    """
    try:
        payload = await request.json()
    except ValueError:
        raise BadRequestException("Invalid JSON body.")
    return validate_payload(model, payload)
