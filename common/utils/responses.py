"""
Standard API response helpers.

Every endpoint answers with the same envelope:

    {"success": true, "data": ...}
    {"success": false, "error": "..."}

Example:
    from common.utils import json_success, json_error

    @router.get("/projects/{id}")
    async def get_project(id: str):
        project = await db.select("projects", {"id": id}, single=True)
        if not project:
            return json_error("Project not found", status_code=404)
        return json_success({"project": project})
"""

from typing import Any, Callable, Dict, Optional

from fastapi.responses import JSONResponse

GENERIC_SERVER_ERROR = "Something went wrong."

# Set by the application at startup; common/ has no access to app settings.
_production_check: Optional[Callable[[], bool]] = None


def configure_responses(is_production: Callable[[], bool]) -> None:
    """Register the callable used to decide whether 5xx messages are masked."""
    global _production_check
    _production_check = is_production


def success_response(data: Any = None) -> Dict[str, Any]:
    """
    Create a standard success envelope.

    Args:
        data: The response data (can be dict, list, or any serializable type)

    Returns:
        Dictionary with success=True and data when given
    """
    response: Dict[str, Any] = {"success": True}

    if data is not None:
        response["data"] = data

    return response


def error_response(message: str) -> Dict[str, Any]:
    """Create a standard error envelope."""
    return {"success": False, "error": message}


def public_error_message(message: str, status_code: int) -> str:
    """Hide server-side error details from clients in production."""
    if status_code >= 500 and _production_check is not None and _production_check():
        return GENERIC_SERVER_ERROR
    return message


def json_success(
    data: Any = None,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """Build a success JSONResponse around the envelope."""
    return JSONResponse(
        status_code=status_code,
        content=success_response(data),
        headers=headers,
    )


def json_error(
    message: str,
    status_code: int = 400,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """
    Build an error JSONResponse around the envelope.

    Args:
        message: Human-readable error message
        status_code: HTTP status (default 400)
        headers: Optional response headers

    Returns:
        JSONResponse with success=False and the (possibly masked) message
    """
    return JSONResponse(
        status_code=status_code,
        content=error_response(public_error_message(message, status_code)),
        headers=headers,
    )
