"""
Access token extraction for incoming requests.

The token is read from the Authorization header first and falls back to the
session cookies set by the login/register endpoints.

Example:
    from common.auth import extract_token

    @app.get("/me")
    async def me(request: Request):
        token = extract_token(request)
"""

from typing import Dict, Optional, Sequence
from urllib.parse import unquote

from fastapi import Request

ACCESS_TOKEN_COOKIE = "sb-access-token"
REFRESH_TOKEN_COOKIE = "sb-refresh-token"
LEGACY_TOKEN_COOKIE = "supabase-auth-token"


def parse_cookies(cookie_header: Optional[str]) -> Dict[str, str]:
    """
    Parse a raw Cookie header into a dict.

    Values are URL-decoded; values containing '=' are kept whole.
    """
    cookies: Dict[str, str] = {}
    if not cookie_header:
        return cookies

    for chunk in cookie_header.split(";"):
        name, _, value = chunk.strip().partition("=")
        if not name:
            continue
        cookies[name] = unquote(value)

    return cookies


def extract_token(
    request: Request,
    scheme: str = "Bearer",
    cookie_names: Sequence[str] = (ACCESS_TOKEN_COOKIE, LEGACY_TOKEN_COOKIE),
) -> str:
    """
    Extract the access token from a request.

    Args:
        request: Incoming request
        scheme: Authorization scheme (matched case-insensitively)
        cookie_names: Cookies to try, in order, when the header is absent

    Returns:
        The token, or "" if none was supplied
    """
    header = request.headers.get("authorization")
    prefix = f"{scheme.lower()} "
    if header and header.lower().startswith(prefix):
        return header[len(prefix):].strip()

    cookies = parse_cookies(request.headers.get("cookie"))
    for name in cookie_names:
        if cookies.get(name):
            return cookies[name]

    return ""
