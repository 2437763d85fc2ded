"""
Authentication router.

Registration, login and logout against the auth backend, with the session
mirrored into httpOnly cookies for the web client.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from common.auth import (
    ACCESS_TOKEN_COOKIE,
    REFRESH_TOKEN_COOKIE,
    AuthBackendError,
    AuthProvider,
)
from common.utils import RateLimiter, json_error, json_success

from framebase.config import settings
from framebase.dependencies import get_auth_provider, get_rate_limiter
from framebase.guards import require_auth
from framebase.middleware import log_request
from framebase.schemas import (
    ConfirmEmailRequest,
    LoginRequest,
    RegisterRequest,
    ResetPasswordRequest,
    parse_request,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth")


def _set_cookie(response: JSONResponse, name: str, value: str, max_age: Optional[int] = None) -> None:
    response.set_cookie(
        key=name,
        value=value,
        max_age=max_age,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.is_production(),
    )


def _session_response(data: Dict[str, Any], session: Optional[Dict[str, Any]]) -> JSONResponse:
    """Build the success response and set cookies for whichever tokens exist."""
    response = json_success(data)
    session = session or {}
    if session.get("access_token"):
        _set_cookie(response, ACCESS_TOKEN_COOKIE, session["access_token"])
    if session.get("refresh_token"):
        _set_cookie(response, REFRESH_TOKEN_COOKIE, session["refresh_token"])
    return response


# =============================================================================
# Registration / Login
# =============================================================================

@router.post("/register")
async def register(
    request: Request,
    auth_provider: AuthProvider = Depends(get_auth_provider),
):
    """
    Create an account.

    When the backend requires email confirmation no session is returned,
    no cookies are set and requiresEmailConfirmation is true.
    """
    log_request(request)
    body = await parse_request(request, RegisterRequest)

    try:
        result = await auth_provider.sign_up(
            email=body.email.strip().lower(),
            password=body.password,
            data={"full_name": body.full_name.strip()},
            redirect_to=settings.get_redirect_url(),
        )
    except AuthBackendError as e:
        logger.error(f"[auth] signup error: {e.message}")
        return json_error(e.message or "Registration failed.", status_code=400)

    user = result.get("user")
    session = result.get("session")
    if not user:
        return json_error("Registration failed.", status_code=400)

    return _session_response({
        "user": user,
        "accessToken": (session or {}).get("access_token"),
        "refreshToken": (session or {}).get("refresh_token"),
        "requiresEmailConfirmation": not session,
    }, session)


@router.post("/login")
async def login(
    request: Request,
    auth_provider: AuthProvider = Depends(get_auth_provider),
):
    """Sign in with email and password."""
    log_request(request)
    body = await parse_request(request, LoginRequest)

    try:
        result = await auth_provider.sign_in_with_password(
            email=body.email.strip().lower(),
            password=body.password,
        )
    except AuthBackendError as e:
        logger.error(f"[auth] login error: {e.message}")
        return json_error(e.message or "Invalid login credentials.", status_code=400)

    user = result.get("user")
    session = result.get("session")
    if not user:
        return json_error("Invalid login credentials.", status_code=400)

    return _session_response({
        "user": user,
        "accessToken": (session or {}).get("access_token"),
        "refreshToken": (session or {}).get("refresh_token"),
    }, session)


@router.post("/logout")
async def logout():
    """Clear the session cookies. Succeeds with or without a session."""
    response = json_success({"loggedOut": True})
    _set_cookie(response, ACCESS_TOKEN_COOKIE, "", max_age=0)
    _set_cookie(response, REFRESH_TOKEN_COOKIE, "", max_age=0)
    return response


@router.get("/me")
async def me(
    request: Request,
    auth_provider: AuthProvider = Depends(get_auth_provider),
    limiter: RateLimiter = Depends(get_rate_limiter),
):
    """Get the current user."""
    log_request(request)
    auth = await require_auth(request, auth_provider, limiter)
    if not auth.ok:
        return auth.response
    return json_success({"user": auth.user})


# =============================================================================
# Password reset / email confirmation
# =============================================================================

@router.post("/reset-password")
async def reset_password(
    request: Request,
    auth_provider: AuthProvider = Depends(get_auth_provider),
):
    """Send a password reset email."""
    log_request(request)
    body = await parse_request(request, ResetPasswordRequest)

    try:
        await auth_provider.reset_password_for_email(
            body.email,
            redirect_to=settings.get_redirect_url(),
        )
    except AuthBackendError as e:
        logger.warning(f"[auth] reset email failed: {e.message}")
        return json_error("Reset email failed.", status_code=400)
    except Exception as e:
        logger.warning(f"[auth] reset email error: {e}")
        return json_error(str(e) or "Reset email failed.", status_code=400)

    return json_success({"sent": True})


@router.post("/confirm-email")
async def confirm_email(
    request: Request,
    auth_provider: AuthProvider = Depends(get_auth_provider),
):
    """
    Mark a user's email as confirmed.

    Development helper; always 403 in production.
    """
    log_request(request)
    if settings.is_production():
        return json_error("Not available in production.", status_code=403)

    body = await parse_request(request, ConfirmEmailRequest)
    email = body.email.strip().lower()

    try:
        users = await auth_provider.admin_list_users(page=1, per_page=200)
    except AuthBackendError as e:
        return json_error(e.message or "User lookup failed.", status_code=500)

    user = next(
        (entry for entry in users if (entry.get("email") or "").lower() == email),
        None,
    )
    if not user:
        return json_error("User not found.", status_code=404)

    if user.get("email_confirmed_at"):
        return json_success({"confirmed": True})

    try:
        await auth_provider.admin_update_user(user["id"], email_confirm=True)
    except AuthBackendError as e:
        return json_error(e.message or "Email confirmation failed.", status_code=500)

    logger.info(f"Confirmed email for user {user['id']}")
    return json_success({"confirmed": True})
