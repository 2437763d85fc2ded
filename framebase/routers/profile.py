"""
Profile router.

Profile data lives in the `profiles` table; values missing there fall back
to the user metadata stored with the auth backend.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request

from common.auth import AuthProvider
from common.database import SupabaseDatabase
from common.utils import RateLimiter, json_error, json_success

from framebase.dependencies import get_auth_provider, get_db, get_rate_limiter
from framebase.guards import require_auth
from framebase.middleware import log_request
from framebase.schemas import ProfileUpdateRequest, parse_request
from framebase.services import ProfileService, ServiceError

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/profile")

PROFILE_FIELDS = ("full_name", "username", "avatar_url")


def _merge_profile(
    user: Dict[str, Any],
    profile: Optional[Dict[str, Any]],
    updates: Optional[Dict[str, str]] = None,
) -> Dict[str, str]:
    """Profile row first, then the values just written, then user metadata."""
    profile = profile or {}
    updates = updates or {}
    metadata = user.get("user_metadata") or {}

    merged = {}
    for field in PROFILE_FIELDS:
        value = profile.get(field)
        if value is None:
            value = updates.get(field)
        if value is None:
            value = metadata.get(field)
        merged[field] = value if value is not None else ""
    merged["email"] = user.get("email") or ""
    return merged


@router.get("")
async def get_profile(
    request: Request,
    auth_provider: AuthProvider = Depends(get_auth_provider),
    db: SupabaseDatabase = Depends(get_db),
    limiter: RateLimiter = Depends(get_rate_limiter),
):
    """Get the current user's profile."""
    log_request(request)
    auth = await require_auth(request, auth_provider, limiter)
    if not auth.ok:
        return auth.response

    service = ProfileService(db, auth_provider)
    try:
        profile = await service.fetch_profile(auth.user_id)
    except ServiceError as e:
        return json_error(e.message, status_code=500)

    return json_success({"profile": _merge_profile(auth.user, profile)})


@router.patch("")
async def update_profile(
    request: Request,
    auth_provider: AuthProvider = Depends(get_auth_provider),
    db: SupabaseDatabase = Depends(get_db),
    limiter: RateLimiter = Depends(get_rate_limiter),
):
    """
    Update profile fields and/or the password.

    Changing the password re-checks the current password first.
    """
    log_request(request)
    auth = await require_auth(request, auth_provider, limiter)
    if not auth.ok:
        return auth.response

    body = await parse_request(request, ProfileUpdateRequest)

    updates: Dict[str, str] = {}
    for field, value in (
        ("full_name", body.full_name),
        ("username", body.username),
        ("avatar_url", body.avatar_url),
    ):
        value = (value or "").strip()
        if value:
            updates[field] = value

    current_password = (body.current_password or "").strip()
    password = (body.password or "").strip()

    service = ProfileService(db, auth_provider)
    try:
        if updates:
            await service.update_profile(auth.user_id, updates)

        if password:
            email = auth.user.get("email")
            if not email:
                return json_error("Email is required to change password.", status_code=400)
            if not current_password:
                return json_error("Current password is required.", status_code=400)
            if not await service.verify_password(email, current_password):
                return json_error("Current password is incorrect.", status_code=400)
            await service.update_password(auth.user_id, password)
            logger.info(f"Password changed for user {auth.user_id}")

        profile = await service.fetch_profile(auth.user_id)
    except ServiceError as e:
        return json_error(e.message, status_code=400)

    return json_success({"profile": _merge_profile(auth.user, profile, updates)})
