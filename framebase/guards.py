"""
Request guards for protected endpoints.

Each guard returns a tagged result instead of raising. On failure the result
carries a ready-made response which the handler must return unchanged:

    auth = await require_auth(request, auth_provider)
    if not auth.ok:
        return auth.response
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from fastapi import Request
from fastapi.responses import JSONResponse

from common.auth import AuthProvider, extract_token
from common.database import DatabaseError, SupabaseDatabase
from common.utils import RateLimiter, build_rate_limit_key, json_error, rate_limiter

from framebase.config import settings

logger = logging.getLogger(__name__)


@dataclass
class AuthSuccess:
    """Caller is authenticated."""
    user: Dict[str, Any]
    token: str
    ok: bool = field(default=True, init=False)

    @property
    def user_id(self) -> str:
        return self.user["id"]


@dataclass
class OwnershipSuccess:
    """Caller owns the requested record."""
    record: Dict[str, Any]
    ok: bool = field(default=True, init=False)


@dataclass
class GuardFailure:
    """Guard rejected the request; return `response` as-is."""
    response: JSONResponse
    ok: bool = field(default=False, init=False)


AuthResult = Union[AuthSuccess, GuardFailure]
OwnershipResult = Union[OwnershipSuccess, GuardFailure]


def _unauthorized() -> GuardFailure:
    return GuardFailure(json_error("Unauthorized", status_code=401))


async def require_auth(
    request: Request,
    auth_provider: AuthProvider,
    limiter: Optional[RateLimiter] = None,
) -> AuthResult:
    """
    Resolve the caller's session through the auth backend.

    Args:
        request: Incoming request (Authorization header or session cookie)
        auth_provider: Backend used to look the token up
        limiter: Rate limiter for the per-user global limit

    Returns:
        AuthSuccess with the backend's user, or GuardFailure with a 401/429
    """
    token = extract_token(request)
    if not token:
        return _unauthorized()

    user = await auth_provider.get_user(token)
    if not user:
        return _unauthorized()

    limiter = limiter or rate_limiter
    result = limiter.check(
        build_rate_limit_key(["global", user.get("id")]),
        limit=settings.GLOBAL_RATE_LIMIT,
        window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
    )
    if not result.allowed:
        return GuardFailure(json_error(
            "Rate limit exceeded.",
            status_code=429,
            headers={"Retry-After": str(result.retry_after)},
        ))

    return AuthSuccess(user=user, token=token)


async def require_project_ownership(
    db: SupabaseDatabase,
    user_id: str,
    project_id: str,
) -> OwnershipResult:
    """Check that project_id exists and belongs to user_id."""
    try:
        project = await db.select(
            "projects",
            {"id": project_id},
            columns="id,user_id,name",
            single=True,
        )
    except DatabaseError as e:
        logger.warning(f"Project lookup failed for {project_id}: {e}")
        return GuardFailure(json_error("Project lookup failed", status_code=500))

    if not project or project.get("user_id") != user_id:
        return GuardFailure(json_error("Project not found", status_code=404))

    return OwnershipSuccess(record=project)


async def require_page_ownership(
    db: SupabaseDatabase,
    user_id: str,
    page_id: str,
) -> OwnershipResult:
    """Check that page_id exists and its project belongs to user_id."""
    try:
        page = await db.select(
            "pages",
            {"id": page_id},
            columns="id,project_id,projects(user_id)",
            single=True,
        )
    except DatabaseError as e:
        logger.warning(f"Page lookup failed for {page_id}: {e}")
        return GuardFailure(json_error("Page lookup failed", status_code=500))

    owner_id = ((page or {}).get("projects") or {}).get("user_id")
    if not page or not owner_id or owner_id != user_id:
        return GuardFailure(json_error("Page not found", status_code=404))

    return OwnershipSuccess(record=page)
