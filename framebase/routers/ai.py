"""
AI generation router.
"""

import logging

from fastapi import APIRouter, Depends, Request

from common.ai import AIProvider
from common.auth import AuthProvider
from common.database import SupabaseDatabase
from common.utils import RateLimiter, build_rate_limit_key, json_error, json_success

from framebase.config import settings
from framebase.dependencies import get_ai_provider, get_auth_provider, get_db, get_rate_limiter
from framebase.guards import require_auth, require_project_ownership
from framebase.middleware import log_request
from framebase.schemas import AILayoutRequest, parse_request
from framebase.services import AIService, ServiceError

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/ai")


@router.post("/layout")
async def generate_layout(
    request: Request,
    auth_provider: AuthProvider = Depends(get_auth_provider),
    db: SupabaseDatabase = Depends(get_db),
    limiter: RateLimiter = Depends(get_rate_limiter),
):
    """
    Generate a layout outline from a prompt.

    Limited per user on top of the global limit. One provider call per
    request, no retries.
    """
    log_request(request)
    auth = await require_auth(request, auth_provider, limiter)
    if not auth.ok:
        return auth.response

    limit = limiter.check(
        build_rate_limit_key(["ai", "layout", auth.user_id]),
        limit=settings.AI_RATE_LIMIT,
        window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
    )
    if not limit.allowed:
        return json_error(
            "Rate limit exceeded.",
            status_code=429,
            headers={"Retry-After": str(limit.retry_after)},
        )

    body = await parse_request(request, AILayoutRequest)
    project_id = str(body.project_id) if body.project_id else None

    if project_id:
        ownership = await require_project_ownership(db, auth.user_id, project_id)
        if not ownership.ok:
            return ownership.response

    # Raises a 500 when OPENAI_API_KEY is not set
    provider: AIProvider = get_ai_provider()

    try:
        result = await AIService(provider, db).generate_layout(
            user_id=auth.user_id,
            prompt=body.prompt,
            context=body.context,
            project_id=project_id,
        )
    except ServiceError as e:
        return json_error(e.message, status_code=e.status_code or 500)

    return json_success(result)
