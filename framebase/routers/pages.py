"""
Pages router.

Pages are listed and created under their project and edited by id.
HTML content is sanitized before it is stored.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from common.auth import AuthProvider
from common.database import SupabaseDatabase
from common.utils import RateLimiter, json_error, json_success

from framebase.dependencies import get_auth_provider, get_db, get_rate_limiter
from framebase.guards import require_auth, require_page_ownership, require_project_ownership
from framebase.middleware import log_request
from framebase.sanitize import sanitize_workspace_html
from framebase.schemas import CreatePageRequest, UpdatePageRequest, parse_request
from framebase.services import PageService, ServiceError

logger = logging.getLogger(__name__)
router = APIRouter()


# =============================================================================
# /projects/{project_id}/pages
# =============================================================================

@router.get("/projects/{project_id}/pages")
async def list_pages(
    project_id: str,
    request: Request,
    auth_provider: AuthProvider = Depends(get_auth_provider),
    db: SupabaseDatabase = Depends(get_db),
    limiter: RateLimiter = Depends(get_rate_limiter),
):
    """List a project's pages in order."""
    log_request(request)
    auth = await require_auth(request, auth_provider, limiter)
    if not auth.ok:
        return auth.response

    ownership = await require_project_ownership(db, auth.user_id, project_id)
    if not ownership.ok:
        return ownership.response

    try:
        pages = await PageService(db).list_pages(project_id)
    except ServiceError as e:
        return json_error(e.message, status_code=500)

    return json_success({"pages": pages})


@router.post("/projects/{project_id}/pages")
async def create_page(
    project_id: str,
    request: Request,
    auth_provider: AuthProvider = Depends(get_auth_provider),
    db: SupabaseDatabase = Depends(get_db),
    limiter: RateLimiter = Depends(get_rate_limiter),
):
    """Add a page to a project."""
    log_request(request)
    auth = await require_auth(request, auth_provider, limiter)
    if not auth.ok:
        return auth.response

    ownership = await require_project_ownership(db, auth.user_id, project_id)
    if not ownership.ok:
        return ownership.response

    body = await parse_request(request, CreatePageRequest)
    html = sanitize_workspace_html(body.html_content) if body.html_content is not None else None

    try:
        page = await PageService(db).create_page(
            project_id=project_id,
            name=body.name.strip(),
            slug=body.slug,
            order_index=body.order_index,
            html_content=html,
            metadata=body.metadata,
        )
    except ServiceError as e:
        return json_error(e.message, status_code=400)

    return json_success({"page": page})


# =============================================================================
# /pages/{page_id}
# =============================================================================

@router.patch("/pages/{page_id}")
async def update_page(
    page_id: str,
    request: Request,
    auth_provider: AuthProvider = Depends(get_auth_provider),
    db: SupabaseDatabase = Depends(get_db),
    limiter: RateLimiter = Depends(get_rate_limiter),
):
    """Edit a page. Fields that are omitted or null keep their value."""
    log_request(request)
    auth = await require_auth(request, auth_provider, limiter)
    if not auth.ok:
        return auth.response

    ownership = await require_page_ownership(db, auth.user_id, page_id)
    if not ownership.ok:
        return ownership.response

    body = await parse_request(request, UpdatePageRequest)

    changes: Dict[str, Any] = {}
    if body.slug is not None:
        changes["slug"] = body.slug
    if body.order_index is not None:
        changes["order_index"] = body.order_index
    if body.html_content is not None:
        changes["html_content"] = sanitize_workspace_html(body.html_content)
    if body.metadata is not None:
        changes["metadata"] = body.metadata

    try:
        page = await PageService(db).update_page(
            page_id,
            name=body.name.strip() if body.name else None,
            **changes,
        )
    except ServiceError as e:
        return json_error(e.message, status_code=400)

    return json_success({"page": page})


@router.delete("/pages/{page_id}")
async def delete_page(
    page_id: str,
    request: Request,
    auth_provider: AuthProvider = Depends(get_auth_provider),
    db: SupabaseDatabase = Depends(get_db),
    limiter: RateLimiter = Depends(get_rate_limiter),
):
    log_request(request)
    auth = await require_auth(request, auth_provider, limiter)
    if not auth.ok:
        return auth.response

    ownership = await require_page_ownership(db, auth.user_id, page_id)
    if not ownership.ok:
        return ownership.response

    try:
        await PageService(db).delete_page(page_id)
    except ServiceError as e:
        return json_error(e.message, status_code=500)

    return json_success({"deleted": True})
