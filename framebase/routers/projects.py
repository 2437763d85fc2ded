"""
Projects router.
"""

import logging

from fastapi import APIRouter, Depends, Request

from common.auth import AuthProvider
from common.database import SupabaseDatabase
from common.utils import RateLimiter, json_error, json_success

from framebase.dependencies import get_auth_provider, get_db, get_rate_limiter
from framebase.guards import require_auth, require_project_ownership
from framebase.middleware import log_request
from framebase.schemas import CreateProjectRequest, UpdateProjectRequest, parse_request
from framebase.services import ProjectService, ServiceError

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/projects")


@router.get("")
async def list_projects(
    request: Request,
    auth_provider: AuthProvider = Depends(get_auth_provider),
    db: SupabaseDatabase = Depends(get_db),
    limiter: RateLimiter = Depends(get_rate_limiter),
):
    """List the caller's projects, oldest first."""
    log_request(request)
    auth = await require_auth(request, auth_provider, limiter)
    if not auth.ok:
        return auth.response

    try:
        projects = await ProjectService(db).list_projects(auth.user_id)
    except ServiceError as e:
        return json_error(e.message, status_code=500)

    return json_success({"projects": projects})


@router.post("")
async def create_project(
    request: Request,
    auth_provider: AuthProvider = Depends(get_auth_provider),
    db: SupabaseDatabase = Depends(get_db),
    limiter: RateLimiter = Depends(get_rate_limiter),
):
    log_request(request)
    auth = await require_auth(request, auth_provider, limiter)
    if not auth.ok:
        return auth.response

    body = await parse_request(request, CreateProjectRequest)

    try:
        project = await ProjectService(db).create_project(
            user_id=auth.user_id,
            name=body.name.strip(),
            platform_type=body.platform_type,
        )
    except ServiceError as e:
        return json_error(e.message, status_code=400)

    return json_success({"project": project})


@router.patch("/{project_id}")
async def update_project(
    project_id: str,
    request: Request,
    auth_provider: AuthProvider = Depends(get_auth_provider),
    db: SupabaseDatabase = Depends(get_db),
    limiter: RateLimiter = Depends(get_rate_limiter),
):
    log_request(request)
    auth = await require_auth(request, auth_provider, limiter)
    if not auth.ok:
        return auth.response

    ownership = await require_project_ownership(db, auth.user_id, project_id)
    if not ownership.ok:
        return ownership.response

    body = await parse_request(request, UpdateProjectRequest)

    try:
        project = await ProjectService(db).update_project(
            project_id,
            name=body.name.strip() if body.name else None,
            platform_type=body.platform_type,
        )
    except ServiceError as e:
        return json_error(e.message, status_code=400)

    return json_success({"project": project})


@router.delete("/{project_id}")
async def delete_project(
    project_id: str,
    request: Request,
    auth_provider: AuthProvider = Depends(get_auth_provider),
    db: SupabaseDatabase = Depends(get_db),
    limiter: RateLimiter = Depends(get_rate_limiter),
):
    """Delete an owned project."""
    log_request(request)
    auth = await require_auth(request, auth_provider, limiter)
    if not auth.ok:
        return auth.response

    ownership = await require_project_ownership(db, auth.user_id, project_id)
    if not ownership.ok:
        return ownership.response

    try:
        await ProjectService(db).delete_project(project_id)
    except ServiceError as e:
        return json_error(e.message, status_code=500)

    return json_success({"deleted": True})
