"""
Export router.
"""

import logging

from fastapi import APIRouter, Depends, Request

from common.auth import AuthProvider
from common.database import SupabaseDatabase
from common.utils import RateLimiter, json_error, json_success

from framebase.config import settings
from framebase.dependencies import get_auth_provider, get_db, get_rate_limiter
from framebase.guards import require_auth, require_project_ownership
from framebase.middleware import log_request
from framebase.schemas import ExportRequest, parse_request
from framebase.services import ExportService, ServiceError

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/export")


@router.post("")
async def export_project(
    request: Request,
    auth_provider: AuthProvider = Depends(get_auth_provider),
    db: SupabaseDatabase = Depends(get_db),
    limiter: RateLimiter = Depends(get_rate_limiter),
):
    """
    Export an owned project and return a signed download URL.

    Body: {"project_id": uuid, "export_type": "html" | "json", "format": "zip" | "json"}
    """
    log_request(request)
    auth = await require_auth(request, auth_provider, limiter)
    if not auth.ok:
        return auth.response

    body = await parse_request(request, ExportRequest)
    project_id = str(body.project_id)

    ownership = await require_project_ownership(db, auth.user_id, project_id)
    if not ownership.ok:
        return ownership.response

    service = ExportService(
        db,
        bucket=settings.EXPORT_BUCKET,
        url_expires_seconds=settings.EXPORT_URL_EXPIRES_SECONDS,
    )
    try:
        result = await service.export_project(
            user_id=auth.user_id,
            project=ownership.record,
            export_type=body.export_type,
            export_format=body.format,
        )
    except ServiceError as e:
        return json_error(e.message, status_code=e.status_code or 400)

    return json_success(result)
