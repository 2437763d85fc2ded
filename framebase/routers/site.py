"""
Landing page content router.
"""

from fastapi import APIRouter

from common.utils import success_response

from framebase.content import get_site_content

router = APIRouter(prefix="/site")


@router.get("/content")
async def site_content():
    """Public marketing copy for the landing page."""
    return success_response(get_site_content())
