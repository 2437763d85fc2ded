"""
Framebase Routers.

API endpoints grouped by feature.
"""

from framebase.routers.auth import router as auth_router
from framebase.routers.profile import router as profile_router
from framebase.routers.projects import router as projects_router
from framebase.routers.pages import router as pages_router
from framebase.routers.export import router as export_router
from framebase.routers.ai import router as ai_router
from framebase.routers.payments import router as payments_router
from framebase.routers.site import router as site_router

__all__ = [
    "auth_router",
    "profile_router",
    "projects_router",
    "pages_router",
    "export_router",
    "ai_router",
    "payments_router",
    "site_router",
]
