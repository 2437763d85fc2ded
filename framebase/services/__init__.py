"""Framebase services."""

from framebase.services.errors import ServiceError
from framebase.services.profile_service import ProfileService
from framebase.services.project_service import ProjectService
from framebase.services.page_service import PageService, UNSET
from framebase.services.export_service import ExportService, to_file_name
from framebase.services.ai_service import AIService

__all__ = [
    "ServiceError",
    "ProfileService",
    "ProjectService",
    "PageService",
    "UNSET",
    "ExportService",
    "to_file_name",
    "AIService",
]
