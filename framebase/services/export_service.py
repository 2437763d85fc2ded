"""
Project export service.

Builds a downloadable archive of a project's pages, uploads it to storage
and hands back a short-lived signed URL.

Export types:
    html + zip  -> <Project>_Export_<timestamp>.zip (first page is index.html)
    json        -> <Project>_Export_<timestamp>.json ({"projectId", "pages"})
"""

import io
import json
import logging
import re
import zipfile
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple

from common.database import DatabaseError, SupabaseDatabase

from framebase.services.errors import ServiceError

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^a-z0-9]+", re.IGNORECASE)


def to_file_name(value: str, fallback: str) -> str:
    """
    Reduce a display name to letters, digits and underscores.

    Example:
        to_file_name("  My App: v2 ", "Project") -> "My_App_v2"
    """
    cleaned = _UNSAFE_CHARS.sub("_", (value or "").strip()).strip("_")
    return cleaned or fallback


def export_timestamp(now: datetime) -> str:
    """ISO-8601 UTC time with ':' and '.' replaced so it is path-safe."""
    now = now.astimezone(timezone.utc)
    stamp = now.strftime("%Y-%m-%dT%H:%M:%S") + f".{now.microsecond // 1000:03d}Z"
    return stamp.replace(":", "-").replace(".", "-")


def build_html_zip(pages: List[Dict[str, Any]]) -> bytes:
    """Zip the pages' HTML; the first page becomes index.html."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive:
        for index, page in enumerate(pages):
            fallback = f"page_{index + 1}"
            page_name = to_file_name(page.get("name") or fallback, fallback)
            file_name = "index.html" if index == 0 else f"{page_name}.html"
            archive.writestr(file_name, page.get("html_content") or "")
    return buffer.getvalue()


def build_json_export(project_id: str, pages: List[Dict[str, Any]]) -> bytes:
    payload = json.dumps({"projectId": project_id, "pages": pages}, indent=2)
    return payload.encode("utf-8")


class ExportService:
    """Creates project exports in object storage."""

    def __init__(
        self,
        db: SupabaseDatabase,
        bucket: str = "project-exports",
        url_expires_seconds: int = 60 * 10,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._db = db
        self._bucket = bucket
        self._expires = url_expires_seconds
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def _load_pages(self, project_id: str) -> List[Dict[str, Any]]:
        try:
            return await self._db.select(
                "pages",
                {"project_id": project_id},
                columns="id,name,html_content",
                order="order_index",
            ) or []
        except DatabaseError as e:
            logger.warning(f"Export page load failed for {project_id}: {e}")
            raise ServiceError("Failed to load pages.", status_code=500)

    def _render(
        self,
        project: Dict[str, Any],
        pages: List[Dict[str, Any]],
        export_type: str,
        export_format: str,
    ) -> Tuple[bytes, str, str]:
        """Return (file bytes, file name, content type)."""
        base_name = to_file_name(project.get("name") or "Project", "Project")
        timestamp = export_timestamp(self._clock())

        if export_type == "html" and export_format == "zip":
            return build_html_zip(pages), f"{base_name}_Export_{timestamp}.zip", "application/zip"

        if export_type == "json":
            data = build_json_export(project["id"], pages)
            return data, f"{base_name}_Export_{timestamp}.json", "application/json"

        raise ServiceError("Unsupported export type.", status_code=400)

    async def export_project(
        self,
        user_id: str,
        project: Dict[str, Any],
        export_type: str,
        export_format: str,
    ) -> Dict[str, str]:
        """
        Export an owned project.

        Args:
            user_id: Owner, used as the storage path prefix
            project: Project row (id and name)
            export_type: "html" or "json"
            export_format: "zip" or "json"

        Returns:
            {"url": signed download URL, "path": storage path}

        Raises:
            ServiceError: No pages, unsupported type, or storage failure
        """
        project_id = project["id"]
        pages = await self._load_pages(project_id)
        if not pages:
            raise ServiceError("No pages to export.", status_code=400)

        data, file_name, content_type = self._render(project, pages, export_type, export_format)
        path = f"{user_id}/{project_id}/{file_name}"

        try:
            await self._db.upload(self._bucket, path, data, content_type, upsert=True)
            url = await self._db.create_signed_url(self._bucket, path, expires_in=self._expires)
        except DatabaseError as e:
            logger.error(f"Export storage failed for {project_id}: {e}")
            raise ServiceError(e.message, status_code=400)

        try:
            await self._db.insert("exports", {
                "project_id": project_id,
                "export_type": export_type,
                "format": export_format,
                "file_path": path,
            })
        except DatabaseError as e:
            logger.warning(f"Export record failed for {project_id}: {e}")

        logger.info(f"Exported project {project_id} to {path}")
        return {"url": url, "path": path}
