"""
Page CRUD service.

HTML is expected to be sanitized before it reaches this service.
"""

import logging
from typing import Any, Dict, List, Optional

from common.database import DatabaseError, SupabaseDatabase

from framebase.services.errors import ServiceError

logger = logging.getLogger(__name__)

# Sentinel for "field not provided" where None is a meaningful value
UNSET: Any = object()


class PageService:
    """Pages belonging to a project."""

    def __init__(self, db: SupabaseDatabase):
        self._db = db

    async def list_pages(self, project_id: str) -> List[Dict[str, Any]]:
        """Get a project's pages in display order."""
        try:
            return await self._db.select(
                "pages",
                {"project_id": project_id},
                order="order_index",
            ) or []
        except DatabaseError as e:
            logger.warning(f"Page list failed for project {project_id}: {e}")
            raise ServiceError("Failed to load pages.")

    async def create_page(
        self,
        project_id: str,
        name: str,
        slug: Optional[str] = None,
        order_index: Optional[int] = None,
        html_content: Optional[str] = None,
        metadata: Any = None,
    ) -> Dict[str, Any]:
        try:
            page = await self._db.insert("pages", {
                "project_id": project_id,
                "name": name,
                "slug": slug or None,
                "order_index": order_index,
                "html_content": html_content,
                "metadata": metadata,
            })
        except DatabaseError as e:
            logger.warning(f"Page creation failed for project {project_id}: {e}")
            page = None

        if not page:
            raise ServiceError("Page creation failed.")
        return page

    async def update_page(
        self,
        page_id: str,
        name: Optional[str] = None,
        slug: Any = UNSET,
        order_index: Any = UNSET,
        html_content: Any = UNSET,
        metadata: Any = UNSET,
    ) -> Dict[str, Any]:
        """
        Update a page.

        Only fields that are passed are written. An empty name leaves the
        name unchanged.
        """
        values: Dict[str, Any] = {}
        if name:
            values["name"] = name
        for column, value in (
            ("slug", slug),
            ("order_index", order_index),
            ("html_content", html_content),
            ("metadata", metadata),
        ):
            if value is not UNSET:
                values[column] = value

        try:
            page = await self._db.update("pages", {"id": page_id}, values)
        except DatabaseError as e:
            logger.warning(f"Page update failed for {page_id}: {e}")
            page = None

        if not page:
            raise ServiceError("Page update failed.")
        return page

    async def delete_page(self, page_id: str) -> bool:
        try:
            await self._db.delete("pages", {"id": page_id})
        except DatabaseError as e:
            logger.warning(f"Page delete failed for {page_id}: {e}")
            raise ServiceError("Failed to delete page.")
        return True
