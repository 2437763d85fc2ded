"""
Project CRUD service.
"""

import logging
from typing import Any, Dict, List, Optional

from common.database import DatabaseError, SupabaseDatabase

from framebase.services.errors import ServiceError

logger = logging.getLogger(__name__)


class ProjectService:
    """Projects owned by a user. Ownership is checked by the caller."""

    def __init__(self, db: SupabaseDatabase):
        self._db = db

    async def list_projects(self, user_id: str) -> List[Dict[str, Any]]:
        try:
            return await self._db.select(
                "projects",
                {"user_id": user_id},
                order="created_at",
            ) or []
        except DatabaseError as e:
            logger.warning(f"Project list failed for {user_id}: {e}")
            raise ServiceError("Failed to load projects.")

    async def create_project(
        self,
        user_id: str,
        name: str,
        platform_type: Optional[str] = None,
    ) -> Dict[str, Any]:
        try:
            project = await self._db.insert("projects", {
                "user_id": user_id,
                "name": name,
                "platform_type": platform_type or None,
            })
        except DatabaseError as e:
            logger.warning(f"Project creation failed for {user_id}: {e}")
            project = None

        if not project:
            raise ServiceError("Project creation failed.")

        logger.info(f"Project {project.get('id')} created for {user_id}")
        return project

    async def update_project(
        self,
        project_id: str,
        name: Optional[str] = None,
        platform_type: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Change name and/or platform; fields left as None are untouched."""
        values: Dict[str, Any] = {}
        if name:
            values["name"] = name
        if platform_type is not None:
            values["platform_type"] = platform_type

        try:
            project = await self._db.update("projects", {"id": project_id}, values)
        except DatabaseError as e:
            logger.warning(f"Project update failed for {project_id}: {e}")
            project = None

        if not project:
            raise ServiceError("Project update failed.")
        return project

    async def delete_project(self, project_id: str) -> bool:
        try:
            await self._db.delete("projects", {"id": project_id})
        except DatabaseError as e:
            logger.warning(f"Project delete failed for {project_id}: {e}")
            raise ServiceError("Failed to delete project.")

        logger.info(f"Project {project_id} deleted")
        return True
