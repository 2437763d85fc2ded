"""
Profile management service.

Reads and writes the `profiles` table and changes passwords through the
auth backend's admin API.
"""

import logging
from typing import Any, Dict, Optional

from common.auth import AuthBackendError, AuthProvider
from common.database import DatabaseError, SupabaseDatabase

from framebase.services.errors import ServiceError

logger = logging.getLogger(__name__)

# Columns that may be missing on older profile tables
OPTIONAL_COLUMNS = ("username", "avatar_url")


class ProfileService:
    """Profile lookup and updates for the signed-in user."""

    def __init__(self, db: SupabaseDatabase, auth_provider: AuthProvider):
        self._db = db
        self._auth = auth_provider

    async def fetch_profile(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Get the profile row, or None if the user has none yet."""
        try:
            return await self._db.select("profiles", {"id": user_id}, single=True)
        except DatabaseError as e:
            logger.warning(f"Profile lookup failed for {user_id}: {e}")
            raise ServiceError("Profile lookup failed.")

    async def update_profile(self, user_id: str, updates: Dict[str, str]) -> None:
        """
        Upsert profile fields.

        When the database rejects the write because of the username or
        avatar_url column, the write is retried once without those columns.

        Raises:
            ServiceError: If the write (and any retry) fails
        """
        if not updates:
            return

        try:
            await self._db.upsert("profiles", {"id": user_id, **updates}, on_conflict="id")
            return
        except DatabaseError as e:
            error_text = e.message.lower()
            retry = any(
                column in error_text and column in updates
                for column in OPTIONAL_COLUMNS
            )
            if not retry:
                logger.warning(f"Profile update failed for {user_id}: {e}")
                raise ServiceError("Profile update failed.")

        fallback = {k: v for k, v in updates.items() if k not in OPTIONAL_COLUMNS}
        if not fallback:
            raise ServiceError("Profile update failed.")

        logger.info(f"Retrying profile update for {user_id} without optional columns")
        try:
            await self._db.upsert("profiles", {"id": user_id, **fallback}, on_conflict="id")
        except DatabaseError as e:
            logger.warning(f"Profile update retry failed for {user_id}: {e}")
            raise ServiceError("Profile update failed.")

    async def verify_password(self, email: str, password: str) -> bool:
        """Check a password by signing in with it."""
        try:
            await self._auth.sign_in_with_password(email, password)
        except AuthBackendError:
            return False
        return True

    async def update_password(self, user_id: str, password: str) -> None:
        try:
            await self._auth.admin_update_user(user_id, password=password)
        except AuthBackendError as e:
            logger.warning(f"Password update failed for {user_id}: {e}")
            raise ServiceError("Password update failed.")
