"""
Supabase database and storage client (PostgREST + Storage REST APIs).

Holds one pooled httpx client for the life of the application. Every call
uses the service role key, so row ownership must be checked by the caller.

Example:
    from common.database import SupabaseDatabase

    db = SupabaseDatabase()
    await db.connect(url="https://xyz.supabase.co", service_role_key="...")

    projects = await db.select("projects", {"user_id": user_id}, order="created_at")
    project = await db.insert("projects", {"user_id": user_id, "name": "Site"})

    await db.upload("project-exports", "u/p/file.zip", data, "application/zip")
    url = await db.create_signed_url("project-exports", "u/p/file.zip")
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

Filters = Optional[Dict[str, Any]]

# ─────────────────────────────────────────────────────────────────
# Singleton database instance
# ─────────────────────────────────────────────────────────────────

_database: Optional["SupabaseDatabase"] = None


class DatabaseError(ValueError):
    """
    Raised when PostgREST or Storage rejects a request.

    Attributes:
        message: Message reported by the backend
        status_code: HTTP status returned by the backend (if any)
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _format_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _filter_params(filters: Filters) -> Dict[str, str]:
    """Turn {column: value} into PostgREST equality filters."""
    params: Dict[str, str] = {}
    for column, value in (filters or {}).items():
        operator = "is" if value is None else "eq"
        params[column] = f"{operator}.{_format_value(value)}"
    return params


class SupabaseDatabase:
    """Supabase PostgREST/Storage connection manager."""

    def __init__(self):
        self._client: Optional[httpx.AsyncClient] = None
        self._url: Optional[str] = None

    async def connect(
        self,
        url: str,
        service_role_key: str,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Open the pooled HTTP client.

        Args:
            url: Supabase project URL
            service_role_key: Service role key
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        if not url or not service_role_key:
            raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY are required for the database")

        self._url = url.rstrip("/")
        logger.info(f"Connecting to Supabase: {self._url}")

        self._client = httpx.AsyncClient(
            base_url=self._url,
            timeout=timeout,
            transport=transport,
            headers={
                "apikey": service_role_key,
                "Authorization": f"Bearer {service_role_key}",
            },
        )

    async def disconnect(self) -> None:
        """Close the HTTP client."""
        if self._client:
            logger.info(f"Disconnecting from Supabase: {self._url}")
            await self._client.aclose()
            self._client = None

    @property
    def is_connected(self) -> bool:
        """Check if the client is open."""
        return self._client is not None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get the underlying httpx client."""
        if not self._client:
            raise RuntimeError("Database not connected")
        return self._client

    # ─────────────────────────────────────────────────────────────────
    # HTTP plumbing
    # ─────────────────────────────────────────────────────────────────

    async def _send(
        self,
        method: str,
        path: str,
        fallback_error: str,
        **kwargs: Any,
    ) -> httpx.Response:
        try:
            response = await self.client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.warning(f"Supabase unreachable ({method} {path}): {e}")
            raise DatabaseError(fallback_error)

        if response.status_code >= 400:
            message = fallback_error
            try:
                body = response.json()
                if isinstance(body, dict):
                    message = body.get("message") or body.get("error") or fallback_error
            except ValueError:
                pass
            logger.warning(f"Supabase error {response.status_code} on {method} {path}: {message}")
            raise DatabaseError(message, status_code=response.status_code)

        return response

    @staticmethod
    def _rows(response: httpx.Response) -> List[Dict[str, Any]]:
        if not response.content:
            return []
        data = response.json()
        if isinstance(data, list):
            return data
        return [data] if data else []

    # ─────────────────────────────────────────────────────────────────
    # Tables (PostgREST)
    # ─────────────────────────────────────────────────────────────────

    async def select(
        self,
        table: str,
        filters: Filters = None,
        columns: str = "*",
        order: Optional[str] = None,
        ascending: bool = True,
        single: bool = False,
    ) -> Any:
        """
        Select rows.

        Args:
            table: Table name
            filters: {column: value} equality filters
            columns: PostgREST select list (embedded resources allowed)
            order: Column to order by
            ascending: Sort direction
            single: Return the first row or None instead of a list

        Returns:
            List of rows, or one row/None when single=True
        """
        params = {"select": columns, **_filter_params(filters)}
        if order:
            params["order"] = f"{order}.{'asc' if ascending else 'desc'}"
        if single:
            params["limit"] = "1"

        response = await self._send("GET", f"/rest/v1/{table}", f"Failed to load {table}.", params=params)
        rows = self._rows(response)

        if single:
            return rows[0] if rows else None
        return rows

    async def insert(self, table: str, row: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Insert one row and return it."""
        response = await self._send(
            "POST",
            f"/rest/v1/{table}",
            f"Failed to insert into {table}.",
            json=row,
            headers={"Prefer": "return=representation"},
        )
        rows = self._rows(response)
        return rows[0] if rows else None

    async def update(
        self,
        table: str,
        filters: Filters,
        values: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """Update matching rows and return the first updated row."""
        response = await self._send(
            "PATCH",
            f"/rest/v1/{table}",
            f"Failed to update {table}.",
            params=_filter_params(filters),
            json=values,
            headers={"Prefer": "return=representation"},
        )
        rows = self._rows(response)
        return rows[0] if rows else None

    async def upsert(
        self,
        table: str,
        row: Dict[str, Any],
        on_conflict: str = "id",
    ) -> Optional[Dict[str, Any]]:
        """Insert or merge one row on the conflict column."""
        response = await self._send(
            "POST",
            f"/rest/v1/{table}",
            f"Failed to upsert into {table}.",
            params={"on_conflict": on_conflict},
            json=row,
            headers={"Prefer": "resolution=merge-duplicates,return=representation"},
        )
        rows = self._rows(response)
        return rows[0] if rows else None

    async def delete(self, table: str, filters: Filters) -> None:
        """Delete matching rows."""
        await self._send(
            "DELETE",
            f"/rest/v1/{table}",
            f"Failed to delete from {table}.",
            params=_filter_params(filters),
        )

    # ─────────────────────────────────────────────────────────────────
    # Storage
    # ─────────────────────────────────────────────────────────────────

    async def upload(
        self,
        bucket: str,
        path: str,
        data: bytes,
        content_type: str,
        upsert: bool = False,
    ) -> Dict[str, str]:
        """Upload an object to a storage bucket."""
        try:
            await self._send(
                "POST",
                f"/storage/v1/object/{bucket}/{path}",
                "Upload failed.",
                content=data,
                headers={
                    "Content-Type": content_type,
                    "x-upsert": "true" if upsert else "false",
                },
            )
        except DatabaseError as e:
            raise DatabaseError(f"Upload failed: {e.message}", status_code=e.status_code)
        return {"bucket": bucket, "path": path}

    async def create_signed_url(
        self,
        bucket: str,
        path: str,
        expires_in: int = 60 * 10,
    ) -> str:
        """Create a time-limited download URL for an object."""
        try:
            response = await self._send(
                "POST",
                f"/storage/v1/object/sign/{bucket}/{path}",
                "Signed URL failed.",
                json={"expiresIn": expires_in},
            )
        except DatabaseError as e:
            raise DatabaseError(f"Signed URL failed: {e.message}", status_code=e.status_code)

        signed = (response.json() or {}).get("signedURL")
        if not signed:
            raise DatabaseError("Signed URL failed: Unknown error")
        if signed.startswith("http"):
            return signed
        return f"{self._url}/storage/v1{signed}"


def set_database(db: SupabaseDatabase) -> None:
    """Register the application-wide database instance."""
    global _database
    _database = db


def get_database() -> SupabaseDatabase:
    """Get the application-wide database instance."""
    if _database is None:
        raise RuntimeError("Database not initialized. Call set_database() first.")
    return _database
