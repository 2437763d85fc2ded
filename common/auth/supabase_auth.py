"""
Supabase (GoTrue) authentication provider.

Talks to the GoTrue REST API under <SUPABASE_URL>/auth/v1. User-scoped calls
use the anon key; admin calls use the service role key.

Example:
    auth = SupabaseAuth(
        url="https://xyz.supabase.co",
        anon_key="public-anon-key",
        service_role_key="service-role-key",
    )

    result = await auth.sign_in_with_password("user@example.com", "password123")
    print(result["session"]["access_token"])

    user = await auth.get_user(result["session"]["access_token"])
"""

import logging
from typing import Dict, Any, List, Optional

import httpx

from common.auth.base import AuthProvider, AuthBackendError

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response, fallback: str) -> str:
    """Pull the human-readable message out of a GoTrue error body."""
    try:
        data = response.json()
    except ValueError:
        return fallback

    if not isinstance(data, dict):
        return fallback

    for key in ("msg", "message", "error_description", "error"):
        value = data.get(key)
        if isinstance(value, str) and value:
            return value
    return fallback


class SupabaseAuth(AuthProvider):
    """
    GoTrue REST client.

    Handles:
    - Email/password sign up and sign in
    - Access token lookup
    - Password reset emails
    - Admin user updates and listing
    """

    def __init__(
        self,
        url: str,
        anon_key: str,
        service_role_key: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the Supabase auth provider.

        Args:
            url: Supabase project URL
            anon_key: Public anon key (user-scoped calls)
            service_role_key: Service role key (admin calls)
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        if not url or not anon_key:
            raise ValueError("SUPABASE_URL and SUPABASE_ANON_KEY are required for authentication")

        self._base_url = f"{url.rstrip('/')}/auth/v1"
        self._anon_key = anon_key
        self._service_role_key = service_role_key
        self._timeout = timeout
        self._transport = transport

    # ─────────────────────────────────────────────────────────────────
    # HTTP plumbing
    # ─────────────────────────────────────────────────────────────────

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )

    def _headers(self, bearer: Optional[str] = None) -> Dict[str, str]:
        return {
            "apikey": self._anon_key,
            "Authorization": f"Bearer {bearer or self._anon_key}",
            "Content-Type": "application/json",
        }

    def _admin_headers(self) -> Dict[str, str]:
        if not self._service_role_key:
            raise AuthBackendError("SUPABASE_SERVICE_ROLE_KEY is required for admin calls")
        return {
            "apikey": self._service_role_key,
            "Authorization": f"Bearer {self._service_role_key}",
            "Content-Type": "application/json",
        }

    async def _request(
        self,
        method: str,
        path: str,
        headers: Dict[str, str],
        fallback_error: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        async with self._client() as client:
            try:
                response = await client.request(
                    method,
                    path,
                    headers=headers,
                    json=json,
                    params=params,
                )
            except httpx.HTTPError as e:
                logger.warning(f"Auth backend unreachable ({method} {path}): {e}")
                raise AuthBackendError(fallback_error)

        if response.status_code >= 400:
            message = _error_message(response, fallback_error)
            logger.debug(f"Auth backend error {response.status_code} on {method} {path}: {message}")
            raise AuthBackendError(message, status_code=response.status_code)

        if not response.content:
            return None
        return response.json()

    @staticmethod
    def _split_session(data: Dict[str, Any]) -> Dict[str, Any]:
        """Normalize a GoTrue response into {"user", "session"}."""
        if data.get("access_token"):
            return {"user": data.get("user"), "session": data}
        # Confirmation pending: GoTrue returns the bare user
        return {"user": data if data.get("id") else None, "session": None}

    # ─────────────────────────────────────────────────────────────────
    # AuthProvider
    # ─────────────────────────────────────────────────────────────────

    async def sign_up(
        self,
        email: str,
        password: str,
        data: Optional[Dict[str, Any]] = None,
        redirect_to: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Create a user; the session is None when email confirmation is pending."""
        params = {"redirect_to": redirect_to} if redirect_to else None
        body = await self._request(
            "POST",
            "/signup",
            headers=self._headers(),
            fallback_error="Registration failed.",
            json={"email": email, "password": password, "data": data or {}},
            params=params,
        )
        return self._split_session(body or {})

    async def sign_in_with_password(
        self,
        email: str,
        password: str,
    ) -> Dict[str, Any]:
        """Exchange email/password for a session."""
        body = await self._request(
            "POST",
            "/token",
            headers=self._headers(),
            fallback_error="Invalid login credentials.",
            json={"email": email, "password": password},
            params={"grant_type": "password"},
        )
        return self._split_session(body or {})

    async def get_user(self, token: str) -> Optional[Dict[str, Any]]:
        """Return the user for an access token, or None if it is rejected."""
        if not token:
            return None
        try:
            user = await self._request(
                "GET",
                "/user",
                headers=self._headers(bearer=token),
                fallback_error="Unauthorized",
            )
        except AuthBackendError:
            return None
        if not user or not user.get("id"):
            return None
        return user

    async def reset_password_for_email(
        self,
        email: str,
        redirect_to: Optional[str] = None,
    ) -> None:
        """Trigger the reset email."""
        params = {"redirect_to": redirect_to} if redirect_to else None
        await self._request(
            "POST",
            "/recover",
            headers=self._headers(),
            fallback_error="Reset email failed.",
            json={"email": email},
            params=params,
        )

    async def admin_update_user(
        self,
        user_id: str,
        **attributes: Any,
    ) -> Dict[str, Any]:
        """Update a user through the admin API."""
        return await self._request(
            "PUT",
            f"/admin/users/{user_id}",
            headers=self._admin_headers(),
            fallback_error="User update failed.",
            json=attributes,
        ) or {}

    async def admin_list_users(
        self,
        page: int = 1,
        per_page: int = 200,
    ) -> List[Dict[str, Any]]:
        """List one page of users through the admin API."""
        body = await self._request(
            "GET",
            "/admin/users",
            headers=self._admin_headers(),
            fallback_error="User lookup failed.",
            params={"page": page, "per_page": per_page},
        )
        if isinstance(body, dict):
            return body.get("users") or []
        return body or []
