"""
Abstract authentication provider interface.

Defines the contract for a hosted auth backend that owns users, sessions
and tokens. The application never issues or verifies tokens itself; it
forwards them to the provider.

Example:
    from common.auth import AuthProvider, SupabaseAuth

    def get_auth_provider(settings) -> AuthProvider:
        return SupabaseAuth(
            url=settings.SUPABASE_URL,
            anon_key=settings.SUPABASE_ANON_KEY,
            service_role_key=settings.SUPABASE_SERVICE_ROLE_KEY,
        )
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any, List


class AuthBackendError(ValueError):
    """
    Raised when the auth backend rejects a request.

    Attributes:
        message: Message reported by the backend
        status_code: HTTP status returned by the backend (if any)
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AuthProvider(ABC):
    """
    Abstract authentication provider.

    All methods are async. Failures raise AuthBackendError unless noted.
    """

    @abstractmethod
    async def sign_up(
        self,
        email: str,
        password: str,
        data: Optional[Dict[str, Any]] = None,
        redirect_to: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Create a new user account.

        Args:
            email: User's email address
            password: User's password
            data: Extra user metadata (e.g. full_name)
            redirect_to: Where the confirmation email should send the user

        Returns:
            {"user": {...}, "session": {...} or None}. The session is None
            when the backend requires email confirmation first.
        """
        pass

    @abstractmethod
    async def sign_in_with_password(
        self,
        email: str,
        password: str,
    ) -> Dict[str, Any]:
        """
        Verify email and password credentials.

        Returns:
            {"user": {...}, "session": {...}}
        """
        pass

    @abstractmethod
    async def get_user(self, token: str) -> Optional[Dict[str, Any]]:
        """
        Resolve the user behind an access token.

        Returns:
            The user dict, or None if the token is missing, invalid or expired
        """
        pass

    @abstractmethod
    async def reset_password_for_email(
        self,
        email: str,
        redirect_to: Optional[str] = None,
    ) -> None:
        """Ask the backend to send a password reset email."""
        pass

    @abstractmethod
    async def admin_update_user(
        self,
        user_id: str,
        **attributes: Any,
    ) -> Dict[str, Any]:
        """
        Update a user with elevated privileges (password, email_confirm, ...).

        Returns:
            The updated user dict
        """
        pass

    @abstractmethod
    async def admin_list_users(
        self,
        page: int = 1,
        per_page: int = 200,
    ) -> List[Dict[str, Any]]:
        """List users with elevated privileges."""
        pass
