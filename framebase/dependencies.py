"""
FastAPI dependencies for Framebase.

Provides dependency injection for the backend clients. Tests replace any of
these through app.dependency_overrides.
"""

import logging
from typing import Optional

from common.ai import OpenAIProvider
from common.auth import AuthProvider, SupabaseAuth
from common.database import SupabaseDatabase, get_database
from common.utils import (
    InternalServerException,
    RateLimiter,
    ServiceUnavailableException,
    rate_limiter,
)

from framebase.ai import AIConfigurationError, get_openai_client
from framebase.config import settings

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────
# Global service instances
# ─────────────────────────────────────────────────────────────────

_auth_provider: Optional[AuthProvider] = None


def init_auth_provider(provider: Optional[AuthProvider] = None) -> AuthProvider:
    """
    Set up the auth provider.

    Builds a SupabaseAuth from settings unless a provider is passed in.
    """
    global _auth_provider

    if provider is None:
        provider = SupabaseAuth(
            url=settings.SUPABASE_URL,
            anon_key=settings.SUPABASE_ANON_KEY,
            service_role_key=settings.SUPABASE_SERVICE_ROLE_KEY,
        )

    _auth_provider = provider
    return provider


def reset_auth_provider() -> None:
    """Forget the auth provider (test isolation)."""
    global _auth_provider
    _auth_provider = None


# ─────────────────────────────────────────────────────────────────
# Dependency getters
# ─────────────────────────────────────────────────────────────────

def get_auth_provider() -> AuthProvider:
    """Get the auth provider, creating it from settings on first use."""
    if _auth_provider is None:
        try:
            return init_auth_provider()
        except ValueError as e:
            logger.error(f"Auth provider unavailable: {e}")
            raise ServiceUnavailableException("Authentication service is not configured.")
    return _auth_provider


def get_db() -> SupabaseDatabase:
    """Get the connected database client."""
    try:
        return get_database()
    except RuntimeError as e:
        logger.error(f"Database unavailable: {e}")
        raise ServiceUnavailableException("Database is not configured.")


def get_rate_limiter() -> RateLimiter:
    """Get the process-wide rate limiter."""
    return rate_limiter


def get_ai_provider() -> OpenAIProvider:
    """Get an OpenAI provider backed by the shared client."""
    try:
        client = get_openai_client()
    except AIConfigurationError as e:
        logger.error(f"AI provider unavailable: {e}")
        raise InternalServerException(str(e))
    return OpenAIProvider(client=client, model=settings.AI_MODEL)
