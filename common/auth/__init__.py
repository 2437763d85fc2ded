"""
Authentication module - Hosted auth backend (Supabase) and token extraction.
"""

from common.auth.base import AuthProvider, AuthBackendError
from common.auth.supabase_auth import SupabaseAuth
from common.auth.dependencies import (
    extract_token,
    parse_cookies,
    ACCESS_TOKEN_COOKIE,
    REFRESH_TOKEN_COOKIE,
)

__all__ = [
    "AuthProvider",
    "AuthBackendError",
    "SupabaseAuth",
    "extract_token",
    "parse_cookies",
    "ACCESS_TOKEN_COOKIE",
    "REFRESH_TOKEN_COOKIE",
]
