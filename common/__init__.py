"""
Common library for reusable infrastructure components.

This package provides generic modules that know nothing about Framebase:

- database: Supabase PostgREST tables and Storage over httpx
- auth: Supabase (GoTrue) auth provider and token extraction
- ai: Pluggable AI providers (OpenAI)
- utils: Response envelope, exceptions, rate limiting
- config: Base settings class
"""

from common.database import SupabaseDatabase, DatabaseError
from common.auth import AuthProvider, AuthBackendError, SupabaseAuth, extract_token
from common.ai import AIProvider, ChatResult, OpenAIProvider
from common.utils import (
    success_response,
    error_response,
    json_success,
    json_error,
    APIException,
    BadRequestException,
    RateLimiter,
)
from common.config import BaseAppSettings

__all__ = [
    # Database
    "SupabaseDatabase",
    "DatabaseError",
    # Auth
    "AuthProvider",
    "AuthBackendError",
    "SupabaseAuth",
    "extract_token",
    # AI
    "AIProvider",
    "ChatResult",
    "OpenAIProvider",
    # Utils
    "success_response",
    "error_response",
    "json_success",
    "json_error",
    "APIException",
    "BadRequestException",
    "RateLimiter",
    # Config
    "BaseAppSettings",
]
