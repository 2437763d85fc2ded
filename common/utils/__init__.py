"""
Utilities module - Response envelope, exceptions, rate limiting.
"""

from common.utils.responses import (
    success_response,
    error_response,
    json_success,
    json_error,
    configure_responses,
    public_error_message,
    GENERIC_SERVER_ERROR,
)
from common.utils.exceptions import (
    APIException,
    BadRequestException,
    InternalServerException,
    ServiceUnavailableException,
)
from common.utils.rate_limit import RateLimiter, RateLimitResult, build_rate_limit_key, rate_limiter

__all__ = [
    "success_response",
    "error_response",
    "json_success",
    "json_error",
    "configure_responses",
    "public_error_message",
    "GENERIC_SERVER_ERROR",
    "APIException",
    "BadRequestException",
    "InternalServerException",
    "ServiceUnavailableException",
    "RateLimiter",
    "RateLimitResult",
    "build_rate_limit_key",
    "rate_limiter",
]
