"""
Development request logging.
"""

import logging

from fastapi import Request

from framebase.config import settings

logger = logging.getLogger(__name__)


def log_request(request: Request) -> None:
    """Log "[api] METHOD /path" for a handled request, except in production."""
    if settings.is_production():
        return
    logger.info(f"[api] {request.method} {request.url.path}")
