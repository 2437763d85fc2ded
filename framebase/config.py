"""
Framebase application settings.

Extends the base settings with Framebase-specific configuration.
"""

from typing import Optional
from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """Framebase-specific settings."""

    # ==========================================================================
    # Frontend URL (password reset / sign-up confirmation redirects)
    # ==========================================================================
    FRONTEND_URL: Optional[str] = None

    # ==========================================================================
    # Rate limits (requests per window)
    # ==========================================================================
    GLOBAL_RATE_LIMIT: int = 120
    AI_RATE_LIMIT: int = 10
    RATE_LIMIT_WINDOW_SECONDS: int = 60

    # ==========================================================================
    # Exports
    # ==========================================================================
    EXPORT_BUCKET: str = "project-exports"
    EXPORT_URL_EXPIRES_SECONDS: int = 60 * 10

    def get_redirect_url(self) -> Optional[str]:
        """FRONTEND_URL, or None when unset/blank."""
        return self.FRONTEND_URL or None


# Global settings instance
settings = Settings()
