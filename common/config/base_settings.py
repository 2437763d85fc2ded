"""
Environment-driven settings shared by every app built on common/.

Values come from process environment variables first, then a local .env
file. Apps subclass BaseAppSettings to add their own keys.

Example:
    from common.config import BaseAppSettings

    class Settings(BaseAppSettings):
        FRONTEND_URL: str = ""

    settings = Settings()
    if settings.supabase_configured():
        ...
"""

from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseAppSettings(BaseSettings):
    """
    Backend credentials, server options and environment flags.

    Every backend key is optional so the app can boot without them; the
    endpoints that need a backend answer 503 until it is configured.
    """

    # ==========================================================================
    # Supabase (auth, PostgREST, storage)
    # ==========================================================================
    SUPABASE_URL: Optional[str] = None
    SUPABASE_ANON_KEY: Optional[str] = None
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = None

    # ==========================================================================
    # OpenAI
    # ==========================================================================
    OPENAI_API_KEY: Optional[str] = None
    AI_MODEL: str = "gpt-4o-mini"

    # ==========================================================================
    # Server
    # ==========================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    NODE_ENV: str = "development"  # development | test | production

    CORS_ORIGINS: str = "*"  # "*" or a comma-separated list
    CORS_ALLOW_CREDENTIALS: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",
        case_sensitive=True,
    )

    def get_cors_origins(self) -> List[str]:
        """CORS_ORIGINS as a list, ignoring blank entries."""
        if self.CORS_ORIGINS.strip() == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    def is_production(self) -> bool:
        return self.NODE_ENV.lower() == "production"

    def is_development(self) -> bool:
        return self.NODE_ENV.lower() == "development"

    def missing_supabase_settings(self) -> List[str]:
        """Names of the Supabase keys that are not set."""
        keys = ("SUPABASE_URL", "SUPABASE_ANON_KEY", "SUPABASE_SERVICE_ROLE_KEY")
        return [key for key in keys if not getattr(self, key)]

    def supabase_configured(self) -> bool:
        return not self.missing_supabase_settings()
