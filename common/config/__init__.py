"""
Configuration module - pydantic-settings base class read from env and .env.
"""

from common.config.base_settings import BaseAppSettings

__all__ = ["BaseAppSettings"]
