"""
AI module - Pluggable AI providers (OpenAI).
"""

from common.ai.base import AIProvider, ChatResult
from common.ai.openai import OpenAIProvider

__all__ = ["AIProvider", "ChatResult", "OpenAIProvider"]
