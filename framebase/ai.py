"""
Process-wide OpenAI client and prompt helpers.

The client is built on first use and shared by every request afterwards;
it holds connection settings only, so sharing it is safe.
"""

import json
import logging
import re
from typing import Any, Optional

from openai import AsyncOpenAI

from framebase.config import settings

logger = logging.getLogger(__name__)

_cached_client: Optional[AsyncOpenAI] = None

_FENCE_START = re.compile(r"^```(?:json)?", re.IGNORECASE)
_FENCE_END = re.compile(r"```$")


class AIConfigurationError(RuntimeError):
    """Raised when the AI provider cannot be configured."""


def get_openai_client() -> AsyncOpenAI:
    """
    Get the shared OpenAI client.

    Raises:
        AIConfigurationError: If OPENAI_API_KEY is not set
    """
    global _cached_client

    if _cached_client is not None:
        return _cached_client

    if not settings.OPENAI_API_KEY:
        raise AIConfigurationError("Missing OPENAI_API_KEY.")

    logger.debug("Creating OpenAI client")
    _cached_client = AsyncOpenAI(api_key=settings.OPENAI_API_KEY, max_retries=0)
    return _cached_client


def reset_openai_client() -> None:
    """Drop the shared client. Only meant for tests."""
    global _cached_client
    _cached_client = None


def build_system_prompt(context: str) -> str:
    """Compose the fixed generator preamble with the caller's context."""
    return " ".join([
        "You are a product design system generator.",
        "Return valid JSON only.",
        "No markdown. No code fences.",
        f"Context: {context}",
    ])


def parse_json_reply(text: str) -> Any:
    """
    Decode a model reply that should be JSON.

    Tolerates a surrounding ```json fence.

    Raises:
        ValueError: If the reply is not valid JSON
    """
    cleaned = _FENCE_START.sub("", text.strip())
    cleaned = _FENCE_END.sub("", cleaned).strip()
    return json.loads(cleaned)
