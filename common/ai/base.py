"""
Abstract AI provider interface.

Defines the contract that LLM providers implement so application code does
not depend on a specific vendor SDK.

Example:
    from common.ai import AIProvider, OpenAIProvider

    def get_ai_provider(settings) -> AIProvider:
        return OpenAIProvider(api_key=settings.OPENAI_API_KEY)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any


@dataclass
class ChatResult:
    """Text returned by a chat completion plus the provider's usage counters."""
    content: str
    model: Optional[str] = None
    usage: Dict[str, int] = field(default_factory=dict)

    @property
    def total_tokens(self) -> Optional[int]:
        return self.usage.get("total_tokens")


class AIProvider(ABC):
    """
    Abstract AI provider interface.

    Implement this for different LLM services.
    """

    @abstractmethod
    async def chat(
        self,
        message: str,
        system_prompt: Optional[str] = None,
        conversation_history: Optional[List[Dict[str, str]]] = None,
        max_tokens: int = 1024,
        temperature: float = 0.7,
        **kwargs: Any,
    ) -> ChatResult:
        """
        Send a message and get a response.

        Args:
            message: The user's message
            system_prompt: Optional system instructions
            conversation_history: Previous messages in the conversation
                Format: [{"role": "user"|"assistant", "content": "..."}]
            max_tokens: Maximum tokens in the response
            temperature: Sampling temperature (0-1)
            **kwargs: Provider-specific options

        Returns:
            ChatResult with the reply text and usage
        """
        pass
