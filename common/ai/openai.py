"""
OpenAI GPT provider implementation.

Wraps an AsyncOpenAI client for chat completions. The client can be built
here or injected, so a process-wide client can be shared.

Example:
    from common.ai import OpenAIProvider

    openai = OpenAIProvider(api_key="your-api-key")
    result = await openai.chat(
        message="Landing page for a bakery",
        system_prompt="Return valid JSON only.",
    )
    print(result.content)
"""

from typing import Optional, List, Dict, Any

from openai import AsyncOpenAI

from common.ai.base import AIProvider, ChatResult


class OpenAIProvider(AIProvider):
    """
    OpenAI GPT provider.

    Uses the OpenAI async client for API calls.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gpt-4o-mini",
        max_retries: int = 0,
        timeout: float = 60.0,
        client: Optional[AsyncOpenAI] = None,
    ):
        """
        Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key (ignored when client is given)
            model: Chat model to use
            max_retries: Retries performed by the SDK for failed requests
            timeout: Request timeout in seconds
            client: Existing AsyncOpenAI client to reuse
        """
        if client is None:
            if not api_key:
                raise ValueError("api_key or client is required for OpenAIProvider")
            client = AsyncOpenAI(
                api_key=api_key,
                max_retries=max_retries,
                timeout=timeout,
            )

        self.client = client
        self.model = model

    async def chat(
        self,
        message: str,
        system_prompt: Optional[str] = None,
        conversation_history: Optional[List[Dict[str, str]]] = None,
        max_tokens: int = 1024,
        temperature: float = 0.7,
        **kwargs: Any,
    ) -> ChatResult:
        """Send message and get response from OpenAI."""
        messages: List[Dict[str, str]] = []

        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})

        if conversation_history:
            messages.extend(conversation_history)

        messages.append({"role": "user", "content": message})

        params: Dict[str, Any] = {
            "model": kwargs.get("model", self.model),
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": temperature,
        }

        # Add optional parameters
        for key in ["stop", "top_p", "seed", "response_format"]:
            if key in kwargs:
                params[key] = kwargs[key]

        response = await self.client.chat.completions.create(**params)

        usage: Dict[str, int] = {}
        if getattr(response, "usage", None) is not None:
            usage = {
                "prompt_tokens": response.usage.prompt_tokens,
                "completion_tokens": response.usage.completion_tokens,
                "total_tokens": response.usage.total_tokens,
            }

        return ChatResult(
            content=response.choices[0].message.content or "",
            model=getattr(response, "model", None) or params["model"],
            usage=usage,
        )
