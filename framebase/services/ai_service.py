"""
AI layout generation service.

Sends one chat completion per request and records every successful
generation in `ai_generations`.
"""

import json
import logging
from typing import Any, Dict, Optional

from common.ai import AIProvider
from common.database import DatabaseError, SupabaseDatabase

from framebase.ai import build_system_prompt, parse_json_reply
from framebase.services.errors import ServiceError

logger = logging.getLogger(__name__)

LAYOUT_INSTRUCTIONS = (
    "Return JSON with keys: sections, explanation, mvpPrompt, jsonOutline. "
    "sections must be an array of these values: navbar, hero, features, pricing, "
    "form, cta, footer, section, text, heading, paragraph, button, image, "
    "container, card, input."
)


class AIService:
    """Layout generation backed by an AIProvider."""

    def __init__(self, provider: AIProvider, db: SupabaseDatabase):
        self._provider = provider
        self._db = db

    async def generate_layout(
        self,
        user_id: str,
        prompt: str,
        context: str = "",
        project_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Generate a layout outline for a prompt.

        Returns:
            {"output": parsed JSON, "usage": token counts, "model": model name}

        Raises:
            ServiceError: Provider failure or a reply that is not JSON
        """
        try:
            result = await self._provider.chat(
                message=f"{LAYOUT_INSTRUCTIONS}\nPrompt: {prompt}",
                system_prompt=build_system_prompt(context),
                temperature=0.1,
            )
        except Exception as e:
            logger.error(f"AI layout generation failed for {user_id}: {e}")
            raise ServiceError(str(e) or "AI generation failed.", status_code=500)

        try:
            output = parse_json_reply(result.content)
        except ValueError:
            logger.warning(f"AI reply was not JSON for {user_id}")
            raise ServiceError("AI response was not valid JSON.", status_code=500)

        await self._record(user_id, project_id, prompt, output, result.model, result.total_tokens)

        return {"output": output, "usage": result.usage or None, "model": result.model}

    async def _record(
        self,
        user_id: str,
        project_id: Optional[str],
        prompt: str,
        output: Any,
        model: Optional[str],
        tokens: Optional[int],
    ) -> None:
        try:
            await self._db.insert("ai_generations", {
                "user_id": user_id,
                "project_id": project_id,
                "generation_type": "layout",
                "input_prompt": prompt,
                "output_reference": json.dumps(output),
                "model_used": model,
                "tokens_used": tokens,
            })
        except DatabaseError as e:
            logger.warning(f"Failed to record AI generation for {user_id}: {e}")
