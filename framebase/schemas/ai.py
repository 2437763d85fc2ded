"""
Pydantic models for AI generation requests.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class AILayoutRequest(BaseModel):
    prompt: str = Field(..., min_length=1)
    context: str = ""
    project_id: Optional[UUID] = None
