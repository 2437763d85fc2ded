"""
Pydantic models for project create/update.
"""

from typing import Optional
from pydantic import BaseModel, Field


class CreateProjectRequest(BaseModel):
    name: str = Field(..., min_length=1)
    platform_type: Optional[str] = Field(None, description="web | mobile")


class UpdateProjectRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    platform_type: Optional[str] = None
