"""
Pydantic models for page create/update.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field


class CreatePageRequest(BaseModel):
    """Request body for adding a page to a project."""
    name: str = Field(..., min_length=1)
    slug: Optional[str] = None
    order_index: Optional[int] = Field(None, strict=True)
    html_content: Optional[str] = None
    metadata: Optional[Any] = None


class UpdatePageRequest(BaseModel):
    """Request body for editing a page; only given fields change."""
    name: Optional[str] = Field(None, min_length=1)
    slug: Optional[str] = None
    order_index: Optional[int] = Field(None, strict=True)
    html_content: Optional[str] = None
    metadata: Optional[Any] = None
