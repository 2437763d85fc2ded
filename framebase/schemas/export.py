"""
Pydantic models for project exports.
"""

from uuid import UUID
from pydantic import BaseModel, Field


class ExportRequest(BaseModel):
    project_id: UUID
    export_type: str = Field(..., min_length=1, description="html | json")
    format: str = Field(..., min_length=1, description="zip | json")
