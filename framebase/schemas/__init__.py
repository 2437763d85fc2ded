"""
Framebase Schemas.

Pydantic models for request validation.
"""

from framebase.schemas.auth import *
from framebase.schemas.profile import *
from framebase.schemas.projects import *
from framebase.schemas.pages import *
from framebase.schemas.export import *
from framebase.schemas.ai import *
from framebase.schemas.validation import format_validation_error, parse_request, validate_payload
