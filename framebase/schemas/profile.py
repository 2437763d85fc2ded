"""
Pydantic models for profile updates.
"""

from typing import Annotated, Optional

from pydantic import AfterValidator, AnyUrl, BaseModel, Field, TypeAdapter, ValidationError, model_validator
from pydantic_core import PydanticCustomError

_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    """Accept an absolute URL and keep the string exactly as sent."""
    try:
        _url_adapter.validate_python(value.strip())
    except ValidationError:
        raise PydanticCustomError("url_parsing", "Input should be a valid URL")
    return value


UrlString = Annotated[str, AfterValidator(_check_url)]


class ProfileUpdateRequest(BaseModel):
    """
    Partial profile update.

    At least one field must be given, and changing the password requires
    the current password. The checks run in that order and the first
    failure is reported.
    """
    full_name: Optional[str] = Field(None, min_length=1)
    username: Optional[str] = Field(None, min_length=2)
    avatar_url: Optional[UrlString] = None
    current_password: Optional[str] = Field(None, min_length=1)
    password: Optional[str] = Field(None, min_length=8)

    @model_validator(mode="after")
    def check_changes(self) -> "ProfileUpdateRequest":
        provided = [name for name in type(self).model_fields if getattr(self, name) is not None]
        if not provided:
            raise PydanticCustomError("no_changes", "No changes provided.")

        if self.password and not self.current_password:
            raise PydanticCustomError(
                "current_password_required",
                "Current password is required to set a new password.",
            )

        return self
