"""
Pydantic models for auth request validation.
"""

from pydantic import BaseModel, Field, EmailStr


class RegisterRequest(BaseModel):
    """Request body for user registration."""
    email: EmailStr
    password: str = Field(..., min_length=8)
    full_name: str = Field(..., min_length=1)


class LoginRequest(BaseModel):
    """Request body for user login."""
    email: EmailStr
    password: str = Field(..., min_length=1)


class ResetPasswordRequest(BaseModel):
    """Request body for requesting a password reset email."""
    email: EmailStr


class ConfirmEmailRequest(BaseModel):
    """Request body for confirming an email address (development only)."""
    email: EmailStr
