"""Pydantic schemas for signup and login endpoints."""
from pydantic import BaseModel, Field, field_validator

from schemas.validators import normalize_email, validate_password


class AuthCredentials(BaseModel):
    """Email and password, used by both signup and login."""

    email: str = Field(..., min_length=1, description="Login email (case-insensitive)")
    password: str

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        """Trim, lower-case and validate the email."""
        return normalize_email(v)

    @field_validator("password")
    @classmethod
    def check_password(cls, v: str) -> str:
        """Enforce the configured minimum password length."""
        return validate_password(v)


class AccessTokenResponse(BaseModel):
    """
    Response returned by signup and login.

    The token is a short-lived JWT; send it as `Authorization: Bearer <token>`.
    """

    access_token: str
    token_type: str = "bearer"
