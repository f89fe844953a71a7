"""Pydantic schemas for user endpoints."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

from schemas.validators import normalize_email, validate_required_text


class UserUpdate(BaseModel):
    """Schema for a partial profile update. Omitted fields are left unchanged."""

    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str | None) -> str:
        """Email may be changed but not cleared."""
        return normalize_email(validate_required_text(v, "email"))


class UserResponse(BaseModel):
    """Response model for user info. Never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    first_name: str | None
    last_name: str | None
    created_at: datetime
    updated_at: datetime
