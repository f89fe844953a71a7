"""Pydantic schemas for bookmark endpoints."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from schemas.validators import (
    validate_description_length,
    validate_required_text,
    validate_title_length,
)


class BookmarkCreate(BaseModel):
    """
    Schema for creating a new bookmark.

    Unknown keys (including any attempt to set user_id) are dropped; the owner
    is always the authenticated caller.
    """

    title: str = Field(min_length=1)
    # Stored as given; only non-emptiness is enforced
    link: str = Field(min_length=1)
    description: str | None = None

    @field_validator("title")
    @classmethod
    def check_title_length(cls, v: str) -> str:
        """Enforce the configured title limit."""
        return validate_title_length(v)

    @field_validator("description")
    @classmethod
    def check_description_length(cls, v: str | None) -> str | None:
        """Enforce the configured description limit."""
        return validate_description_length(v)


class BookmarkUpdate(BaseModel):
    """
    Schema for a partial bookmark update.

    Omitted fields keep their stored values. title and link may be omitted but
    not cleared; description may be set to null.
    """

    title: str | None = None
    link: str | None = None
    description: str | None = None

    @field_validator("title")
    @classmethod
    def check_title(cls, v: str | None) -> str:
        """Reject an explicit null/empty title and enforce the length limit."""
        return validate_title_length(validate_required_text(v, "title"))

    @field_validator("link")
    @classmethod
    def check_link(cls, v: str | None) -> str:
        """Reject an explicit null/empty link."""
        return validate_required_text(v, "link")

    @field_validator("description")
    @classmethod
    def check_description_length(cls, v: str | None) -> str | None:
        """Enforce the configured description limit."""
        return validate_description_length(v)


class BookmarkResponse(BaseModel):
    """Schema for bookmark responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    link: str
    description: str | None
    created_at: datetime
    updated_at: datetime
