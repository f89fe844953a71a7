"""
Shared validation functions for Pydantic schemas.

Limits come from Settings so they can be tuned per deployment without code changes.
"""
import re

from core.config import get_settings

# Deliberately loose: one "@", no whitespace, a dot in the domain part
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

# bcrypt rejects longer inputs
MAX_PASSWORD_BYTES = 72


def validate_required_text(value: str | None, field_name: str) -> str:
    """
    Reject a missing or empty value for a required text field.

    Used by partial-update schemas, where a field may be omitted but must not
    be explicitly cleared.
    """
    if value is None or value == "":
        raise ValueError(f"{field_name} must not be empty")
    return value


def validate_title_length(title: str | None) -> str | None:
    """Validate that title doesn't exceed maximum length."""
    settings = get_settings()
    if title is not None and len(title) > settings.max_title_length:
        raise ValueError(
            f"Title exceeds maximum length of {settings.max_title_length:,} characters "
            f"(got {len(title):,} characters).",
        )
    return title


def validate_description_length(description: str | None) -> str | None:
    """Validate that description doesn't exceed maximum length."""
    settings = get_settings()
    if description is not None and len(description) > settings.max_description_length:
        max_len = settings.max_description_length
        raise ValueError(
            f"Description exceeds maximum length of {max_len:,} characters "
            f"(got {len(description):,} characters).",
        )
    return description


def normalize_email(email: str) -> str:
    """
    Normalize and validate an email address.

    Returns:
        The email, trimmed and lower-cased.

    Raises:
        ValueError: If the email is empty or malformed.
    """
    normalized = email.strip().lower()
    if not normalized:
        raise ValueError("Email cannot be empty")
    if not EMAIL_PATTERN.match(normalized):
        raise ValueError(f"Invalid email address: '{email}'")
    return normalized


def validate_password(password: str) -> str:
    """
    Validate a password against the configured minimum length and bcrypt's input limit.

    bcrypt only accepts up to 72 bytes, counted after UTF-8 encoding.
    """
    settings = get_settings()
    if len(password) < settings.min_password_length:
        raise ValueError(
            f"Password must be at least {settings.min_password_length} characters",
        )
    if len(password.encode()) > MAX_PASSWORD_BYTES:
        raise ValueError(
            f"Password must be at most {MAX_PASSWORD_BYTES} bytes when UTF-8 encoded",
        )
    return password
