"""Shared exceptions for service layer operations."""


class BookmarkNotFoundError(Exception):
    """
    Raised when an ownership-scoped bookmark lookup finds no row.

    Covers both "does not exist" and "belongs to another user"; callers cannot
    tell the two apart.
    """

    def __init__(self, bookmark_id: int) -> None:
        self.bookmark_id = bookmark_id
        super().__init__(f"Bookmark not found: {bookmark_id}")


class CredentialsTakenError(Exception):
    """Raised when signing up (or changing email) to an email already in use."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Email already registered: {email}")


class InvalidCredentialsError(Exception):
    """Raised when login fails, whether the email is unknown or the password is wrong."""

    def __init__(self) -> None:
        super().__init__("Credentials incorrect")
