"""Service layer for signup and login."""
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import Settings
from core.security import create_access_token, hash_password, verify_password
from models.user import User
from schemas.auth import AuthCredentials
from services.exceptions import CredentialsTakenError, InvalidCredentialsError

logger = logging.getLogger(__name__)


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    """Look up a user by (already normalized) email."""
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def signup(
    db: AsyncSession,
    data: AuthCredentials,
    settings: Settings,
) -> str:
    """
    Register a new user and return an access token for them.

    Raises:
        CredentialsTakenError: If the email is already registered.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    if await get_user_by_email(db, data.email) is not None:
        raise CredentialsTakenError(data.email)

    user = User(email=data.email, hashed_password=hash_password(data.password))
    try:
        # Savepoint so a concurrent signup for the same email leaves the session usable
        async with db.begin_nested():
            db.add(user)
            await db.flush()
    except IntegrityError as e:
        raise CredentialsTakenError(data.email) from e

    logger.info("Created user %s", user.id)
    return create_access_token(user.id, user.email, settings)


async def login(
    db: AsyncSession,
    data: AuthCredentials,
    settings: Settings,
) -> str:
    """
    Verify credentials and return an access token.

    Raises:
        InvalidCredentialsError: If the email is unknown or the password doesn't match.
    """
    user = await get_user_by_email(db, data.email)
    if user is None or not verify_password(data.password, user.hashed_password):
        logger.warning("Rejected login attempt for %s", data.email)
        raise InvalidCredentialsError()

    return create_access_token(user.id, user.email, settings)
