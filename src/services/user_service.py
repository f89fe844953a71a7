"""Service layer for user profile updates."""
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from models.user import User
from schemas.user import UserUpdate
from services.exceptions import CredentialsTakenError


async def email_in_use(db: AsyncSession, email: str, exclude_user_id: int) -> bool:
    """Whether a user other than exclude_user_id already has this email."""
    result = await db.execute(
        select(User.id).where(User.email == email, User.id != exclude_user_id),
    )
    return result.scalar_one_or_none() is not None


async def update_user(
    db: AsyncSession,
    user: User,
    data: UserUpdate,
) -> User:
    """
    Apply a partial profile update to the current user.

    The email pre-check gives the common case a clean error; the unique index
    still decides when two requests race for the same address.

    Raises:
        CredentialsTakenError: If the new email belongs to another user.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    update_data = data.model_dump(exclude_unset=True)

    new_email = update_data.get("email")
    if (
        new_email is not None
        and new_email != user.email
        and await email_in_use(db, new_email, user.id)
    ):
        raise CredentialsTakenError(new_email)

    try:
        # Savepoint so a unique-index violation leaves the session usable
        async with db.begin_nested():
            for field, value in update_data.items():
                setattr(user, field, value)
            user.updated_at = func.clock_timestamp()
            await db.flush()
    except IntegrityError as e:
        raise CredentialsTakenError(new_email) from e

    await db.refresh(user)
    return user
