"""User repository for database operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from charsheet.models import User


class DuplicateUserError(Exception):
    """Exception raised when a Firebase UID is registered twice."""

    pass


async def get_user_by_firebase_uid(
    session: AsyncSession, firebase_uid: str
) -> User | None:
    """Get user by Firebase UID.

    Args:
        session: Database session
        firebase_uid: The user's Firebase UID

    Returns:
        User if found, None otherwise
    """
    query = select(User).where(User.firebase_uid == firebase_uid)
    result = await session.execute(query)
    return result.scalar_one_or_none()


async def create_user(
    session: AsyncSession,
    firebase_uid: str,
    email: str,
    name: str,
) -> User:
    """Create a new user record.

    Raises:
        DuplicateUserError: If the Firebase UID is already registered
    """
    existing = await get_user_by_firebase_uid(session, firebase_uid)
    if existing is not None:
        raise DuplicateUserError(f"User {firebase_uid} is already registered")

    user = User(firebase_uid=firebase_uid, email=email, name=name)
    session.add(user)
    return user
