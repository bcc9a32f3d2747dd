"""Character repository for database operations.

Provides functions to:
- Create character
- Get characters by owner (newest first)
- Get character by ID, scoped to its owner
- Apply a partial update
- Delete character

Functions add or modify rows in the session; callers commit.
"""

from typing import Any
from uuid import UUID

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from charsheet.models import Character, utc_now
from charsheet.schemas.character import CharacterCreate


async def create_character(
    session: AsyncSession,
    user_id: UUID,
    data: CharacterCreate,
) -> Character:
    """Create a new character record.

    Args:
        session: Database session
        user_id: The owner's ID
        data: Validated creation payload

    Returns:
        Created Character instance
    """
    now = utc_now()
    character = Character(
        user_id=user_id,
        created_at=now,
        updated_at=now,
        **data.model_dump(),
    )
    session.add(character)
    return character


async def get_characters_by_user_id(
    session: AsyncSession,
    user_id: UUID,
) -> list[Character]:
    """Get all characters for a user sorted by created_at descending.

    Args:
        session: Database session
        user_id: The owner's ID

    Returns:
        List of Character instances, newest first
    """
    query = (
        select(Character)
        .where(Character.user_id == user_id)
        .order_by(desc(Character.created_at))
    )
    result = await session.execute(query)
    return list(result.scalars().all())


async def get_character_by_id(
    session: AsyncSession,
    character_id: UUID,
    user_id: UUID,
) -> Character | None:
    """Get a character by ID if it belongs to the given user.

    Args:
        session: Database session
        character_id: The character's ID
        user_id: The owner's ID

    Returns:
        Character if found and owned by user_id, None otherwise
    """
    query = select(Character).where(
        Character.id == character_id, Character.user_id == user_id
    )
    result = await session.execute(query)
    return result.scalar_one_or_none()


async def update_character(
    session: AsyncSession,
    character_id: UUID,
    user_id: UUID,
    changes: dict[str, Any],
) -> Character | None:
    """Apply the supplied fields to a character and refresh updated_at.

    Args:
        session: Database session
        character_id: The character's ID
        user_id: The owner's ID
        changes: Attribute name -> new value, only the supplied fields

    Returns:
        Updated Character, or None if not found for this user
    """
    character = await get_character_by_id(session, character_id, user_id)
    if character is None:
        return None

    for field, value in changes.items():
        setattr(character, field, value)
    character.updated_at = utc_now()
    return character


async def delete_character(
    session: AsyncSession,
    character_id: UUID,
    user_id: UUID,
) -> bool:
    """Delete a character owned by the given user.

    Args:
        session: Database session
        character_id: The character's ID
        user_id: The owner's ID

    Returns:
        True if deleted, False if not found
    """
    character = await get_character_by_id(session, character_id, user_id)
    if character is None:
        return False

    await session.delete(character)
    return True
