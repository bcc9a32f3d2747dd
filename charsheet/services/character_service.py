"""Character Service for managing a user's character sheets.

Wraps the character repository with ownership scoping, commits and
logging:
- list_characters: dashboard listing, newest first
- get_character / create_character / update_character / delete_character
"""

from enum import Enum
from uuid import UUID

from result import Err, Ok, Result
from sqlalchemy.ext.asyncio import AsyncSession

from charsheet.models import Character, User
from charsheet.repositories import character_repository
from charsheet.schemas.character import CharacterCreate, CharacterUpdate
from charsheet.utils.logging import get_logger

logger = get_logger(__name__)


class CharacterError(Enum):
    """Error types for character operations."""

    NOT_FOUND = "character_not_found"


def parse_character_id(character_id: str) -> UUID | None:
    """Parse an opaque character identifier, None if it is not a UUID."""
    try:
        return UUID(character_id)
    except (ValueError, TypeError, AttributeError):
        return None


class CharacterService:
    """Service for CRUD operations on the characters of one user."""

    def __init__(self, session: AsyncSession, user: User) -> None:
        self.session = session
        self.user = user

    async def list_characters(self) -> list[Character]:
        """Return the user's characters, newest first."""
        return await character_repository.get_characters_by_user_id(
            self.session, self.user.id
        )

    async def get_character(self, character_id: str) -> Result[Character, CharacterError]:
        """Return one of the user's characters.

        Characters owned by someone else are reported as not found.
        """
        parsed_id = parse_character_id(character_id)
        if parsed_id is None:
            return Err(CharacterError.NOT_FOUND)

        character = await character_repository.get_character_by_id(
            self.session, parsed_id, self.user.id
        )
        if character is None:
            return Err(CharacterError.NOT_FOUND)
        return Ok(character)

    async def create_character(self, data: CharacterCreate) -> Character:
        """Create a character owned by the user and commit it."""
        character = await character_repository.create_character(
            self.session, self.user.id, data
        )
        await self.session.commit()
        await self.session.refresh(character)
        logger.info(f"Created character {character.id} for user {self.user.id}")
        return character

    async def update_character(
        self, character_id: str, data: CharacterUpdate
    ) -> Result[Character, CharacterError]:
        """Apply a partial update; updated_at is refreshed even if nothing changed."""
        parsed_id = parse_character_id(character_id)
        if parsed_id is None:
            return Err(CharacterError.NOT_FOUND)

        changes = data.changes()
        character = await character_repository.update_character(
            self.session, parsed_id, self.user.id, changes
        )
        if character is None:
            return Err(CharacterError.NOT_FOUND)

        await self.session.commit()
        await self.session.refresh(character)
        logger.info(
            f"Updated character {character.id} fields={sorted(changes)} "
            f"for user {self.user.id}"
        )
        return Ok(character)

    async def delete_character(self, character_id: str) -> Result[None, CharacterError]:
        """Delete one of the user's characters permanently."""
        parsed_id = parse_character_id(character_id)
        if parsed_id is None:
            return Err(CharacterError.NOT_FOUND)

        deleted = await character_repository.delete_character(
            self.session, parsed_id, self.user.id
        )
        if not deleted:
            return Err(CharacterError.NOT_FOUND)

        await self.session.commit()
        logger.info(f"Deleted character {parsed_id} for user {self.user.id}")
        return Ok(None)
