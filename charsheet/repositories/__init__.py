"""Repository layer for database operations."""

from charsheet.repositories.character_repository import (
    create_character,
    delete_character,
    get_character_by_id,
    get_characters_by_user_id,
    update_character,
)
from charsheet.repositories.user_repository import (
    DuplicateUserError,
    create_user,
    get_user_by_firebase_uid,
)

__all__ = [
    "DuplicateUserError",
    "create_character",
    "create_user",
    "delete_character",
    "get_character_by_id",
    "get_characters_by_user_id",
    "get_user_by_firebase_uid",
    "update_character",
]
