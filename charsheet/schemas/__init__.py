"""Schema module for API request/response models."""

from charsheet.schemas.character import (
    ABILITY_NAMES,
    BACKGROUNDS,
    CLASSES,
    RACES,
    AbilityScores,
    Background,
    CharacterClass,
    CharacterCreate,
    CharacterResponse,
    CharacterSheetResponse,
    CharactersListResponse,
    CharacterSummary,
    CharacterUpdate,
    Race,
)
from charsheet.schemas.user import RegisterRequest, UserResponse

__all__ = [
    "ABILITY_NAMES",
    "BACKGROUNDS",
    "CLASSES",
    "RACES",
    "AbilityScores",
    "Background",
    "CharacterClass",
    "CharacterCreate",
    "CharacterResponse",
    "CharacterSheetResponse",
    "CharacterSummary",
    "CharacterUpdate",
    "CharactersListResponse",
    "Race",
    "RegisterRequest",
    "UserResponse",
]
