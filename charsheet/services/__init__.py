"""Services package for business logic."""

from charsheet.services.character_client import CharacterApiClient, CollaboratorError
from charsheet.services.character_service import CharacterError, CharacterService
from charsheet.services.sheet_service import build_sheet
from charsheet.services.stats_service import (
    ability_modifiers,
    format_modifier,
    modifier,
)
from charsheet.services.validation_service import (
    CharacterValidationError,
    collect_errors,
    validate_create,
    validate_update,
    with_creation_defaults,
)

__all__ = [
    "CharacterApiClient",
    "CharacterError",
    "CharacterService",
    "CharacterValidationError",
    "CollaboratorError",
    "ability_modifiers",
    "build_sheet",
    "collect_errors",
    "format_modifier",
    "modifier",
    "validate_create",
    "validate_update",
    "with_creation_defaults",
]
