"""Validation rules for character payloads.

The rules live on the pydantic request models; this module runs them on a
payload keyed by wire names (``class`` for the class field) and turns every
failure into a readable message per field, before anything reaches the
repository or the network.
"""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import ValidationError

from charsheet.schemas.character import (
    ABILITY_NAMES,
    BACKGROUNDS,
    CLASSES,
    COMBAT_FIELDS,
    DEFAULT_ABILITY_SCORE,
    DEFAULT_LEVEL,
    MAX_ABILITY_SCORE,
    MAX_LEVEL,
    MIN_ABILITY_SCORE,
    MIN_LEVEL,
    RACES,
    CharacterCreate,
    CharacterPayload,
    CharacterUpdate,
)
from charsheet.utils.logging import get_logger

logger = get_logger(__name__)

PayloadT = TypeVar("PayloadT", bound=CharacterPayload)

REQUIRED_FIELDS: tuple[str, ...] = (
    "name",
    "race",
    "class",
    "background",
    "level",
    *ABILITY_NAMES,
)

_LABELS: dict[str, str] = {
    "name": "Character name",
    "race": "Race",
    "class": "Class",
    "background": "Background",
    "level": "Level",
    "max_hp": "Max HP",
    "current_hp": "Current HP",
    "armor_class": "Armor class",
    "notes": "Notes",
    **{name: name.capitalize() for name in ABILITY_NAMES},
}

_CHOICES: dict[str, tuple[str, ...]] = {
    "race": RACES,
    "class": CLASSES,
    "background": BACKGROUNDS,
}


class CharacterValidationError(Exception):
    """Exception raised when a character payload breaks the validation rules.

    Attributes:
        errors: Field name -> human-readable message, one per failing field
    """

    def __init__(self, errors: dict[str, str]):
        super().__init__("; ".join(f"{field}: {msg}" for field, msg in errors.items()))
        self.errors = errors


def _message(field: str, error_type: str) -> str:
    """Turn one pydantic error on a wire field into the message shown to users."""
    label = _LABELS.get(field)
    if label is None or error_type == "extra_forbidden":
        return "Unknown field"
    if error_type in ("missing", "required") or field == "name":
        return f"{label} is required"
    if field in _CHOICES:
        return f"{label} must be one of: {', '.join(_CHOICES[field])}"
    if field == "level":
        if error_type == "greater_than_equal":
            return "Level must be positive"
        if error_type == "less_than_equal":
            return f"Level must be between {MIN_LEVEL} and {MAX_LEVEL}"
        return "Level must be a whole number"
    if field in ABILITY_NAMES:
        return (
            f"{label} must be a whole number between "
            f"{MIN_ABILITY_SCORE} and {MAX_ABILITY_SCORE}"
        )
    if field in COMBAT_FIELDS:
        return f"{label} must be a whole number"
    return f"{label} must be text"


def errors_by_field(error: ValidationError) -> dict[str, str]:
    """Map a pydantic ValidationError to wire field -> message.

    Only the first failure of each field is kept.
    """
    errors: dict[str, str] = {}
    for detail in error.errors():
        field = str(detail["loc"][0]) if detail["loc"] else "payload"
        errors.setdefault(field, _message(field, detail["type"]))
    return errors


def _validate(model: type[PayloadT], payload: Mapping[str, Any], action: str) -> PayloadT:
    try:
        return model.model_validate(dict(payload))
    except ValidationError as e:
        errors = errors_by_field(e)
        logger.info(f"Rejected character {action} payload: {sorted(errors)}")
        raise CharacterValidationError(errors) from e


def collect_errors(payload: Mapping[str, Any], partial: bool = False) -> dict[str, str]:
    """Check a payload against every rule and collect all failures.

    Args:
        payload: Character fields keyed by wire name
        partial: True for update payloads, where any field may be omitted

    Returns:
        Field name -> message for each failing field; empty if valid
    """
    model = CharacterUpdate if partial else CharacterCreate
    try:
        model.model_validate(dict(payload))
    except ValidationError as e:
        return errors_by_field(e)
    return {}


def with_creation_defaults(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Fill in absent level and ability scores with their starting values."""
    data = dict(payload)
    data.setdefault("level", DEFAULT_LEVEL)
    for name in ABILITY_NAMES:
        data.setdefault(name, DEFAULT_ABILITY_SCORE)
    return data


def validate_create(payload: Mapping[str, Any]) -> CharacterCreate:
    """Validate a character creation payload.

    Raises:
        CharacterValidationError: With every failing field
    """
    return _validate(CharacterCreate, payload, "creation")


def validate_update(payload: Mapping[str, Any]) -> CharacterUpdate:
    """Validate a partial character update payload.

    Raises:
        CharacterValidationError: With every failing field
    """
    return _validate(CharacterUpdate, payload, "update")
