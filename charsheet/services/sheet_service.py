"""Character sheet display projection.

Turns a character record into what the sheet page shows: each ability
with its score and signed modifier, and the notes split into lines.
"""

from charsheet.schemas.character import (
    ABILITY_NAMES,
    AbilityView,
    CharacterResponse,
    CharacterSheetResponse,
)
from charsheet.services.stats_service import format_modifier, modifier


def notes_lines(notes: str | None) -> list[str]:
    """Split notes on line breaks, keeping blank lines."""
    if not notes:
        return []
    return notes.splitlines()


def build_sheet(character: CharacterResponse) -> CharacterSheetResponse:
    """Build the sheet view for a character record."""
    abilities = []
    for name in ABILITY_NAMES:
        score = getattr(character, name)
        value = modifier(score)
        abilities.append(
            AbilityView(
                name=name,
                score=score,
                modifier=value,
                display_modifier=format_modifier(value),
            )
        )

    return CharacterSheetResponse(
        character=character,
        abilities=abilities,
        notes_lines=notes_lines(character.notes),
    )
