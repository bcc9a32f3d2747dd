"""Derived stats for ability scores."""

from collections.abc import Mapping

from charsheet.schemas.character import ABILITY_NAMES


def modifier(score: int) -> int:
    """Return the modifier for an ability score.

    Floor division, so odd scores below 10 round down: 9 -> -1, 7 -> -2.
    Defined for any integer.
    """
    return (score - 10) // 2


def format_modifier(value: int) -> str:
    """Render a modifier with an explicit sign ("+0", "+3", "-2")."""
    return f"+{value}" if value >= 0 else str(value)


def ability_modifiers(scores: Mapping[str, int]) -> dict[str, int]:
    """Return ability name -> modifier in canonical ability order.

    Args:
        scores: Mapping containing every name in ABILITY_NAMES

    Returns:
        Dict of modifiers, ordered like ABILITY_NAMES
    """
    return {name: modifier(scores[name]) for name in ABILITY_NAMES}
