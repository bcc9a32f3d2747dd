"""Tests for ability modifier calculation."""

import pytest

from charsheet.schemas.character import ABILITY_NAMES
from charsheet.services.stats_service import (
    ability_modifiers,
    format_modifier,
    modifier,
)


class TestModifier:
    """modifier() tests."""

    @pytest.mark.parametrize(
        ("score", "expected"),
        [(1, -5), (7, -2), (8, -1), (9, -1), (10, 0), (11, 0), (12, 1), (19, 4), (20, 5)],
    )
    def test_spot_values(self, score: int, expected: int) -> None:
        assert modifier(score) == expected

    def test_odd_scores_below_ten_round_toward_negative_infinity(self) -> None:
        """Truncation would give 0 for 9 and -1 for 7."""
        assert modifier(9) == -1
        assert modifier(7) == -2
        assert modifier(3) == -4

    def test_matches_floor_formula_for_whole_range(self) -> None:
        import math

        for score in range(1, 21):
            assert modifier(score) == math.floor((score - 10) / 2)

    def test_defined_outside_score_range(self) -> None:
        assert modifier(0) == -5
        assert modifier(-1) == -6
        assert modifier(30) == 10


class TestFormatModifier:
    """format_modifier() tests."""

    def test_zero_has_plus_sign(self) -> None:
        assert format_modifier(0) == "+0"

    def test_positive(self) -> None:
        assert format_modifier(3) == "+3"

    def test_negative(self) -> None:
        assert format_modifier(-2) == "-2"

    def test_every_score_is_signed(self) -> None:
        for score in range(1, 21):
            assert format_modifier(modifier(score))[0] in "+-"


class TestAbilityModifiers:
    """ability_modifiers() tests."""

    def test_maps_every_ability_in_order(self) -> None:
        scores = {
            "charisma": 8,
            "strength": 16,
            "wisdom": 11,
            "dexterity": 12,
            "intelligence": 9,
            "constitution": 15,
        }

        result = ability_modifiers(scores)

        assert list(result) == list(ABILITY_NAMES)
        assert result == {
            "strength": 3,
            "dexterity": 1,
            "constitution": 2,
            "intelligence": -1,
            "wisdom": 0,
            "charisma": -1,
        }
