"""Shared fixtures for the character sheet API tests."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from uuid6 import uuid7

from charsheet.models import Character, User


def make_character(user: User, **overrides) -> Character:
    """Build an in-memory Character row with sensible defaults."""
    created = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
    fields = {
        "id": uuid7(),
        "user_id": user.id,
        "name": "Thorin",
        "race": "Dwarf",
        "character_class": "Fighter",
        "level": 3,
        "background": "Soldier",
        "strength": 16,
        "dexterity": 12,
        "constitution": 15,
        "intelligence": 9,
        "wisdom": 11,
        "charisma": 8,
        "max_hp": 28,
        "current_hp": 28,
        "armor_class": 16,
        "notes": None,
        "created_at": created,
        "updated_at": created,
    }
    fields.update(overrides)
    return Character(**fields)


@pytest.fixture
def user() -> User:
    """A registered user."""
    return User(
        id=uuid7(),
        firebase_uid="uid-player-1",
        email="player@example.com",
        name="Player One",
        created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def valid_payload() -> dict:
    """A complete, valid character creation payload (wire names)."""
    return {
        "name": "Elara",
        "race": "Elf",
        "class": "Wizard",
        "background": "Sage",
        "level": 1,
        "strength": 8,
        "dexterity": 14,
        "constitution": 12,
        "intelligence": 17,
        "wisdom": 13,
        "charisma": 10,
    }


@pytest.fixture
def mock_session() -> AsyncMock:
    """AsyncSession stand-in; add() is synchronous on the real session."""
    session = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def character_factory(user: User):
    """Return a builder for Character rows owned by the `user` fixture."""

    def factory(**overrides) -> Character:
        return make_character(user, **overrides)

    return factory
