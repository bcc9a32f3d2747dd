"""Tests for Character Repository.

Tests for the character repository that handles:
- Create character
- Get characters by user ID
- Get character by ID (owner scoped)
- Partial update
- Delete character
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from uuid6 import uuid7

from charsheet.models import Character
from charsheet.repositories.character_repository import (
    create_character,
    delete_character,
    get_character_by_id,
    get_characters_by_user_id,
    update_character,
)
from charsheet.services.validation_service import validate_create


def scalar_result(value) -> MagicMock:
    return MagicMock(scalar_one_or_none=MagicMock(return_value=value))


class TestCreateCharacter:
    """Tests for create_character function."""

    @pytest.mark.asyncio
    async def test_create_character_returns_character(
        self, mock_session, user, valid_payload
    ) -> None:
        data = validate_create(valid_payload)

        result = await create_character(mock_session, user.id, data)

        assert isinstance(result, Character)
        assert result.user_id == user.id
        assert result.name == "Elara"
        assert result.character_class == "Wizard"
        assert result.intelligence == 17
        assert result.notes is None

    @pytest.mark.asyncio
    async def test_create_character_sets_both_timestamps(
        self, mock_session, user, valid_payload
    ) -> None:
        result = await create_character(mock_session, user.id, validate_create(valid_payload))

        assert result.created_at is not None
        assert result.created_at == result.updated_at
        assert result.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_create_character_adds_to_session(
        self, mock_session, user, valid_payload
    ) -> None:
        await create_character(mock_session, user.id, validate_create(valid_payload))

        mock_session.add.assert_called_once()
        assert isinstance(mock_session.add.call_args[0][0], Character)


class TestGetCharacters:
    """Tests for get_characters_by_user_id and get_character_by_id."""

    @pytest.mark.asyncio
    async def test_get_characters_returns_list(self, mock_session, user, character_factory) -> None:
        characters = [character_factory(name="A"), character_factory(name="B")]
        mock_session.execute = AsyncMock(
            return_value=MagicMock(
                scalars=MagicMock(return_value=MagicMock(all=MagicMock(return_value=characters)))
            )
        )

        result = await get_characters_by_user_id(mock_session, user.id)

        assert result == characters
        mock_session.execute.assert_called_once()

    @pytest.mark.asyncio
    async def test_get_characters_query_is_owner_scoped_and_ordered(
        self, mock_session, user
    ) -> None:
        mock_session.execute = AsyncMock(
            return_value=MagicMock(
                scalars=MagicMock(return_value=MagicMock(all=MagicMock(return_value=[])))
            )
        )

        await get_characters_by_user_id(mock_session, user.id)

        query = mock_session.execute.call_args[0][0]
        sql = str(query)
        assert "characters.user_id" in sql
        assert "ORDER BY characters.created_at DESC" in sql

    @pytest.mark.asyncio
    async def test_get_character_by_id_found(self, mock_session, user, character_factory) -> None:
        character = character_factory()
        mock_session.execute = AsyncMock(return_value=scalar_result(character))

        result = await get_character_by_id(mock_session, character.id, user.id)

        assert result is character

    @pytest.mark.asyncio
    async def test_get_character_by_id_not_found(self, mock_session, user) -> None:
        mock_session.execute = AsyncMock(return_value=scalar_result(None))

        result = await get_character_by_id(mock_session, uuid7(), user.id)

        assert result is None


class TestUpdateCharacter:
    """Tests for update_character function."""

    @pytest.mark.asyncio
    async def test_only_supplied_fields_change(
        self, mock_session, user, character_factory
    ) -> None:
        character = character_factory(level=3, strength=16, notes="old")
        mock_session.execute = AsyncMock(return_value=scalar_result(character))

        result = await update_character(mock_session, character.id, user.id, {"level": 5})

        assert result is character
        assert result.level == 5
        assert result.strength == 16
        assert result.notes == "old"
        assert result.name == "Thorin"

    @pytest.mark.asyncio
    async def test_updated_at_is_refreshed(self, mock_session, user, character_factory) -> None:
        old = datetime(2020, 1, 1, tzinfo=timezone.utc)
        character = character_factory(created_at=old, updated_at=old)
        mock_session.execute = AsyncMock(return_value=scalar_result(character))

        result = await update_character(mock_session, character.id, user.id, {"level": 5})

        assert result.updated_at > old
        assert result.created_at == old

    @pytest.mark.asyncio
    async def test_updated_at_is_refreshed_for_empty_update(
        self, mock_session, user, character_factory
    ) -> None:
        old = datetime(2020, 1, 1, tzinfo=timezone.utc)
        character = character_factory(updated_at=old)
        mock_session.execute = AsyncMock(return_value=scalar_result(character))

        result = await update_character(mock_session, character.id, user.id, {})

        assert result.updated_at > old

    @pytest.mark.asyncio
    async def test_update_missing_character_returns_none(self, mock_session, user) -> None:
        mock_session.execute = AsyncMock(return_value=scalar_result(None))

        result = await update_character(mock_session, uuid7(), user.id, {"level": 5})

        assert result is None


class TestDeleteCharacter:
    """Tests for delete_character function."""

    @pytest.mark.asyncio
    async def test_delete_existing_character(self, mock_session, user, character_factory) -> None:
        character = character_factory()
        mock_session.execute = AsyncMock(return_value=scalar_result(character))

        result = await delete_character(mock_session, character.id, user.id)

        assert result is True
        mock_session.delete.assert_awaited_once_with(character)

    @pytest.mark.asyncio
    async def test_delete_missing_character_returns_false(self, mock_session, user) -> None:
        mock_session.execute = AsyncMock(return_value=scalar_result(None))

        result = await delete_character(mock_session, uuid7(), user.id)

        assert result is False
        mock_session.delete.assert_not_called()
