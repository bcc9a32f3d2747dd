"""Character sheet API endpoints.

Provides endpoints for:
- GET /api/characters - List the user's characters (dashboard)
- POST /api/characters - Create a character
- GET /api/characters/{id} - Get a character
- GET /api/characters/{id}/sheet - Get a character with derived modifiers
- PUT /api/characters/{id} - Partially update a character
- DELETE /api/characters/{id} - Delete a character

All endpoints require a registered, authenticated user. Characters owned
by other users are reported as not found.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from charsheet.auth.middleware import get_current_account
from charsheet.database import get_db
from charsheet.models import Character, User
from charsheet.schemas.character import (
    CharacterResponse,
    CharacterSheetResponse,
    CharactersListResponse,
    CharacterSummary,
)
from charsheet.services.character_service import CharacterError, CharacterService
from charsheet.services.sheet_service import build_sheet
from charsheet.services.validation_service import (
    CharacterValidationError,
    validate_create,
    validate_update,
)

router = APIRouter()

# Error mapping: CharacterError -> HTTP status code
CHARACTER_ERROR_MAP: dict[CharacterError, int] = {
    CharacterError.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def character_to_response(character: Character) -> CharacterResponse:
    """Convert Character model to CharacterResponse DTO."""
    return CharacterResponse(
        id=str(character.id),
        user_id=str(character.user_id),
        name=character.name,
        race=character.race,
        character_class=character.character_class,
        level=character.level,
        background=character.background,
        strength=character.strength,
        dexterity=character.dexterity,
        constitution=character.constitution,
        intelligence=character.intelligence,
        wisdom=character.wisdom,
        charisma=character.charisma,
        max_hp=character.max_hp,
        current_hp=character.current_hp,
        armor_class=character.armor_class,
        notes=character.notes,
        created_at=character.created_at,
        updated_at=character.updated_at,
    )


def character_to_summary(character: Character) -> CharacterSummary:
    """Convert Character model to the dashboard CharacterSummary DTO."""
    return CharacterSummary(
        id=str(character.id),
        name=character.name,
        race=character.race,
        character_class=character.character_class,
        level=character.level,
        background=character.background,
        updated_at=character.updated_at,
    )


def _validation_failed(error: CharacterValidationError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"error": "validation_failed", "fields": error.errors},
    )


def _character_error(error: CharacterError) -> HTTPException:
    return HTTPException(
        status_code=CHARACTER_ERROR_MAP.get(error, status.HTTP_500_INTERNAL_SERVER_ERROR),
        detail={"error": error.value},
    )


@router.get("/characters", response_model=CharactersListResponse)
async def list_characters_endpoint(
    user: User = Depends(get_current_account),
    session: AsyncSession = Depends(get_db),
) -> CharactersListResponse:
    """Return the user's characters, newest first."""
    characters = await CharacterService(session, user).list_characters()
    summaries = [character_to_summary(c) for c in characters]
    return CharactersListResponse(characters=summaries, total=len(summaries))


@router.post(
    "/characters",
    response_model=CharacterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_character_endpoint(
    payload: dict[str, Any] = Body(...),
    user: User = Depends(get_current_account),
    session: AsyncSession = Depends(get_db),
) -> CharacterResponse:
    """Create a character for the authenticated user.

    Raises:
        HTTPException 400: With every failing field if the payload is invalid
        HTTPException 401: If not authenticated or not registered
    """
    try:
        data = validate_create(payload)
    except CharacterValidationError as e:
        raise _validation_failed(e) from e

    character = await CharacterService(session, user).create_character(data)
    return character_to_response(character)


@router.get("/characters/{character_id}", response_model=CharacterResponse)
async def get_character_endpoint(
    character_id: str,
    user: User = Depends(get_current_account),
    session: AsyncSession = Depends(get_db),
) -> CharacterResponse:
    """Return a single character.

    Raises:
        HTTPException 404: If the character does not exist for this user
    """
    result = await CharacterService(session, user).get_character(character_id)
    if result.is_err():
        raise _character_error(result.unwrap_err())
    return character_to_response(result.unwrap())


@router.get("/characters/{character_id}/sheet", response_model=CharacterSheetResponse)
async def get_character_sheet_endpoint(
    character_id: str,
    user: User = Depends(get_current_account),
    session: AsyncSession = Depends(get_db),
) -> CharacterSheetResponse:
    """Return a character with ability modifiers and notes lines."""
    result = await CharacterService(session, user).get_character(character_id)
    if result.is_err():
        raise _character_error(result.unwrap_err())
    return build_sheet(character_to_response(result.unwrap()))


@router.put("/characters/{character_id}", response_model=CharacterResponse)
async def update_character_endpoint(
    character_id: str,
    payload: dict[str, Any] = Body(...),
    user: User = Depends(get_current_account),
    session: AsyncSession = Depends(get_db),
) -> CharacterResponse:
    """Apply the supplied fields to a character.

    Raises:
        HTTPException 400: With every failing field if the payload is invalid
        HTTPException 404: If the character does not exist for this user
    """
    try:
        data = validate_update(payload)
    except CharacterValidationError as e:
        raise _validation_failed(e) from e

    result = await CharacterService(session, user).update_character(character_id, data)
    if result.is_err():
        raise _character_error(result.unwrap_err())
    return character_to_response(result.unwrap())


@router.delete("/characters/{character_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_character_endpoint(
    character_id: str,
    user: User = Depends(get_current_account),
    session: AsyncSession = Depends(get_db),
) -> Response:
    """Delete a character.

    Raises:
        HTTPException 404: If the character does not exist for this user
    """
    result = await CharacterService(session, user).delete_character(character_id)
    if result.is_err():
        raise _character_error(result.unwrap_err())
    return Response(status_code=status.HTTP_204_NO_CONTENT)
