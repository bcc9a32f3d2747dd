"""Character API client.

Async client for the character endpoints. Payloads are validated locally
before any request is made; every failed request is raised as
CollaboratorError with the server's message, whatever the status code.
"""

from collections.abc import Mapping
from typing import Any, Optional

import httpx

from charsheet.config import get_settings
from charsheet.schemas.character import (
    CharacterResponse,
    CharacterSheetResponse,
    CharactersListResponse,
    CharacterSummary,
)
from charsheet.services.validation_service import validate_create, validate_update
from charsheet.utils.logging import get_logger

logger = get_logger(__name__)


class CollaboratorError(Exception):
    """Exception raised when a call to the character API fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def extract_error_message(response: httpx.Response) -> str:
    """Pull a human-readable message out of an error response.

    Handles ``{"detail": {"error": ...}}``, ``{"detail": "..."}`` and
    ``{"error": "..."}`` bodies, falling back to the status line.
    """
    fallback = f"Request failed with status {response.status_code}"
    try:
        body = response.json()
    except ValueError:
        return response.text or fallback

    if not isinstance(body, dict):
        return fallback

    detail = body.get("detail", body)
    if isinstance(detail, str):
        return detail
    if isinstance(detail, dict) and isinstance(detail.get("error"), str):
        return detail["error"]
    return fallback


class CharacterApiClient:
    """Client for the character API HTTP operations."""

    def __init__(
        self,
        id_token: str,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize client with a Firebase ID token.

        Args:
            id_token: Firebase ID token of the signed-in user
            base_url: API root, defaults to settings.api_base_url
            timeout: Request timeout in seconds, defaults to settings
            transport: Optional httpx transport (used by tests)
        """
        settings = get_settings()
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.api_timeout_seconds
        self.transport = transport
        self.headers = {
            "Authorization": f"Bearer {id_token}",
            "Accept": "application/json",
        }

    async def _request(
        self, method: str, path: str, json: dict[str, Any] | None = None
    ) -> httpx.Response:
        url = f"{self.base_url}/api{path}"
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.request(
                    method, url, headers=self.headers, json=json, timeout=self.timeout
                )
        except httpx.HTTPError as e:
            logger.error(f"Character API {method} {path} failed: {e}")
            raise CollaboratorError(f"Could not reach character API: {e}") from e

        if response.is_error:
            message = extract_error_message(response)
            logger.error(
                f"Character API error: {method} {path} -> "
                f"{response.status_code} - {message}"
            )
            raise CollaboratorError(message, status_code=response.status_code)

        return response

    async def list_characters(self) -> list[CharacterSummary]:
        """List the signed-in user's characters, newest first.

        Raises:
            CollaboratorError: If the API call fails
        """
        response = await self._request("GET", "/characters")
        return CharactersListResponse.model_validate(response.json()).characters

    async def get_character(self, character_id: str) -> CharacterResponse:
        """Fetch a full character record.

        Raises:
            CollaboratorError: If the API call fails
        """
        response = await self._request("GET", f"/characters/{character_id}")
        return CharacterResponse.model_validate(response.json())

    async def get_character_sheet(self, character_id: str) -> CharacterSheetResponse:
        """Fetch the sheet view (abilities with modifiers) of a character.

        Raises:
            CollaboratorError: If the API call fails
        """
        response = await self._request("GET", f"/characters/{character_id}/sheet")
        return CharacterSheetResponse.model_validate(response.json())

    async def create_character(self, payload: Mapping[str, Any]) -> CharacterResponse:
        """Validate and create a character.

        Raises:
            CharacterValidationError: If the payload is invalid; nothing is sent
            CollaboratorError: If the API call fails
        """
        data = validate_create(payload)
        response = await self._request(
            "POST", "/characters", json=data.model_dump(mode="json", by_alias=True)
        )
        return CharacterResponse.model_validate(response.json())

    async def update_character(
        self, character_id: str, payload: Mapping[str, Any]
    ) -> CharacterResponse:
        """Validate and apply a partial update.

        Raises:
            CharacterValidationError: If the payload is invalid; nothing is sent
            CollaboratorError: If the API call fails
        """
        data = validate_update(payload)
        response = await self._request(
            "PUT",
            f"/characters/{character_id}",
            json=data.model_dump(mode="json", by_alias=True, exclude_unset=True),
        )
        return CharacterResponse.model_validate(response.json())

    async def delete_character(self, character_id: str) -> None:
        """Delete a character.

        Raises:
            CollaboratorError: If the API call fails (including not found)
        """
        await self._request("DELETE", f"/characters/{character_id}")
