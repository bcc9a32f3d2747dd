"""Account schemas for API requests and responses."""

from datetime import datetime

from pydantic import BaseModel, field_validator


class RegisterRequest(BaseModel):
    """Request body for POST /api/auth/register endpoint.

    Attributes:
        name: Display name, non-empty, max 255 characters
    """

    name: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is non-empty and within length limit."""
        if not v or not v.strip():
            raise ValueError("Name cannot be empty")
        if len(v) > 255:
            raise ValueError("Name must be 255 characters or less")
        return v.strip()


class UserResponse(BaseModel):
    """Response model for account endpoints."""

    id: str
    name: str
    email: str
    created_at: datetime
