"""Authentication schemas."""

from enum import Enum

from pydantic import BaseModel


class AuthError(str, Enum):
    """Authentication error types."""

    INVALID_TOKEN = "invalid_token"
    EXPIRED_TOKEN = "expired_token"
    MISSING_TOKEN = "missing_token"
    USER_NOT_REGISTERED = "user_not_registered"


class FirebaseUser(BaseModel):
    """Identity verified from a Firebase ID token."""

    uid: str
    email: str
    name: str | None = None
