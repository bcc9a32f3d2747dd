"""Authentication module: Firebase ID token verification."""

from charsheet.auth.middleware import get_current_account, get_current_user
from charsheet.auth.schemas import AuthError, FirebaseUser

__all__ = ["get_current_account", "get_current_user", "AuthError", "FirebaseUser"]
