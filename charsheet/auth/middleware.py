"""Firebase Authentication dependencies for FastAPI.

- get_current_user: verify the Bearer ID token with Firebase
- get_current_account: resolve the verified identity to a registered User
"""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from firebase_admin import auth
from sqlalchemy.ext.asyncio import AsyncSession

from charsheet.auth.schemas import AuthError, FirebaseUser
from charsheet.database import get_db
from charsheet.models import User
from charsheet.repositories.user_repository import get_user_by_firebase_uid

security = HTTPBearer(auto_error=False)


def _unauthorized(error: AuthError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={"error": error.value},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> FirebaseUser:
    """
    Verify Firebase ID Token and return user information.

    Args:
        credentials: HTTP Bearer credentials from Authorization header.

    Returns:
        FirebaseUser with uid, email and display name.

    Raises:
        HTTPException: 401 if token is missing, invalid, or expired.
    """
    if credentials is None:
        raise _unauthorized(AuthError.MISSING_TOKEN)

    if credentials.scheme.lower() != "bearer":
        raise _unauthorized(AuthError.INVALID_TOKEN)

    try:
        decoded_token = auth.verify_id_token(credentials.credentials)
    except Exception as e:
        error_type = (
            AuthError.EXPIRED_TOKEN
            if "expired" in str(e).lower()
            else AuthError.INVALID_TOKEN
        )
        raise _unauthorized(error_type) from e

    return FirebaseUser(
        uid=decoded_token["uid"],
        email=decoded_token.get("email", ""),
        name=decoded_token.get("name"),
    )


async def get_current_account(
    current_user: FirebaseUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> User:
    """Return the registered User for the verified Firebase identity.

    Raises:
        HTTPException: 401 if the identity has not registered yet.
    """
    user = await get_user_by_firebase_uid(session, current_user.uid)
    if user is None:
        raise _unauthorized(AuthError.USER_NOT_REGISTERED)
    return user
