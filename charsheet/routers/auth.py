"""Account endpoints.

Provides endpoints for:
- POST /api/auth/register - Register the Firebase identity as a user
- GET /api/auth/me - Get the registered user's profile

Sign-in itself happens against Firebase; these endpoints only link the
verified identity to a local account that owns characters.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from charsheet.auth.middleware import get_current_user
from charsheet.auth.schemas import FirebaseUser
from charsheet.database import get_db
from charsheet.models import User
from charsheet.repositories.user_repository import (
    DuplicateUserError,
    create_user,
    get_user_by_firebase_uid,
)
from charsheet.schemas.user import RegisterRequest, UserResponse
from charsheet.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


def user_to_response(user: User) -> UserResponse:
    """Convert User model to UserResponse DTO."""
    return UserResponse(
        id=str(user.id),
        name=user.name,
        email=user.email,
        created_at=user.created_at,
    )


def _already_registered() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail={"error": "user_already_registered"},
    )


@router.post(
    "/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED
)
async def register_endpoint(
    request: RegisterRequest,
    current_user: FirebaseUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> UserResponse:
    """Register the authenticated Firebase identity.

    Raises:
        HTTPException 401: If not authenticated
        HTTPException 409: If this identity is already registered
    """
    try:
        user = await create_user(
            session=session,
            firebase_uid=current_user.uid,
            email=current_user.email,
            name=request.name,
        )
        await session.commit()
        await session.refresh(user)
    except DuplicateUserError as e:
        raise _already_registered() from e
    except IntegrityError as e:
        # A concurrent registration won the unique firebase_uid constraint
        await session.rollback()
        logger.warning(f"Concurrent registration for {current_user.uid}")
        raise _already_registered() from e

    logger.info(f"Registered user {user.id}")
    return user_to_response(user)


@router.get("/me", response_model=UserResponse)
async def me_endpoint(
    current_user: FirebaseUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> UserResponse:
    """Return the registered profile of the authenticated identity.

    Raises:
        HTTPException 404: If the identity has not registered yet
    """
    user = await get_user_by_firebase_uid(session, current_user.uid)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "user_not_found"},
        )
    return user_to_response(user)
