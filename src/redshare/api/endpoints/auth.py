"""Registration, login and the current user's profile."""

from fastapi import APIRouter, HTTPException, status

from redshare.api.dependencies import CurrentUserDep, SessionDep, SettingsDep
from redshare.core.security import create_access_token
from redshare.schemas.user import (
    AuthResponse,
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    UserProfile,
)
from redshare.services import identity

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterRequest, db: SessionDep, settings: SettingsDep) -> AuthResponse:
    """Create an account and sign it in."""
    user = identity.create_user(
        db,
        username=payload.username,
        password=payload.password,
        email=payload.email,
        profile_image=payload.profile_image,
    )
    return AuthResponse(
        access_token=create_access_token(user.id, settings=settings),
        user=identity.to_user_profile(db, user),
    )


@router.post("/login", response_model=AuthResponse)
async def login(payload: LoginRequest, db: SessionDep, settings: SettingsDep) -> AuthResponse:
    user = identity.authenticate(db, payload.username, payload.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )
    return AuthResponse(
        access_token=create_access_token(user.id, settings=settings),
        user=identity.to_user_profile(db, user),
    )


@router.get("/user", response_model=UserProfile)
async def read_current_user(current_user: CurrentUserDep, db: SessionDep) -> UserProfile:
    return identity.to_user_profile(db, current_user)


@router.patch("/user", response_model=UserProfile)
async def update_current_user(
    payload: ProfileUpdateRequest,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> UserProfile:
    """Update username, email or profile image; omitted fields are kept."""
    user = identity.update_profile(
        db,
        current_user,
        username=payload.username,
        email=payload.email,
        profile_image=payload.profile_image,
    )
    return identity.to_user_profile(db, user)
