"""User-related Pydantic schemas."""

from datetime import datetime

from pydantic import Field, field_validator

from .common import CamelModel


class RegisterRequest(CamelModel):
    """Schema for account registration."""

    username: str = Field(..., min_length=1, max_length=50, description="Public handle")
    password: str = Field(..., min_length=6, max_length=128)
    email: str | None = Field(None, max_length=254)
    profile_image: str | None = Field(None, description="URL of the avatar image")

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Username is required")
        return v


class LoginRequest(CamelModel):
    username: str
    password: str


class ProfileUpdateRequest(CamelModel):
    """Partial profile update; omitted fields stay unchanged."""

    username: str | None = Field(None, min_length=1, max_length=50)
    email: str | None = Field(None, max_length=254)
    profile_image: str | None = None

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("Username is required")
        return v


class UserProfile(CamelModel):
    """Public view of a user with counters derived at read time."""

    id: int
    username: str
    email: str | None = None
    profile_image: str | None = None
    created_at: datetime
    followers_count: int = 0
    following_count: int = 0
    content_count: int = 0
    is_following: bool | None = None


class AuthResponse(CamelModel):
    """Returned by register and login."""

    access_token: str
    token_type: str = "bearer"
    user: UserProfile
