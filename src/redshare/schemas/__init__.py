# src/redshare/schemas/__init__.py
"""Pydantic schemas describing the RedShare wire format."""

from .comment import CommentCreate, CommentOut, CommentReply, CommentThread
from .common import SuccessResponse
from .gallery import (
    ContentCard,
    GalleryDetail,
    GalleryItemIn,
    GalleryItemOut,
    GalleryOut,
    UploadRequest,
    VisibilityUpdate,
)
from .user import (
    AuthResponse,
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    UserProfile,
)

__all__ = [
    "AuthResponse",
    "CommentCreate",
    "CommentOut",
    "CommentReply",
    "CommentThread",
    "ContentCard",
    "GalleryDetail",
    "GalleryItemIn",
    "GalleryItemOut",
    "GalleryOut",
    "LoginRequest",
    "ProfileUpdateRequest",
    "RegisterRequest",
    "SuccessResponse",
    "UploadRequest",
    "UserProfile",
    "VisibilityUpdate",
]
