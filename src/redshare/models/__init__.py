# src/redshare/models/__init__.py
"""SQLAlchemy models for the RedShare application."""

from .comment import Comment
from .gallery import Gallery, GalleryItem
from .interaction import GalleryLike, GallerySave
from .social import Follow
from .user import User

__all__ = [
    "Comment",
    "Follow",
    "Gallery", "GalleryItem",
    "GalleryLike", "GallerySave",
    "User",
]
