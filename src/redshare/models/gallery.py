# src/redshare/models/gallery.py
"""SQLAlchemy models for galleries and their media items."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import JSON, CheckConstraint, DateTime, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from redshare.db.session import Base
from redshare.db.time import utcnow

if TYPE_CHECKING:
    from .comment import Comment
    from .interaction import GalleryLike, GallerySave
    from .user import User

VISIBILITY_PUBLIC = "public"
VISIBILITY_PRIVATE = "private"
VISIBILITIES = (VISIBILITY_PUBLIC, VISIBILITY_PRIVATE)

FILE_TYPE_IMAGE = "image"
FILE_TYPE_VIDEO = "video"
FILE_TYPES = (FILE_TYPE_IMAGE, FILE_TYPE_VIDEO)


class Gallery(Base):
    """A titled, ordered collection of media items owned by one user."""

    __tablename__ = "gallery"
    __table_args__ = (
        CheckConstraint("visibility IN ('public', 'private')", name="ck_gallery_visibility"),
        CheckConstraint("view_count >= 0", name="ck_gallery_view_count"),
        Index("ix_gallery_owner_user_id", "owner_user_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    owner_user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("app_user.id"), nullable=False
    )
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    visibility: Mapped[str] = mapped_column(Text, nullable=False, default=VISIBILITY_PUBLIC)
    view_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    owner: Mapped[User] = relationship("User")
    # Insertion order; the first item is the thumbnail source for content cards.
    items: Mapped[list[GalleryItem]] = relationship(
        back_populates="gallery",
        cascade="all, delete-orphan",
        order_by="GalleryItem.id",
    )
    likes: Mapped[list[GalleryLike]] = relationship(cascade="all, delete-orphan")
    saves: Mapped[list[GallerySave]] = relationship(cascade="all, delete-orphan")
    comments: Mapped[list[Comment]] = relationship(cascade="all, delete-orphan")

    @property
    def is_public(self) -> bool:
        return self.visibility == VISIBILITY_PUBLIC


class GalleryItem(Base):
    """A single image or video inside a gallery."""

    __tablename__ = "gallery_item"
    __table_args__ = (
        CheckConstraint("file_type IN ('image', 'video')", name="ck_gallery_item_file_type"),
        # Only videos carry a display duration such as "0:31".
        CheckConstraint(
            "file_type = 'video' OR duration IS NULL",
            name="ck_gallery_item_duration",
        ),
        Index("ix_gallery_item_gallery_id", "gallery_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    gallery_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("gallery.id", ondelete="CASCADE"), nullable=False
    )
    # Denormalized from the gallery for query convenience.
    owner_user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("app_user.id"), nullable=False
    )
    file_url: Mapped[str] = mapped_column(Text, nullable=False)
    thumbnail_url: Mapped[str] = mapped_column(Text, nullable=False)
    file_type: Mapped[str] = mapped_column(Text, nullable=False)
    duration: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    gallery: Mapped[Gallery] = relationship(back_populates="items")
