# src/redshare/models/interaction.py
"""Models capturing like and save interactions on galleries."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column

from redshare.db.session import Base
from redshare.db.time import utcnow


class GalleryLike(Base):
    """Per-user like on a gallery."""

    __tablename__ = "gallery_like"
    __table_args__ = (Index("ix_gallery_like_gallery_id", "gallery_id"),)

    # Composite primary key prevents duplicate likes from the same user.
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("app_user.id", ondelete="CASCADE"), primary_key=True
    )
    gallery_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("gallery.id", ondelete="CASCADE"), primary_key=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )


class GallerySave(Base):
    """Per-user bookmark of a gallery; independent of likes."""

    __tablename__ = "gallery_save"
    __table_args__ = (Index("ix_gallery_save_gallery_id", "gallery_id"),)

    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("app_user.id", ondelete="CASCADE"), primary_key=True
    )
    gallery_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("gallery.id", ondelete="CASCADE"), primary_key=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
