# src/redshare/models/comment.py
"""Gallery comments and their single level of replies."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from redshare.db.session import Base
from redshare.db.time import utcnow


class Comment(Base):
    """A comment on a gallery.

    Root comments have ``parent_id = NULL``; replies point at a root comment of
    the same gallery. ``username`` is captured when the comment is written and
    is not updated when the author is renamed.
    """

    __tablename__ = "comment"
    __table_args__ = (
        Index("ix_comment_gallery_id", "gallery_id"),
        Index("ix_comment_parent_id", "parent_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    gallery_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("gallery.id", ondelete="CASCADE"), nullable=False
    )
    author_user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("app_user.id"), nullable=False
    )
    username: Mapped[str] = mapped_column(Text, nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    parent_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("comment.id", ondelete="CASCADE"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    parent: Mapped[Comment | None] = relationship(
        remote_side=[id], back_populates="replies"
    )
    replies: Mapped[list[Comment]] = relationship(back_populates="parent")

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None
