# src/redshare/models/social.py
"""Follow edges between users."""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column

from redshare.db.session import Base
from redshare.db.time import utcnow


class Follow(Base):
    """Directed edge: ``follower_id`` follows ``following_id``.

    The composite primary key keeps at most one edge per ordered pair.
    """

    __tablename__ = "follow"
    __table_args__ = (
        CheckConstraint("follower_id <> following_id", name="ck_follow_not_self"),
        Index("ix_follow_following_id", "following_id"),
    )

    follower_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("app_user.id", ondelete="CASCADE"), primary_key=True
    )
    following_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("app_user.id", ondelete="CASCADE"), primary_key=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
