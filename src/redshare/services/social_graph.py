"""Directed follow edges between users."""
from __future__ import annotations

import logging

from sqlalchemy import Select, delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from redshare.core.errors import NotFoundError, SelfFollowError
from redshare.db import time as db_time
from redshare.models import Follow, User

__all__ = [
    "follow",
    "followers_count",
    "following_count",
    "following_ids",
    "is_following",
    "unfollow",
]

logger = logging.getLogger(__name__)


def follow(db: Session, follower_id: int, following_id: int) -> bool:
    """Create the edge ``follower_id -> following_id``.

    Returns:
        True if a new edge was stored, False if it already existed.

    Raises:
        SelfFollowError: If both ids are the same user.
        NotFoundError: If either user does not exist.
    """
    if follower_id == following_id:
        raise SelfFollowError()
    if db.get(User, following_id) is None or db.get(User, follower_id) is None:
        raise NotFoundError("User not found")
    if is_following(db, follower_id, following_id):
        logger.debug("User %s already follows %s", follower_id, following_id)
        return False

    db.add(
        Follow(
            follower_id=follower_id,
            following_id=following_id,
            created_at=db_time.utcnow(),
        )
    )
    try:
        db.commit()
    except IntegrityError:
        # A concurrent request stored the same edge first.
        db.rollback()
        return False
    logger.info("User %s followed %s", follower_id, following_id)
    return True


def unfollow(db: Session, follower_id: int, following_id: int) -> bool:
    """Remove the edge if present; returns whether anything was removed."""
    result = db.execute(
        delete(Follow).where(
            Follow.follower_id == follower_id,
            Follow.following_id == following_id,
        )
    )
    db.commit()
    removed = bool(result.rowcount)
    if removed:
        logger.info("User %s unfollowed %s", follower_id, following_id)
    return removed


def is_following(db: Session, follower_id: int, following_id: int) -> bool:
    return db.get(Follow, (follower_id, following_id)) is not None


def followers_count(db: Session, user_id: int) -> int:
    return db.scalar(
        select(func.count()).select_from(Follow).where(Follow.following_id == user_id)
    ) or 0


def following_count(db: Session, user_id: int) -> int:
    return db.scalar(
        select(func.count()).select_from(Follow).where(Follow.follower_id == user_id)
    ) or 0


def following_ids(user_id: int) -> Select[tuple[int]]:
    """Return a select of the ids ``user_id`` follows, for use as a subquery."""
    return select(Follow.following_id).where(Follow.follower_id == user_id)
