"""Two-level comment threads on galleries."""
from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from redshare.core.errors import EmptyTextError, InvalidReplyTargetError, NotFoundError
from redshare.db import time as db_time
from redshare.models import Comment, Gallery, User
from redshare.schemas.comment import CommentReply, CommentThread

__all__ = ["comments_count", "create_comment", "get_comments"]

logger = logging.getLogger(__name__)


def create_comment(
    db: Session,
    gallery_id: int,
    author_id: int,
    text: str,
    parent_id: int | None = None,
) -> Comment:
    """Add a root comment, or a reply when ``parent_id`` is given.

    The author's current username is copied onto the comment.

    Raises:
        EmptyTextError: If ``text`` is blank.
        NotFoundError: If the gallery, author or parent comment is missing.
        InvalidReplyTargetError: If the parent is a reply or belongs to
            another gallery.
    """
    text = text.strip()
    if not text:
        raise EmptyTextError()
    if db.get(Gallery, gallery_id) is None:
        raise NotFoundError("Gallery not found")
    author = db.get(User, author_id)
    if author is None:
        raise NotFoundError("User not found")

    if parent_id is not None:
        parent = db.get(Comment, parent_id)
        if parent is None:
            raise NotFoundError("Comment not found")
        if parent.gallery_id != gallery_id or parent.is_reply:
            raise InvalidReplyTargetError()

    comment = Comment(
        gallery_id=gallery_id,
        author_user_id=author_id,
        username=author.username,
        text=text,
        parent_id=parent_id,
        created_at=db_time.utcnow(),
    )
    db.add(comment)
    db.commit()
    db.refresh(comment)
    logger.debug("Comment %s added to gallery %s", comment.id, gallery_id)
    return comment


def _fields(comment: Comment) -> dict:
    return {
        "id": comment.id,
        "gallery_id": comment.gallery_id,
        "author_user_id": comment.author_user_id,
        "username": comment.username,
        "text": comment.text,
        "created_at": comment.created_at,
    }


def get_comments(db: Session, gallery_id: int) -> list[CommentThread]:
    """Return root comments newest first, each with replies oldest first."""
    rows = db.scalars(
        select(Comment)
        .where(Comment.gallery_id == gallery_id)
        .order_by(Comment.created_at.asc(), Comment.id.asc())
    ).all()

    replies: dict[int, list[CommentReply]] = {}
    roots: list[Comment] = []
    for row in rows:
        if row.parent_id is None:
            roots.append(row)
        else:
            replies.setdefault(row.parent_id, []).append(
                CommentReply(**_fields(row), parent_id=row.parent_id)
            )

    roots.sort(key=lambda c: (c.created_at, c.id), reverse=True)
    threads = []
    for root in roots:
        threads.append(CommentThread(**_fields(root), replies=replies.get(root.id, [])))
    return threads


def comments_count(db: Session, gallery_id: int) -> int:
    """Count roots and replies together."""
    return db.scalar(
        select(func.count()).select_from(Comment).where(Comment.gallery_id == gallery_id)
    ) or 0
