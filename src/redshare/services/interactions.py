"""Likes and saves: two independent per-(user, gallery) ledgers."""
from __future__ import annotations

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from redshare.core.errors import NotFoundError
from redshare.db import time as db_time
from redshare.models import Gallery, GalleryLike, GallerySave, User

__all__ = [
    "is_gallery_liked",
    "is_gallery_saved",
    "like_count",
    "like_gallery",
    "save_gallery",
    "unlike_gallery",
    "unsave_gallery",
]

logger = logging.getLogger(__name__)

Ledger = type[GalleryLike] | type[GallerySave]


def _add_relation(db: Session, model: Ledger, user_id: int, gallery_id: int) -> bool:
    if db.get(Gallery, gallery_id) is None:
        raise NotFoundError("Gallery not found")
    if db.get(User, user_id) is None:
        raise NotFoundError("User not found")
    if _has_relation(db, model, user_id, gallery_id):
        logger.debug("%s(%s, %s) already recorded", model.__name__, user_id, gallery_id)
        return False

    db.add(model(user_id=user_id, gallery_id=gallery_id, created_at=db_time.utcnow()))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        return False
    return True


def _remove_relation(db: Session, model: Ledger, user_id: int, gallery_id: int) -> bool:
    result = db.execute(
        delete(model).where(model.user_id == user_id, model.gallery_id == gallery_id)
    )
    db.commit()
    return bool(result.rowcount)


def _has_relation(db: Session, model: Ledger, user_id: int, gallery_id: int) -> bool:
    return db.get(model, (user_id, gallery_id)) is not None


def like_gallery(db: Session, user_id: int, gallery_id: int) -> bool:
    """Record a like; a repeated like is a no-op that returns False."""
    return _add_relation(db, GalleryLike, user_id, gallery_id)


def unlike_gallery(db: Session, user_id: int, gallery_id: int) -> bool:
    return _remove_relation(db, GalleryLike, user_id, gallery_id)


def is_gallery_liked(db: Session, user_id: int, gallery_id: int) -> bool:
    return _has_relation(db, GalleryLike, user_id, gallery_id)


def save_gallery(db: Session, user_id: int, gallery_id: int) -> bool:
    """Bookmark a gallery; a repeated save is a no-op that returns False."""
    return _add_relation(db, GallerySave, user_id, gallery_id)


def unsave_gallery(db: Session, user_id: int, gallery_id: int) -> bool:
    return _remove_relation(db, GallerySave, user_id, gallery_id)


def is_gallery_saved(db: Session, user_id: int, gallery_id: int) -> bool:
    return _has_relation(db, GallerySave, user_id, gallery_id)


def like_count(db: Session, gallery_id: int) -> int:
    return db.scalar(
        select(func.count()).select_from(GalleryLike).where(GalleryLike.gallery_id == gallery_id)
    ) or 0
