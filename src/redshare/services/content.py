"""Gallery creation, lookup and content listings."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from redshare.core.errors import ForbiddenError, InvalidGalleryError, NotFoundError
from redshare.db import time as db_time
from redshare.models import Comment, Gallery, GalleryItem, GalleryLike, GallerySave, User
from redshare.models.gallery import FILE_TYPE_VIDEO, FILE_TYPES, VISIBILITIES, VISIBILITY_PUBLIC
from redshare.repositories import GalleryRepository
from redshare.repositories.gallery_repo import SORT_RECENT
from redshare.schemas.gallery import ContentCard, GalleryItemIn, GalleryItemOut

__all__ = [
    "content_count",
    "create_gallery",
    "delete_gallery",
    "ensure_can_view",
    "gallery_fields",
    "get_all_content",
    "get_gallery_by_id",
    "get_user_galleries",
    "increment_view_count",
    "parse_tags",
    "require_gallery",
    "set_visibility",
]

logger = logging.getLogger(__name__)


def parse_tags(raw: str | None) -> list[str]:
    """Split a comma-separated tag string, dropping blanks and keeping order."""
    if not raw:
        return []
    return [tag.strip() for tag in raw.split(",") if tag.strip()]


def _item_fields(item: GalleryItemIn | dict[str, Any]) -> dict[str, Any]:
    if isinstance(item, GalleryItemIn):
        return item.model_dump()
    return dict(item)


def create_gallery(
    db: Session,
    *,
    owner_user_id: int,
    title: str,
    items: Sequence[GalleryItemIn | dict[str, Any]],
    description: str | None = None,
    tags: Iterable[str] = (),
    visibility: str = VISIBILITY_PUBLIC,
) -> Gallery:
    """Store a gallery and its items in one transaction.

    Items keep the order they were given in; only videos keep a duration.

    Raises:
        NotFoundError: If the owner does not exist.
        InvalidGalleryError: For a blank title, no items, an unknown
            visibility or an unknown file type.
    """
    if db.get(User, owner_user_id) is None:
        raise NotFoundError("User not found")
    title = title.strip()
    if not title:
        raise InvalidGalleryError("Title is required")
    if not items:
        raise InvalidGalleryError("At least one file is required")
    if visibility not in VISIBILITIES:
        raise InvalidGalleryError(f"Unknown visibility: {visibility}")

    now = db_time.utcnow()
    gallery = Gallery(
        title=title,
        description=description,
        owner_user_id=owner_user_id,
        tags=[tag for tag in tags if tag],
        visibility=visibility,
        view_count=0,
        created_at=now,
        updated_at=now,
    )
    for raw in items:
        fields = _item_fields(raw)
        file_type = fields.get("file_type")
        if file_type not in FILE_TYPES:
            raise InvalidGalleryError(f"Unknown file type: {file_type}")
        gallery.items.append(
            GalleryItem(
                owner_user_id=owner_user_id,
                file_url=fields["file_url"],
                thumbnail_url=fields["thumbnail_url"],
                file_type=file_type,
                duration=fields.get("duration") if file_type == FILE_TYPE_VIDEO else None,
                created_at=now,
            )
        )

    db.add(gallery)
    db.commit()
    db.refresh(gallery)
    logger.info(
        "User %s created gallery %s with %d item(s)",
        owner_user_id,
        gallery.id,
        len(gallery.items),
    )
    return gallery


def get_gallery_by_id(db: Session, gallery_id: int) -> Gallery | None:
    return GalleryRepository(db).get_by_id(gallery_id)


def require_gallery(db: Session, gallery_id: int) -> Gallery:
    gallery = get_gallery_by_id(db, gallery_id)
    if gallery is None:
        raise NotFoundError("Gallery not found")
    return gallery


def ensure_can_view(gallery: Gallery, viewer_id: int | None) -> None:
    """Raise ForbiddenError unless the gallery is public or owned by the viewer."""
    if gallery.is_public or gallery.owner_user_id == viewer_id:
        return
    raise ForbiddenError()


def get_user_galleries(
    db: Session,
    user_id: int,
    *,
    include_private: bool = True,
    limit: int | None = None,
    offset: int = 0,
) -> list[ContentCard]:
    """Return a user's galleries as cards, newest first."""
    repo = GalleryRepository(db)
    stmt = select(Gallery).where(Gallery.owner_user_id == user_id)
    if not include_private:
        stmt = stmt.where(Gallery.visibility == VISIBILITY_PUBLIC)
    return repo.list_cards(repo.sorted(stmt, SORT_RECENT), limit=limit, offset=offset)


def get_all_content(
    db: Session,
    limit: int = 20,
    offset: int = 0,
    sort_by: str = SORT_RECENT,
) -> list[ContentCard]:
    """Return public galleries as cards in the requested order.

    Args:
        db: Database session.
        limit: Maximum number of cards.
        offset: Number of cards to skip.
        sort_by: ``recent``, ``popular`` (like count) or ``views``.

    Raises:
        ValueError: For an unknown ``sort_by``.
    """
    repo = GalleryRepository(db)
    return repo.list_cards(repo.sorted(repo.public(), sort_by), limit=limit, offset=offset)


def increment_view_count(db: Session, gallery_id: int) -> None:
    """Add one view; evaluated in SQL so concurrent bumps are not lost."""
    db.execute(
        update(Gallery)
        .where(Gallery.id == gallery_id)
        .values(view_count=Gallery.view_count + 1)
        .execution_options(synchronize_session=False)
    )
    db.commit()
    logger.debug("Gallery %s viewed", gallery_id)


def content_count(db: Session, user_id: int) -> int:
    return GalleryRepository(db).count_by_owner(user_id)


def set_visibility(db: Session, gallery_id: int, *, actor_id: int, visibility: str) -> Gallery:
    """Change a gallery's visibility; only the owner may do this."""
    if visibility not in VISIBILITIES:
        raise InvalidGalleryError(f"Unknown visibility: {visibility}")
    gallery = require_gallery(db, gallery_id)
    if gallery.owner_user_id != actor_id:
        raise ForbiddenError("Only the owner can change visibility")

    gallery.visibility = visibility
    gallery.updated_at = db_time.utcnow()
    db.add(gallery)
    db.commit()
    db.refresh(gallery)
    logger.info("Gallery %s is now %s", gallery_id, visibility)
    return gallery


def delete_gallery(db: Session, gallery_id: int, *, actor_id: int) -> None:
    """Delete a gallery with its items, likes, saves and comments.

    Raises:
        NotFoundError: If the gallery does not exist.
        ForbiddenError: If ``actor_id`` is not the owner.
    """
    gallery = require_gallery(db, gallery_id)
    if gallery.owner_user_id != actor_id:
        raise ForbiddenError("Only the owner can delete this gallery")

    # Replies first, so no comment row outlives its parent.
    db.execute(
        delete(Comment).where(Comment.gallery_id == gallery_id, Comment.parent_id.is_not(None))
    )
    db.execute(delete(Comment).where(Comment.gallery_id == gallery_id))
    db.execute(delete(GalleryLike).where(GalleryLike.gallery_id == gallery_id))
    db.execute(delete(GallerySave).where(GallerySave.gallery_id == gallery_id))
    db.execute(delete(GalleryItem).where(GalleryItem.gallery_id == gallery_id))
    db.execute(delete(Gallery).where(Gallery.id == gallery_id))
    db.commit()
    logger.info("User %s deleted gallery %s", actor_id, gallery_id)


def gallery_fields(gallery: Gallery) -> dict[str, Any]:
    """Return the ``GalleryOut`` fields of a gallery with its owner's current username."""
    return {
        "id": gallery.id,
        "title": gallery.title,
        "description": gallery.description,
        "owner_user_id": gallery.owner_user_id,
        "username": gallery.owner.username,
        "tags": list(gallery.tags or []),
        "visibility": gallery.visibility,
        "view_count": gallery.view_count,
        "created_at": gallery.created_at,
        "updated_at": gallery.updated_at,
        "items": [GalleryItemOut.model_validate(item) for item in gallery.items],
    }
