"""Viewer-relative queries: the home feed, saved list and gallery page."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from redshare.core.errors import NotFoundError
from redshare.models import Gallery, GallerySave
from redshare.models.gallery import VISIBILITY_PUBLIC
from redshare.repositories import GalleryRepository
from redshare.repositories.gallery_repo import SORT_RECENT
from redshare.schemas.gallery import ContentCard, GalleryDetail
from redshare.services import comments, content, interactions, social_graph

__all__ = ["get_feed_content", "get_gallery_detail", "get_saved_content"]


def get_feed_content(
    db: Session, user_id: int, limit: int = 20, offset: int = 0
) -> list[ContentCard]:
    """Public galleries from accounts ``user_id`` follows, newest first.

    Only direct follows count; a user with no follows gets an empty feed.
    """
    repo = GalleryRepository(db)
    stmt = repo.public().where(Gallery.owner_user_id.in_(social_graph.following_ids(user_id)))
    return repo.list_cards(repo.sorted(stmt, SORT_RECENT), limit=limit, offset=offset)


def get_saved_content(
    db: Session, user_id: int, limit: int = 20, offset: int = 0
) -> list[ContentCard]:
    """Galleries the user saved, newest first.

    A saved gallery that has since turned private is hidden unless the user
    owns it.
    """
    repo = GalleryRepository(db)
    saved_ids = select(GallerySave.gallery_id).where(GallerySave.user_id == user_id)
    stmt = select(Gallery).where(
        Gallery.id.in_(saved_ids),
        (Gallery.visibility == VISIBILITY_PUBLIC) | (Gallery.owner_user_id == user_id),
    )
    return repo.list_cards(repo.sorted(stmt, SORT_RECENT), limit=limit, offset=offset)


def get_gallery_detail(
    db: Session, gallery_id: int, *, viewer_id: int | None = None
) -> GalleryDetail:
    """Load a gallery page and record the view.

    The view is counted before the payload is built, so the returned
    ``view_count`` includes this visit.

    Raises:
        NotFoundError: If the gallery does not exist.
        ForbiddenError: If it is private and the viewer is not the owner.
    """
    gallery = content.get_gallery_by_id(db, gallery_id)
    if gallery is None:
        raise NotFoundError("Gallery not found")
    content.ensure_can_view(gallery, viewer_id)

    content.increment_view_count(db, gallery_id)
    gallery = content.require_gallery(db, gallery_id)

    detail = GalleryDetail(
        **content.gallery_fields(gallery),
        likes_count=interactions.like_count(db, gallery_id),
        comments_count=comments.comments_count(db, gallery_id),
    )
    if viewer_id is not None:
        is_own = gallery.owner_user_id == viewer_id
        detail.is_own_gallery = is_own
        if not is_own:
            detail.is_following = social_graph.is_following(db, viewer_id, gallery.owner_user_id)
        detail.is_liked = interactions.is_gallery_liked(db, viewer_id, gallery_id)
        detail.is_saved = interactions.is_gallery_saved(db, viewer_id, gallery_id)
    return detail
