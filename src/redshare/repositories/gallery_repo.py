"""Data access helpers for listing galleries as content cards."""
from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session, selectinload

from redshare.models import Gallery, GalleryItem, GalleryLike, User
from redshare.models.gallery import VISIBILITY_PUBLIC
from redshare.schemas.gallery import ContentCard

__all__ = ["SORT_ORDERS", "GalleryRepository"]

SORT_RECENT = "recent"
SORT_POPULAR = "popular"
SORT_VIEWS = "views"
SORT_ORDERS = (SORT_RECENT, SORT_POPULAR, SORT_VIEWS)


class GalleryRepository:
    """Thin wrapper around database access for gallery entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, gallery_id: int) -> Gallery | None:
        """Return a gallery with its items, or None."""
        result = self.session.execute(
            select(Gallery)
            .options(selectinload(Gallery.items), selectinload(Gallery.owner))
            .where(Gallery.id == gallery_id)
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()

    def count_by_owner(self, owner_user_id: int) -> int:
        return self.session.scalar(
            select(func.count()).select_from(Gallery).where(Gallery.owner_user_id == owner_user_id)
        ) or 0

    def public(self) -> Select[tuple[Gallery]]:
        """Return a select over public galleries."""
        return select(Gallery).where(Gallery.visibility == VISIBILITY_PUBLIC)

    def sorted(self, stmt: Select[tuple[Gallery]], sort_by: str) -> Select[tuple[Gallery]]:
        """Apply one of the listing orders.

        Ties fall back to ascending id (insertion order), so each order is
        total and offset pagination never repeats or skips a gallery.
        """
        if sort_by == SORT_POPULAR:
            like_counts = (
                select(GalleryLike.gallery_id, func.count().label("like_count"))
                .group_by(GalleryLike.gallery_id)
                .subquery()
            )
            return stmt.outerjoin(like_counts, like_counts.c.gallery_id == Gallery.id).order_by(
                func.coalesce(like_counts.c.like_count, 0).desc(),
                Gallery.id.asc(),
            )
        if sort_by == SORT_VIEWS:
            return stmt.order_by(Gallery.view_count.desc(), Gallery.id.asc())
        if sort_by == SORT_RECENT:
            return stmt.order_by(Gallery.created_at.desc(), Gallery.id.asc())
        raise ValueError(f"Unknown sort order: {sort_by!r}")

    def list_cards(
        self,
        stmt: Select[tuple[Gallery]],
        *,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[ContentCard]:
        """Run ``stmt`` (already filtered and ordered) and project to cards."""
        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        stmt = stmt.execution_options(populate_existing=True)
        galleries = list(self.session.execute(stmt).scalars())
        return self.to_cards(galleries)

    def to_cards(self, galleries: Sequence[Gallery]) -> list[ContentCard]:
        """Project galleries to content cards.

        Usernames are read live from the owner row; the thumbnail comes from
        each gallery's first inserted item.
        """
        if not galleries:
            return []
        gallery_ids = [g.id for g in galleries]
        owner_ids = {g.owner_user_id for g in galleries}
        usernames = {
            row.id: row.username
            for row in self.session.execute(
                select(User.id, User.username).where(User.id.in_(owner_ids))
            )
        }
        first_items = self.first_items(gallery_ids)

        cards: list[ContentCard] = []
        for gallery in galleries:
            item = first_items.get(gallery.id)
            cards.append(
                ContentCard(
                    id=gallery.id,
                    title=gallery.title,
                    username=usernames.get(gallery.owner_user_id, "unknown"),
                    thumbnail_url=item.thumbnail_url if item else None,
                    file_type=item.file_type if item else None,
                    duration=item.duration if item else None,
                    view_count=gallery.view_count,
                    created_at=gallery.created_at,
                )
            )
        return cards

    def first_items(self, gallery_ids: Sequence[int]) -> dict[int, GalleryItem]:
        """Return the lowest-id item of each gallery, keyed by gallery id."""
        first_ids = (
            select(func.min(GalleryItem.id))
            .where(GalleryItem.gallery_id.in_(gallery_ids))
            .group_by(GalleryItem.gallery_id)
        )
        items = self.session.execute(
            select(GalleryItem).where(GalleryItem.id.in_(first_ids))
        ).scalars()
        return {item.gallery_id: item for item in items}
