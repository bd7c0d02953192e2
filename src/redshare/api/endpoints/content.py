"""Content listings, the home feed, saved galleries and uploads."""

from typing import Annotated

from fastapi import APIRouter, Query, status

from redshare.api.dependencies import CurrentUserDep, PageDep, SessionDep
from redshare.schemas.gallery import ContentCard, ContentSort, GalleryOut, UploadRequest
from redshare.services import content, feed

router = APIRouter(tags=["content"])


@router.get("/content", response_model=list[ContentCard])
async def list_content(
    db: SessionDep,
    page: PageDep,
    sort_by: Annotated[ContentSort, Query(alias="sortBy")] = "recent",
) -> list[ContentCard]:
    """List public galleries ordered by recency, likes or views."""
    return content.get_all_content(db, limit=page.limit, offset=page.offset, sort_by=sort_by)


@router.get("/feed", response_model=list[ContentCard])
async def read_feed(
    current_user: CurrentUserDep,
    db: SessionDep,
    page: PageDep,
) -> list[ContentCard]:
    return feed.get_feed_content(db, current_user.id, limit=page.limit, offset=page.offset)


@router.get("/saved", response_model=list[ContentCard])
async def read_saved(
    current_user: CurrentUserDep,
    db: SessionDep,
    page: PageDep,
) -> list[ContentCard]:
    return feed.get_saved_content(db, current_user.id, limit=page.limit, offset=page.offset)


@router.post("/upload", response_model=GalleryOut, status_code=status.HTTP_201_CREATED)
async def upload_gallery(
    payload: UploadRequest,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> GalleryOut:
    """Create a gallery from already-processed media items.

    File storage and thumbnail extraction happen before this call; the
    request carries the resulting URLs.
    """
    gallery = content.create_gallery(
        db,
        owner_user_id=current_user.id,
        title=payload.title,
        description=payload.description,
        tags=content.parse_tags(payload.tags),
        visibility=payload.visibility,
        items=payload.items,
    )
    return GalleryOut(**content.gallery_fields(gallery))
