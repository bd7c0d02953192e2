"""Gallery pages, owner actions, likes and saves."""

from fastapi import APIRouter, Response, status
from sqlalchemy.orm import Session

from redshare.api.dependencies import CurrentUserDep, OptionalUserDep, SessionDep, viewer_id
from redshare.models import User
from redshare.schemas.common import SuccessResponse
from redshare.schemas.gallery import GalleryDetail, GalleryOut, VisibilityUpdate
from redshare.services import content, feed, interactions

router = APIRouter(prefix="/gallery", tags=["galleries"])


def _require_visible(db: Session, gallery_id: int, user: User) -> None:
    gallery = content.require_gallery(db, gallery_id)
    content.ensure_can_view(gallery, user.id)


@router.get("/{gallery_id}", response_model=GalleryDetail)
async def read_gallery(gallery_id: int, db: SessionDep, viewer: OptionalUserDep) -> GalleryDetail:
    """Return a gallery page and count the view."""
    return feed.get_gallery_detail(db, gallery_id, viewer_id=viewer_id(viewer))


@router.patch("/{gallery_id}/visibility", response_model=GalleryOut)
async def update_visibility(
    gallery_id: int,
    payload: VisibilityUpdate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> GalleryOut:
    gallery = content.set_visibility(
        db, gallery_id, actor_id=current_user.id, visibility=payload.visibility
    )
    return GalleryOut(**content.gallery_fields(gallery))


@router.delete("/{gallery_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_gallery(gallery_id: int, current_user: CurrentUserDep, db: SessionDep) -> Response:
    content.delete_gallery(db, gallery_id, actor_id=current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{gallery_id}/like", response_model=SuccessResponse)
async def like_gallery(gallery_id: int, current_user: CurrentUserDep, db: SessionDep) -> SuccessResponse:
    _require_visible(db, gallery_id, current_user)
    interactions.like_gallery(db, current_user.id, gallery_id)
    return SuccessResponse()


@router.delete("/{gallery_id}/like", response_model=SuccessResponse)
async def unlike_gallery(
    gallery_id: int, current_user: CurrentUserDep, db: SessionDep
) -> SuccessResponse:
    content.require_gallery(db, gallery_id)
    interactions.unlike_gallery(db, current_user.id, gallery_id)
    return SuccessResponse()


@router.post("/{gallery_id}/save", response_model=SuccessResponse)
async def save_gallery(gallery_id: int, current_user: CurrentUserDep, db: SessionDep) -> SuccessResponse:
    _require_visible(db, gallery_id, current_user)
    interactions.save_gallery(db, current_user.id, gallery_id)
    return SuccessResponse()


@router.delete("/{gallery_id}/save", response_model=SuccessResponse)
async def unsave_gallery(
    gallery_id: int, current_user: CurrentUserDep, db: SessionDep
) -> SuccessResponse:
    content.require_gallery(db, gallery_id)
    interactions.unsave_gallery(db, current_user.id, gallery_id)
    return SuccessResponse()
