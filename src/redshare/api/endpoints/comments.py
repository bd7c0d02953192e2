"""Comment threads on a gallery."""

from fastapi import APIRouter, status

from redshare.api.dependencies import CurrentUserDep, OptionalUserDep, SessionDep, viewer_id
from redshare.schemas.comment import CommentCreate, CommentOut, CommentThread
from redshare.services import comments, content

router = APIRouter(prefix="/gallery/{gallery_id}/comments", tags=["comments"])


@router.get("", response_model=list[CommentThread])
async def list_comments(gallery_id: int, db: SessionDep, viewer: OptionalUserDep) -> list[CommentThread]:
    """Return root comments newest first, each with its replies oldest first."""
    gallery = content.require_gallery(db, gallery_id)
    content.ensure_can_view(gallery, viewer_id(viewer))
    return comments.get_comments(db, gallery_id)


@router.post("", response_model=CommentOut, status_code=status.HTTP_201_CREATED)
async def add_comment(
    gallery_id: int,
    payload: CommentCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> CommentOut:
    gallery = content.require_gallery(db, gallery_id)
    content.ensure_can_view(gallery, current_user.id)
    comment = comments.create_comment(db, gallery_id, current_user.id, payload.text)
    return CommentOut.model_validate(comment)


@router.post(
    "/{comment_id}/replies",
    response_model=CommentOut,
    status_code=status.HTTP_201_CREATED,
)
async def add_reply(
    gallery_id: int,
    comment_id: int,
    payload: CommentCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> CommentOut:
    """Reply to a top-level comment of this gallery."""
    gallery = content.require_gallery(db, gallery_id)
    content.ensure_can_view(gallery, current_user.id)
    reply = comments.create_comment(
        db, gallery_id, current_user.id, payload.text, parent_id=comment_id
    )
    return CommentOut.model_validate(reply)
