"""Public profiles, per-user content and follow toggles."""

from fastapi import APIRouter
from sqlalchemy.orm import Session

from redshare.api.dependencies import (
    CurrentUserDep,
    OptionalUserDep,
    PageDep,
    SessionDep,
    viewer_id,
)
from redshare.core.errors import NotFoundError
from redshare.models import User
from redshare.schemas.common import SuccessResponse
from redshare.schemas.gallery import ContentCard
from redshare.schemas.user import UserProfile
from redshare.services import content, identity, social_graph

router = APIRouter(prefix="/users", tags=["users"])


def _get_user_or_404(db: Session, username: str) -> User:
    user = identity.get_user_by_username(db, username)
    if user is None:
        raise NotFoundError("User not found")
    return user


@router.get("/{username}", response_model=UserProfile)
async def read_profile(username: str, db: SessionDep, viewer: OptionalUserDep) -> UserProfile:
    """Return a profile; ``isFollowing`` is set for a signed-in, different viewer."""
    user = _get_user_or_404(db, username)
    return identity.to_user_profile(db, user, viewer_id=viewer_id(viewer))


@router.get("/{username}/content", response_model=list[ContentCard])
async def read_user_content(
    username: str,
    db: SessionDep,
    viewer: OptionalUserDep,
    page: PageDep,
) -> list[ContentCard]:
    """List a user's galleries; private ones are shown only to their owner."""
    user = _get_user_or_404(db, username)
    return content.get_user_galleries(
        db,
        user.id,
        include_private=viewer_id(viewer) == user.id,
        limit=page.limit,
        offset=page.offset,
    )


@router.post("/{username}/follow", response_model=SuccessResponse)
async def follow_user(username: str, current_user: CurrentUserDep, db: SessionDep) -> SuccessResponse:
    user = _get_user_or_404(db, username)
    social_graph.follow(db, current_user.id, user.id)
    return SuccessResponse()


@router.delete("/{username}/follow", response_model=SuccessResponse)
async def unfollow_user(
    username: str, current_user: CurrentUserDep, db: SessionDep
) -> SuccessResponse:
    user = _get_user_or_404(db, username)
    social_graph.unfollow(db, current_user.id, user.id)
    return SuccessResponse()
