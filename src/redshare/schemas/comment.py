"""Comment schemas.

Roots and replies are distinct shapes: only a ``CommentThread`` carries
``replies``, and a ``CommentReply`` has none, so a reply can never nest.
"""

from datetime import datetime

from pydantic import Field

from .common import CamelModel


class CommentCreate(CamelModel):
    text: str = Field(..., max_length=2000)


class _CommentBase(CamelModel):
    id: int
    gallery_id: int
    author_user_id: int
    username: str
    text: str
    created_at: datetime


class CommentOut(_CommentBase):
    """A freshly created comment or reply."""

    parent_id: int | None = None


class CommentReply(_CommentBase):
    parent_id: int


class CommentThread(_CommentBase):
    """A root comment with its replies in reading order."""

    replies: list[CommentReply] = []
