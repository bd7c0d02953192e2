"""Gallery and content-card schemas."""

from datetime import datetime
from typing import Literal

from pydantic import Field, model_validator

from .common import CamelModel

Visibility = Literal["public", "private"]
FileType = Literal["image", "video"]
ContentSort = Literal["recent", "popular", "views"]


class GalleryItemIn(CamelModel):
    """One processed media file handed over by the upload pipeline."""

    file_url: str = Field(..., min_length=1)
    thumbnail_url: str = Field(..., min_length=1)
    file_type: FileType
    duration: str | None = Field(None, description="Display duration, videos only (e.g. '0:31')")

    @model_validator(mode="after")
    def _drop_duration_for_images(self) -> "GalleryItemIn":
        if self.file_type != "video":
            self.duration = None
        return self


class UploadRequest(CamelModel):
    """Gallery creation request; media storage and thumbnails happen upstream."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(None, max_length=5000)
    tags: str = Field("", description="Comma-separated tags")
    visibility: Visibility = "public"
    items: list[GalleryItemIn] = Field(..., min_length=1, max_length=10)


class VisibilityUpdate(CamelModel):
    visibility: Visibility


class GalleryItemOut(CamelModel):
    id: int
    gallery_id: int
    owner_user_id: int
    file_url: str
    thumbnail_url: str
    file_type: str
    duration: str | None = None
    created_at: datetime


class GalleryOut(CamelModel):
    """A gallery with its ordered items and the owner's current username."""

    id: int
    title: str
    description: str | None = None
    owner_user_id: int
    username: str
    tags: list[str] = []
    visibility: str
    view_count: int
    created_at: datetime
    updated_at: datetime
    items: list[GalleryItemOut] = []


class GalleryDetail(GalleryOut):
    """Gallery page payload with viewer-relative flags.

    The flags stay ``None`` for anonymous viewers; ``is_following`` also stays
    ``None`` when the viewer owns the gallery.
    """

    likes_count: int = 0
    comments_count: int = 0
    is_own_gallery: bool | None = None
    is_following: bool | None = None
    is_liked: bool | None = None
    is_saved: bool | None = None


class ContentCard(CamelModel):
    """List-view projection of a gallery.

    ``thumbnail_url`` and ``file_type`` come from the first item and are
    ``None`` only for a gallery without items.
    """

    id: int
    title: str
    username: str
    thumbnail_url: str | None = None
    file_type: str | None = None
    duration: str | None = None
    view_count: int
    created_at: datetime
