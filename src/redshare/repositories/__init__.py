"""Data access helpers."""

from .gallery_repo import GalleryRepository

__all__ = ["GalleryRepository"]
