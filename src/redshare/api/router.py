"""API router wiring.

Composes the endpoint modules into one router that ``redshare.main`` mounts
under ``/api``.
"""
from __future__ import annotations

from typing import Final

from fastapi import APIRouter

from .endpoints import (
    auth_router,
    comments_router,
    content_router,
    galleries_router,
    users_router,
)

api_router: Final[APIRouter] = APIRouter()
api_router.include_router(auth_router)
api_router.include_router(content_router)
api_router.include_router(users_router)
api_router.include_router(galleries_router)
api_router.include_router(comments_router)

__all__ = ["api_router"]
