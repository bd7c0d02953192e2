"""API endpoint modules."""

from .auth import router as auth_router
from .comments import router as comments_router
from .content import router as content_router
from .galleries import router as galleries_router
from .users import router as users_router

__all__ = [
    "auth_router",
    "content_router",
    "users_router",
    "galleries_router",
    "comments_router",
]
