"""HTTP API for RedShare."""

from .router import api_router

__all__ = ["api_router"]
