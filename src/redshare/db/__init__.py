"""Database package exposing the declarative base and the store."""

from .session import Base, Store

__all__ = ["Base", "Store"]
