"""Database engine and session lifecycle.

A ``Store`` is created once at process start (see ``redshare.main``), kept on
``app.state`` and disposed at shutdown. Nothing in this module opens a
connection at import time.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

if TYPE_CHECKING:
    from redshare.core.settings import Settings


class Base(DeclarativeBase):
    """Declarative base shared by all ORM models."""


# Ensure model modules are imported so that metadata is populated when create_all runs.
import redshare.models  # noqa: E402,F401


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or (
        url.startswith("sqlite") and "mode=memory" in url
    )


def build_engine(database_url: str, *, echo: bool = False) -> Engine:
    """Create an engine suited to ``database_url``.

    In-memory SQLite databases exist per connection, so every session must
    share a single one.
    """
    if _is_memory_sqlite(database_url):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=echo,
        )
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            echo=echo,
        )
    return create_engine(database_url, pool_pre_ping=True, echo=echo)


class Store:
    """Process-wide handle on the content and social graph database."""

    def __init__(self, database_url: str, *, echo: bool = False) -> None:
        self.database_url = database_url
        self.engine = build_engine(database_url, echo=echo)
        self.SessionLocal = sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> Store:
        return cls(settings.database_url, echo=settings.sql_debug)

    def create_tables(self) -> None:
        """Create all database tables."""
        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self) -> None:
        """Drop all database tables."""
        Base.metadata.drop_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a session that is always closed afterwards."""
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()
