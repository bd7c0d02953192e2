# tests/conftest.py
from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import UTC, datetime, timedelta
from itertools import count
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from redshare.core.security import create_access_token
from redshare.core.settings import Settings
from redshare.db.session import Store
from redshare.main import create_app
from redshare.models import Gallery, User
from redshare.services import content, identity

TEST_DB_URL = "sqlite://"
TEST_PASSWORD = "correct-horse"


@pytest.fixture()
def test_settings() -> Settings:
    """Settings isolated from the environment's DATABASE_URL and secrets."""
    return Settings(
        secret_key="test-secret-key",
        database_url=TEST_DB_URL,
        seed_demo_data=False,
    )


@pytest.fixture()
def store(test_settings: Settings) -> Iterator[Store]:
    """A fresh in-memory database per test."""
    store = Store.from_settings(test_settings)
    store.create_tables()
    try:
        yield store
    finally:
        store.drop_tables()
        store.dispose()


@pytest.fixture()
def db_session(store: Store) -> Iterator[Session]:
    with store.session() as session:
        yield session


@pytest.fixture(autouse=True)
def clock(monkeypatch: pytest.MonkeyPatch) -> Callable[[], datetime]:
    """Replace ``utcnow`` with a clock that advances one second per call.

    Every stored timestamp is distinct, so "newest first" orderings are
    deterministic.
    """
    start = datetime(2024, 1, 1, tzinfo=UTC)
    ticks = count()

    def fake_utcnow() -> datetime:
        return start + timedelta(seconds=next(ticks))

    monkeypatch.setattr("redshare.db.time.utcnow", fake_utcnow)
    return fake_utcnow


@pytest.fixture()
def app(test_settings: Settings, store: Store) -> FastAPI:
    return create_app(settings=test_settings, store=store)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    """Return a factory that registers users through the identity service."""

    def _make_user(username: str, password: str = TEST_PASSWORD, **extra: Any) -> User:
        return identity.create_user(db_session, username=username, password=password, **extra)

    return _make_user


@pytest.fixture()
def alice(make_user: Callable[..., User]) -> User:
    return make_user("alice", email="alice@example.com")


@pytest.fixture()
def bob(make_user: Callable[..., User]) -> User:
    return make_user("bob")


@pytest.fixture()
def carol(make_user: Callable[..., User]) -> User:
    return make_user("carol")


@pytest.fixture()
def auth_headers(test_settings: Settings) -> Callable[[User], dict[str, str]]:
    """Return a factory producing bearer headers for a user."""

    def _headers(user: User) -> dict[str, str]:
        token = create_access_token(user.id, settings=test_settings)
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture()
def alice_headers(alice: User, auth_headers: Callable[[User], dict[str, str]]) -> dict[str, str]:
    return auth_headers(alice)


@pytest.fixture()
def bob_headers(bob: User, auth_headers: Callable[[User], dict[str, str]]) -> dict[str, str]:
    return auth_headers(bob)


def _image_item(name: str) -> dict[str, Any]:
    return {
        "file_url": f"https://cdn.example.com/{name}.jpg",
        "thumbnail_url": f"https://cdn.example.com/{name}_thumb.jpg",
        "file_type": "image",
    }


def _video_item(name: str, duration: str = "0:30") -> dict[str, Any]:
    return {
        "file_url": f"https://cdn.example.com/{name}.mp4",
        "thumbnail_url": f"https://cdn.example.com/{name}_thumb.jpg",
        "file_type": "video",
        "duration": duration,
    }


@pytest.fixture()
def image_item() -> Callable[[str], dict[str, Any]]:
    return _image_item


@pytest.fixture()
def video_item() -> Callable[..., dict[str, Any]]:
    return _video_item


@pytest.fixture()
def make_gallery(db_session: Session) -> Callable[..., Gallery]:
    """Return a factory creating a gallery with one image item by default."""

    def _make_gallery(
        owner: User,
        title: str = "Gallery",
        *,
        visibility: str = "public",
        items: list[dict[str, Any]] | None = None,
        **extra: Any,
    ) -> Gallery:
        return content.create_gallery(
            db_session,
            owner_user_id=owner.id,
            title=title,
            visibility=visibility,
            items=items if items is not None else [_image_item(title.lower().replace(" ", "-"))],
            **extra,
        )

    return _make_gallery
