"""Identity registry: accounts, username uniqueness and derived counters."""
from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from redshare.core import security
from redshare.core.errors import DuplicateUsernameError, InvalidUsernameError
from redshare.db import time as db_time
from redshare.models import User
from redshare.repositories import GalleryRepository
from redshare.schemas.user import UserProfile
from redshare.services import social_graph

__all__ = [
    "authenticate",
    "create_user",
    "get_user",
    "get_user_by_username",
    "get_user_profile",
    "get_user_profile_by_username",
    "normalize_username",
    "to_user_profile",
    "update_profile",
]

logger = logging.getLogger(__name__)


def normalize_username(username: str) -> str:
    """Return the case-insensitive lookup key for ``username``."""
    return username.strip().casefold()


def _clean_username(username: str) -> str:
    username = username.strip()
    if not username:
        raise InvalidUsernameError()
    return username


def get_user(db: Session, user_id: int) -> User | None:
    """Return a single user by primary key."""
    return db.get(User, user_id)


def get_user_by_username(db: Session, username: str) -> User | None:
    """Return the user whose username matches ignoring case."""
    return db.scalars(
        select(User).where(User.username_key == normalize_username(username))
    ).first()


def create_user(
    db: Session,
    *,
    username: str,
    password: str,
    email: str | None = None,
    profile_image: str | None = None,
) -> User:
    """Register a new account with an argon2-hashed password.

    Raises:
        DuplicateUsernameError: If the username is taken, ignoring case.
        InvalidUsernameError: If the username is blank.
    """
    username = _clean_username(username)
    if get_user_by_username(db, username) is not None:
        raise DuplicateUsernameError()

    now = db_time.utcnow()
    user = User(
        username=username,
        username_key=normalize_username(username),
        password_hash=security.hash_password(password),
        email=email,
        profile_image=profile_image,
        created_at=now,
        updated_at=now,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as err:
        db.rollback()
        raise DuplicateUsernameError() from err
    db.refresh(user)
    logger.info("Registered user %s (id=%s)", user.username, user.id)
    return user


def authenticate(db: Session, username: str, password: str) -> User | None:
    """Return the user if ``password`` matches, otherwise None."""
    user = get_user_by_username(db, username)
    if user is None:
        security.dummy_verify()
        return None
    if not security.verify_password(password, user.password_hash):
        return None
    return user


def update_profile(
    db: Session,
    user: User,
    *,
    username: str | None = None,
    email: str | None = None,
    profile_image: str | None = None,
) -> User:
    """Apply partial profile updates.

    A rename shows up at once in content cards and gallery pages, while
    comments written earlier keep the username they were posted under.
    """
    if username is not None:
        username = _clean_username(username)
        key = normalize_username(username)
        if key != user.username_key:
            existing = get_user_by_username(db, username)
            if existing is not None and existing.id != user.id:
                raise DuplicateUsernameError()
            logger.info("Renaming user %s to %s", user.username, username)
        user.username = username
        user.username_key = key
    if email is not None:
        user.email = email
    if profile_image is not None:
        user.profile_image = profile_image
    user.updated_at = db_time.utcnow()

    db.add(user)
    try:
        db.commit()
    except IntegrityError as err:
        db.rollback()
        raise DuplicateUsernameError() from err
    db.refresh(user)
    return user


def to_user_profile(db: Session, user: User, *, viewer_id: int | None = None) -> UserProfile:
    """Build the public profile with counters computed from current state."""
    is_following: bool | None = None
    if viewer_id is not None and viewer_id != user.id:
        is_following = social_graph.is_following(db, viewer_id, user.id)

    return UserProfile(
        id=user.id,
        username=user.username,
        email=user.email,
        profile_image=user.profile_image,
        created_at=user.created_at,
        followers_count=social_graph.followers_count(db, user.id),
        following_count=social_graph.following_count(db, user.id),
        content_count=GalleryRepository(db).count_by_owner(user.id),
        is_following=is_following,
    )


def get_user_profile(
    db: Session, user_id: int, *, viewer_id: int | None = None
) -> UserProfile | None:
    user = get_user(db, user_id)
    if user is None:
        return None
    return to_user_profile(db, user, viewer_id=viewer_id)


def get_user_profile_by_username(
    db: Session, username: str, *, viewer_id: int | None = None
) -> UserProfile | None:
    user = get_user_by_username(db, username)
    if user is None:
        return None
    return to_user_profile(db, user, viewer_id=viewer_id)
