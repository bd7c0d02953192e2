"""Shared API dependencies for database sessions and authentication."""

from collections.abc import Iterator
from typing import Annotated

from fastapi import Depends, HTTPException, Query, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from redshare.core.security import JWTError, decode_access_token
from redshare.core.settings import Settings
from redshare.db.session import Store
from redshare.models import User

# Missing credentials are turned into a 401 below rather than FastAPI's 403.
bearer_scheme = HTTPBearer(auto_error=False)

BearerDep = Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)]


def get_settings(request: Request) -> Settings:
    """Return the settings the running app was built with."""
    return request.app.state.settings


def get_store(request: Request) -> Store:
    return request.app.state.store


def get_db(store: Annotated[Store, Depends(get_store)]) -> Iterator[Session]:
    """Yield a database session scoped to one request."""
    with store.session() as db:
        yield db


SettingsDep = Annotated[Settings, Depends(get_settings)]
SessionDep = Annotated[Session, Depends(get_db)]


class Page:
    """Limit and offset of a list request."""

    def __init__(self, limit: int, offset: int) -> None:
        self.limit = limit
        self.offset = offset


def get_page(
    settings: SettingsDep,
    limit: Annotated[int | None, Query(ge=1)] = None,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> Page:
    """Resolve paging against the running app's page-size settings.

    Raises:
        HTTPException: 422 if ``limit`` exceeds ``MAX_PAGE_SIZE``.
    """
    if limit is None:
        limit = min(settings.default_page_size, settings.max_page_size)
    elif limit > settings.max_page_size:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"limit must be at most {settings.max_page_size}",
        )
    return Page(limit, offset)


PageDep = Annotated[Page, Depends(get_page)]


def _unauthorized(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _resolve_user(credentials: HTTPAuthorizationCredentials, db: Session, settings: Settings) -> User:
    try:
        user_id = decode_access_token(credentials.credentials, settings=settings)
    except JWTError as err:
        raise _unauthorized() from err
    user = db.get(User, user_id)
    if user is None:
        raise _unauthorized("User not found")
    return user


def get_current_user(credentials: BearerDep, db: SessionDep, settings: SettingsDep) -> User:
    """Get the authenticated user from the bearer token.

    Raises:
        HTTPException: 401 if the token is missing, invalid or names an
            unknown user.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")
    return _resolve_user(credentials, db, settings)


def get_optional_user(credentials: BearerDep, db: SessionDep, settings: SettingsDep) -> User | None:
    """Like ``get_current_user`` but returns None when no token is sent.

    A token that is present but invalid is still rejected.
    """
    if credentials is None:
        return None
    return _resolve_user(credentials, db, settings)


CurrentUserDep = Annotated[User, Depends(get_current_user)]
OptionalUserDep = Annotated[User | None, Depends(get_optional_user)]


def viewer_id(user: User | None) -> int | None:
    return user.id if user is not None else None
