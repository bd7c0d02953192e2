"""Password hashing and access-token helpers.

Credential handling is delegated to audited libraries: passlib with argon2
for password hashes and python-jose for signed bearer tokens.
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext

from redshare.core.settings import Settings, settings as default_settings

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

__all__ = [
    "JWTError",
    "create_access_token",
    "decode_access_token",
    "dummy_verify",
    "hash_password",
    "verify_password",
]


def hash_password(password: str) -> str:
    """Return an argon2 hash of ``password`` (salt included)."""
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Check ``password`` against a stored hash."""
    return pwd_context.verify(password, hashed)


def dummy_verify() -> None:
    """Spend the same time as a real verification for unknown usernames."""
    pwd_context.dummy_verify()


def create_access_token(
    user_id: int,
    *,
    settings: Settings | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """Issue a signed bearer token whose subject is the user id."""
    cfg = settings or default_settings
    expire = datetime.now(UTC) + (
        expires_delta or timedelta(minutes=cfg.access_token_expire_minutes)
    )
    payload = {"sub": str(user_id), "exp": expire}
    return jwt.encode(payload, cfg.secret_key, algorithm=cfg.jwt_algorithm)


def decode_access_token(token: str, *, settings: Settings | None = None) -> int:
    """Return the user id carried by ``token``.

    Raises:
        JWTError: If the token is malformed, expired, or has no usable subject.
    """
    cfg = settings or default_settings
    payload = jwt.decode(token, cfg.secret_key, algorithms=[cfg.jwt_algorithm])
    subject = payload.get("sub")
    if subject is None:
        raise JWTError("missing subject")
    try:
        return int(subject)
    except (TypeError, ValueError) as err:
        raise JWTError("invalid subject") from err
