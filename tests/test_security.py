# tests/test_security.py
"""Tests for password hashing and bearer tokens."""

from datetime import timedelta

import pytest

from redshare.core.security import (
    JWTError,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def test_password_hash_round_trip() -> None:
    hashed = hash_password("s3cret!")
    assert hashed != hash_password("s3cret!")
    assert verify_password("s3cret!", hashed)
    assert not verify_password("other", hashed)


def test_token_carries_user_id(test_settings) -> None:
    token = create_access_token(42, settings=test_settings)
    assert decode_access_token(token, settings=test_settings) == 42


def test_token_signed_with_other_key_is_rejected(test_settings) -> None:
    other = test_settings.model_copy(update={"secret_key": "another-key"})
    token = create_access_token(7, settings=other)
    with pytest.raises(JWTError):
        decode_access_token(token, settings=test_settings)


def test_expired_token_is_rejected(test_settings) -> None:
    token = create_access_token(7, settings=test_settings, expires_delta=timedelta(seconds=-5))
    with pytest.raises(JWTError):
        decode_access_token(token, settings=test_settings)


def test_expired_token_is_unauthorized(client, alice, test_settings) -> None:
    token = create_access_token(alice.id, settings=test_settings, expires_delta=timedelta(minutes=-1))
    response = client.get("/api/user", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
