"""
Unit tests for password hashing and token helpers.
"""

from datetime import timedelta

from jose import jwt

from backoffice.app.core.config import settings
from backoffice.app.core.jwt import create_access_token, decode_access_token
from backoffice.app.core.security import get_password_hash, verify_password


def test_password_hash_round_trip():
    hashed = get_password_hash("s3cret!")
    assert hashed != "s3cret!"
    assert hashed.startswith("$2")
    assert verify_password("s3cret!", hashed)
    assert not verify_password("wrong", hashed)


def test_same_password_hashes_differently():
    assert get_password_hash("s3cret!") != get_password_hash("s3cret!")


def test_verify_rejects_garbage_hash():
    assert not verify_password("s3cret!", "not-a-bcrypt-hash")
    assert not verify_password("s3cret!", "")


def test_token_carries_claims():
    token = create_access_token({"id": 7, "username": "ops", "display_name": "Ops"})
    payload = decode_access_token(token)
    assert payload["id"] == 7
    assert payload["username"] == "ops"
    assert payload["display_name"] == "Ops"
    assert payload["exp"] - payload["iat"] == settings.access_token_expire_minutes * 60


def test_expired_token_decodes_to_none():
    token = create_access_token({"id": 7}, expires_delta=timedelta(minutes=-1))
    assert decode_access_token(token) is None


def test_token_signed_with_other_key_is_rejected():
    token = jwt.encode({"id": 7, "username": "ops"}, "some-other-key", algorithm=settings.algorithm)
    assert decode_access_token(token) is None
