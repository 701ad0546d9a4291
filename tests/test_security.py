# tests/test_security.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from todo_api.config.settings import Settings
from todo_api.utils.errors import InvalidToken
from todo_api.utils.security import create_access_token, decode_access_token, hash_password, verify_password


def test_password_hash_is_salted_and_verifiable() -> None:
    first = hash_password("pw")
    second = hash_password("pw")

    assert first != "pw"
    assert first != second
    assert verify_password("pw", first)
    assert not verify_password("PW", first)


def test_token_expires_one_day_after_issue(settings: Settings) -> None:
    before = datetime.now(timezone.utc)
    token = create_access_token("u1", settings)

    claims = jwt.get_unverified_claims(token)
    assert claims["sub"] == "u1"
    expires = datetime.fromtimestamp(claims["exp"], tz=timezone.utc)
    assert timedelta(hours=23, minutes=59) <= expires - before <= timedelta(days=1, seconds=5)


def test_decode_roundtrip(settings: Settings) -> None:
    assert decode_access_token(create_access_token("u1", settings), settings) == "u1"


@pytest.mark.parametrize("token", ["", "abc", "a.b.c"])
def test_decode_rejects_malformed_tokens(settings: Settings, token: str) -> None:
    with pytest.raises(InvalidToken):
        decode_access_token(token, settings)


def test_decode_rejects_expired_token(settings: Settings) -> None:
    token = create_access_token("u1", settings, expires_delta=timedelta(days=-1))
    with pytest.raises(InvalidToken):
        decode_access_token(token, settings)


def test_decode_rejects_token_without_subject(settings: Settings) -> None:
    token = jwt.encode(
        {"exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
        settings.secret_key,
        algorithm=settings.algorithm,
    )
    with pytest.raises(InvalidToken):
        decode_access_token(token, settings)
