from __future__ import annotations

import jwt

from backend.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from backend.settings import get_settings


def test_password_hash_round_trip() -> None:
    hashed = hash_password("pikachu")

    assert hashed != "pikachu"
    assert verify_password("pikachu", hashed)
    assert not verify_password("raichu", hashed)


def test_verify_password_rejects_non_bcrypt_hash() -> None:
    assert verify_password("anything", "plain-text") is False


def test_access_token_carries_subject() -> None:
    payload = decode_access_token(create_access_token("7"))

    assert payload is not None
    assert payload["sub"] == "7"
    assert payload["type"] == "access"


def test_expired_or_tampered_tokens_are_rejected() -> None:
    assert decode_access_token(create_access_token("7", expires_minutes=-5)) is None
    assert decode_access_token(create_access_token("7") + "x") is None


def test_tokens_of_another_type_are_rejected() -> None:
    settings = get_settings()
    refresh = jwt.encode(
        {"sub": "7", "type": "refresh"}, settings.jwt_secret, algorithm=settings.jwt_algorithm
    )

    assert decode_access_token(refresh) is None
