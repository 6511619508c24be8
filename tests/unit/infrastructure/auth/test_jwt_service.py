"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from linkshelf.infrastructure.auth import InvalidTokenError, JWTService, TokenExpiredError

SECRET = "test-secret-key-that-is-long-enough-for-hs256"


@pytest.fixture
def service() -> JWTService:
    return JWTService(secret_key=SECRET)


def test_access_token_round_trip(service: JWTService):
    token = service.create_access_token(42)

    assert service.validate_access_token(token) == 42
    payload = service.decode_token(token)
    assert payload["sub"] == "42"
    assert payload["iss"] == "linkshelf"


def test_expired_token_is_rejected(service: JWTService):
    token = service.create_access_token(1, expires_delta=timedelta(seconds=-5))

    with pytest.raises(TokenExpiredError):
        service.validate_access_token(token)


def test_token_signed_with_other_secret_is_rejected(service: JWTService):
    token = JWTService(secret_key="another-secret-key-of-sufficient-length").create_access_token(1)

    with pytest.raises(InvalidTokenError):
        service.validate_access_token(token)


def _encode(payload: dict) -> str:
    now = datetime.now(timezone.utc)
    base = {"iss": "linkshelf", "iat": now, "exp": now + timedelta(minutes=5)}
    base.update(payload)
    return jwt.encode(base, SECRET, algorithm="HS256")


def test_non_access_token_is_rejected(service: JWTService):
    with pytest.raises(InvalidTokenError, match="Not an access token"):
        service.validate_access_token(_encode({"sub": "1", "type": "refresh"}))


def test_non_numeric_subject_is_rejected(service: JWTService):
    with pytest.raises(InvalidTokenError, match="not a user id"):
        service.validate_access_token(_encode({"sub": "usr_abc", "type": "access"}))
