from datetime import datetime, timedelta, UTC

import pytest
from jose import jwt

from taskboard.exceptions import ConfigurationError, InvalidTokenError
from taskboard.models.user import Identity
from taskboard.utils.auth import TokenService

SECRET = "unit-secret"


def test_issue_builds_exact_claims():
    service = TokenService(SECRET)
    token = service.issue(Identity(id="1", email="a@example.com"))

    claims = jwt.decode(token, SECRET, algorithms=["HS256"])
    assert set(claims) == {"id", "email", "exp"}
    assert claims["id"] == "1"
    assert claims["email"] == "a@example.com"

    expected = (datetime.now(UTC) + timedelta(days=1)).timestamp()
    assert abs(claims["exp"] - expected) < 60


def test_verify_roundtrip_is_stable():
    service = TokenService(SECRET)
    token = service.issue(Identity(id="7", email="b@example.com"))

    first = service.verify(token)
    second = service.verify(token)
    assert first == second == Identity(id="7", email="b@example.com")


@pytest.mark.parametrize("secret", ["", None])
def test_missing_secret_is_a_configuration_error(secret):
    with pytest.raises(ConfigurationError):
        TokenService(secret)


def test_verify_rejects_token_from_other_secret():
    token = TokenService("other-secret").issue(Identity(id="1", email="a@example.com"))
    with pytest.raises(InvalidTokenError):
        TokenService(SECRET).verify(token)


def test_verify_rejects_expired_token():
    expired = TokenService(SECRET, expires_delta=timedelta(seconds=-30))
    token = expired.issue(Identity(id="1", email="a@example.com"))
    with pytest.raises(InvalidTokenError):
        TokenService(SECRET).verify(token)


@pytest.mark.parametrize("token", ["garbage", "", None, "a.b.c"])
def test_verify_rejects_malformed_tokens(token):
    with pytest.raises(InvalidTokenError):
        TokenService(SECRET).verify(token)


def test_verify_rejects_token_without_exp():
    token = jwt.encode({"id": "1", "email": "a@example.com"}, SECRET, algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        TokenService(SECRET).verify(token)


def test_verify_rejects_token_without_identity():
    exp = int((datetime.now(UTC) + timedelta(hours=1)).timestamp())
    token = jwt.encode({"sub": "a@example.com", "exp": exp}, SECRET, algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        TokenService(SECRET).verify(token)


def test_verify_refuses_cleared_secret():
    service = TokenService(SECRET)
    token = service.issue(Identity(id="1", email="a@example.com"))
    service._secret_key = ""
    with pytest.raises(ConfigurationError):
        service.verify(token)
