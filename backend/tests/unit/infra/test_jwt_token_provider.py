"""Unit tests for the Flask-JWT-Extended token adapter."""

from __future__ import annotations

from datetime import timedelta

import pytest
from watchlist_api.infra.jwt.flask_jwt_token_provider import JWTTokenProvider
from watchlist_api.services._shared.errors import (
    MalformedTokenError,
    TokenExpiredOrInvalidError,
)


@pytest.fixture()
def provider(app) -> JWTTokenProvider:
    return JWTTokenProvider()


def test_round_trip_keeps_subject_and_claims(provider):
    token = provider.create_access_token(
        identity="a@a.com",
        additional_claims={"roles": ["editor"], "permissions": ["movies.list"]},
    )

    claims = provider.decode(token)
    assert claims["sub"] == "a@a.com"
    assert claims["roles"] == ["editor"]
    assert claims["permissions"] == ["movies.list"]


def test_default_expiry_comes_from_config(app, provider):
    token = provider.create_access_token(identity="a@a.com")
    claims = provider.decode(token)

    ttl = app.config["JWT_ACCESS_TOKEN_EXPIRES"]
    assert claims["exp"] - claims["iat"] == int(ttl.total_seconds())


def test_expired_token_fails_verification(provider):
    token = provider.create_access_token(identity="a@a.com", expires_delta=timedelta(seconds=-1))

    with pytest.raises(TokenExpiredOrInvalidError):
        provider.decode(token)


def test_tampered_signature_fails_verification(provider):
    token = provider.create_access_token(identity="a@a.com")
    header, payload, signature = token.split(".")
    forged = ".".join([header, payload, signature[::-1]])

    with pytest.raises(TokenExpiredOrInvalidError):
        provider.decode(forged)


def test_unverified_decode_accepts_expired_token(provider):
    token = provider.create_access_token(identity="a@a.com", expires_delta=timedelta(seconds=-1))
    assert provider.decode_unverified(token)["sub"] == "a@a.com"


@pytest.mark.parametrize("garbage", ["abc", "a.b", "not.a.jwt"])
def test_unverified_decode_rejects_garbage(provider, garbage):
    with pytest.raises(MalformedTokenError):
        provider.decode_unverified(garbage)
