"""Integration tests for the session endpoints."""

from __future__ import annotations

import pytest
from flask_jwt_extended import decode_token
from watchlist_api.seeds.users import load_seed_users

from tests.helpers.assertions import assert_error, assert_json_keys
from tests.helpers.auth import ADMIN_EMAIL, ADMIN_PASSWORD, bearer, issue_token


def _sign_in(client) -> dict:
    resp = client.post("/api/sessions", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    return resp.get_json()


def test_sign_in_returns_token_pair(client, session_store) -> None:
    body = _sign_in(client)

    assert_json_keys(body, {"token", "refreshToken", "permissions", "roles"})
    assert body["roles"] == ["administrator"]
    assert session_store.has_refresh_token(ADMIN_EMAIL, body["refreshToken"])


def test_sign_in_with_wrong_password(client) -> None:
    resp = client.post("/api/sessions", json={"email": ADMIN_EMAIL, "password": "nope"})
    assert_error(resp, 401, message="E-mail or password incorrect.")


def test_sign_in_without_body(client) -> None:
    resp = client.post("/api/sessions")
    assert_error(resp, 401, message="E-mail or password incorrect.")


def test_me_returns_profile(client) -> None:
    token = _sign_in(client)["token"]

    resp = client.get("/api/me", headers=bearer(token))

    assert resp.status_code == 200
    assert resp.get_json() == {
        "email": ADMIN_EMAIL,
        "permissions": ["movies.list", "movies.create", "watchlists.list", "watchlists.create"],
        "roles": ["administrator"],
    }


def test_me_without_header(client) -> None:
    resp = client.get("/api/me")
    assert_error(resp, 401, code="token.invalid", message="Token not present.")


def test_me_with_non_bearer_header(client) -> None:
    resp = client.get("/api/me", headers={"Authorization": "Basic abc"})
    assert_error(resp, 401, code="token.invalid")


def test_me_with_expired_token(client, expired_auth_token) -> None:
    resp = client.get("/api/me", headers=bearer(expired_auth_token))
    assert_error(resp, 401, code="token.expired", message="Token invalid.")


def test_me_for_unknown_subject(client) -> None:
    resp = client.get("/api/me", headers=bearer(issue_token("ghost@watchlist.dev")))
    assert_error(resp, 400, message="User not found.")


def test_refresh_rotates_tokens(client, session_store) -> None:
    first = _sign_in(client)

    resp = client.post(
        "/api/refresh",
        json={"refreshToken": first["refreshToken"]},
        headers=bearer(first["token"]),
    )

    assert resp.status_code == 200
    second = resp.get_json()
    assert second["refreshToken"] != first["refreshToken"]
    assert not session_store.has_refresh_token(ADMIN_EMAIL, first["refreshToken"])
    assert session_store.has_refresh_token(ADMIN_EMAIL, second["refreshToken"])

    # The new access token is usable
    assert client.get("/api/me", headers=bearer(second["token"])).status_code == 200


def test_refresh_token_is_single_use(client) -> None:
    first = _sign_in(client)
    payload = {"refreshToken": first["refreshToken"]}

    assert client.post("/api/refresh", json=payload, headers=bearer(first["token"])).status_code == 200
    resp = client.post("/api/refresh", json=payload, headers=bearer(first["token"]))

    assert_error(resp, 401, message="Refresh token is invalid.")


def test_refresh_accepts_expired_access_token(client, session_store, expired_auth_token) -> None:
    session_store.add_refresh_token(ADMIN_EMAIL, "r-1")

    resp = client.post("/api/refresh", json={"refreshToken": "r-1"}, headers=bearer(expired_auth_token))

    assert resp.status_code == 200


def test_refresh_without_refresh_token(client) -> None:
    first = _sign_in(client)

    resp = client.post("/api/refresh", json={}, headers=bearer(first["token"]))

    assert_error(resp, 401, message="Refresh token is required.")


def test_refresh_with_malformed_bearer(client) -> None:
    resp = client.post("/api/refresh", json={"refreshToken": "r"}, headers=bearer("garbage"))
    assert_error(resp, 401, code="token.invalid", message="Invalid token format.")


def test_refresh_for_unknown_subject(client) -> None:
    resp = client.post(
        "/api/refresh",
        json={"refreshToken": "r"},
        headers=bearer(issue_token("ghost@watchlist.dev")),
    )
    assert_error(resp, 401, message="User not found.")


@pytest.mark.parametrize("email", [u.email for u in load_seed_users()])
def test_token_subject_is_the_user_email(client, email) -> None:
    password = next(u.password for u in load_seed_users() if u.email == email)
    resp = client.post("/api/sessions", json={"email": email, "password": password})

    token = resp.get_json()["token"]
    assert decode_token(token)["sub"] == email


def test_sign_in_with_non_string_credentials(client) -> None:
    resp = client.post("/api/sessions", json={"email": 1, "password": 2})
    assert_error(resp, 401, message="E-mail or password incorrect.")


def test_refresh_with_non_string_refresh_token(client) -> None:
    first = _sign_in(client)

    resp = client.post("/api/refresh", json={"refreshToken": 123}, headers=bearer(first["token"]))

    assert_error(resp, 401, message="Refresh token is invalid.")
