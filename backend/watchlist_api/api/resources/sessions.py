"""Session endpoints: sign-in, refresh and current user."""

from __future__ import annotations

from flask import Blueprint, g

from watchlist_api.api.deps import (
    get_auth_service,
    json_response,
    request_json,
    require_auth,
    require_identity,
    timing,
)
from watchlist_api.schemas import (
    MeSchema,
    RefreshSchema,
    SessionCreateSchema,
    SessionResponseSchema,
)
from watchlist_api.services.auth.dto import LoginIn, RefreshIn

bp = Blueprint("sessions", __name__)

session_create_schema = SessionCreateSchema()
refresh_schema = RefreshSchema()
session_schema = SessionResponseSchema()
me_schema = MeSchema()


@bp.post("/sessions")
@timing
def create_session():
    """Exchange e-mail and password for an access/refresh token pair."""

    data = session_create_schema.load(request_json())
    session = get_auth_service().issue_session(LoginIn(email=data["email"], password=data["password"]))
    return json_response(session_schema.dump(session))


@bp.post("/refresh")
@require_identity
@timing
def refresh_session():
    """Rotate the refresh token of the user named by the bearer token."""

    data = refresh_schema.load(request_json())
    session = get_auth_service().refresh_session(
        RefreshIn(email=g.token_subject, refresh_token=data["refresh_token"])
    )
    return json_response(session_schema.dump(session))


@bp.get("/me")
@require_auth
@timing
def me():
    """Return the profile of the authenticated user."""

    profile = get_auth_service().whoami(g.current_user.subject)
    return json_response(me_schema.dump(profile))
