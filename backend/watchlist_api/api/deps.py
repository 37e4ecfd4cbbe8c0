"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, g, jsonify, request

from watchlist_api.core.extensions import get_session_store
from watchlist_api.infra.jwt.flask_jwt_token_provider import JWTTokenProvider
from watchlist_api.services._shared.errors import MissingTokenError
from watchlist_api.services.auth.dto import AuthTokenConfig
from watchlist_api.services.auth.service import AuthService

F = TypeVar("F", bound=Callable[..., Any])


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def request_json() -> dict[str, Any]:
    """Return the JSON body as a dict, or an empty dict when absent/invalid."""

    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]


def get_auth_service() -> AuthService:
    """Build an :class:`AuthService` bound to the current application."""

    return AuthService(
        token_provider=JWTTokenProvider(),
        session_store=get_session_store(),
        token_cfg=AuthTokenConfig(access_expires=current_app.config["JWT_ACCESS_TOKEN_EXPIRES"]),
    )


def bearer_token() -> str:
    """Extract the token from ``Authorization: Bearer <token>``.

    :raises MissingTokenError: When the header or the token part is absent.
    """

    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise MissingTokenError()
    return token


def require_auth(func: F) -> F:
    """Ensure the request carries a valid, unexpired access token.

    The verified claims are exposed as ``g.current_user``.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        g.current_user = get_auth_service().verify_access_token(bearer_token())
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def require_identity(func: F) -> F:
    """Extract the subject of a possibly expired access token.

    Signature and expiry are not checked; only the refresh exchange, which
    requires a matching single-use refresh token, is guarded this way. The
    subject is exposed as ``g.token_subject``.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        g.token_subject = get_auth_service().decode_without_verification(bearer_token())
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]
