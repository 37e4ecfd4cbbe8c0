# watchlist_api/infra/jwt/flask_jwt_token_provider.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, cast

import jwt as pyjwt
from flask_jwt_extended.exceptions import JWTExtendedException

from watchlist_api.services._shared.errors import (
    MalformedTokenError,
    TokenExpiredOrInvalidError,
)
from watchlist_api.services._shared.ports import TokenProvider


@dataclass(slots=True)
class JWTTokenProvider(TokenProvider):
    """
    Adapter for Flask-JWT-Extended.

    .. note::
       Requires an active Flask app context with ``JWT_SECRET_KEY`` set.
    """

    def create_access_token(
        self,
        *,
        identity: str,
        additional_claims: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
    ) -> str:
        from flask_jwt_extended import create_access_token as _create_access

        return cast(
            str,
            _create_access(
                identity=identity,
                additional_claims=additional_claims or {},
                expires_delta=expires_delta,
            ),
        )

    def decode(self, token: str) -> dict[str, Any]:
        from flask_jwt_extended import decode_token

        try:
            return cast(dict[str, Any], decode_token(token))
        except (pyjwt.InvalidTokenError, JWTExtendedException) as exc:
            raise TokenExpiredOrInvalidError() from exc

    def decode_unverified(self, token: str) -> dict[str, Any]:
        # Signature and expiry checks are both skipped; only the structure matters.
        try:
            claims = pyjwt.decode(token, options={"verify_signature": False})
        except pyjwt.InvalidTokenError as exc:
            raise MalformedTokenError() from exc
        if not isinstance(claims, dict):
            raise MalformedTokenError()
        return claims
