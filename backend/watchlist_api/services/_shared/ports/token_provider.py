from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any, Protocol

from watchlist_api.services._shared.errors import (
    MalformedTokenError,
    TokenExpiredOrInvalidError,
)


class TokenProvider(Protocol):
    """Port for issuing and decoding signed access tokens."""

    def create_access_token(
        self,
        *,
        identity: str,
        additional_claims: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
    ) -> str: ...

    def decode(self, token: str) -> dict[str, Any]:
        """
        Verify signature and expiry and return the claims.

        :raises TokenExpiredOrInvalidError: When verification fails.
        """
        ...

    def decode_unverified(self, token: str) -> dict[str, Any]:
        """
        Return the claims without checking signature or expiry.

        :raises MalformedTokenError: When the token cannot be parsed.
        """
        ...


class StubTokenProvider(TokenProvider):
    """Deterministic token provider used in unit tests."""

    def __init__(self) -> None:
        self._seq = 0
        self._issued: dict[str, dict[str, Any]] = {}

    def create_access_token(
        self,
        *,
        identity: str,
        additional_claims: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
    ) -> str:
        self._seq += 1
        token = f"access.{identity}.{self._seq}"
        exp = datetime.now(UTC) + (expires_delta or timedelta(minutes=15))
        payload: dict[str, Any] = {"sub": identity, "exp": int(exp.timestamp())}
        if additional_claims:
            payload.update(additional_claims)
        self._issued[token] = payload
        return token

    def decode(self, token: str) -> dict[str, Any]:
        payload = self._issued.get(token)
        if payload is None or payload["exp"] <= int(datetime.now(UTC).timestamp()):
            raise TokenExpiredOrInvalidError()
        return dict(payload)

    def decode_unverified(self, token: str) -> dict[str, Any]:
        payload = self._issued.get(token)
        if payload is None:
            raise MalformedTokenError()
        return dict(payload)
