# watchlist_api/services/auth/service.py
from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any

from watchlist_api.services._shared.base import BaseService
from watchlist_api.services._shared.errors import (
    AuthenticationError,
    InvalidError,
    MalformedTokenError,
)
from watchlist_api.services._shared.ports.session_store import SessionStore, UserRecord
from watchlist_api.services._shared.ports.token_provider import TokenProvider
from watchlist_api.services.auth.dto import (
    AccessClaimsOut,
    AuthTokenConfig,
    LoginIn,
    RefreshIn,
    SessionOut,
    UserProfileOut,
)

log = logging.getLogger(__name__)


class AuthService(BaseService):
    """
    Session lifecycle service (sign-in / refresh / token checks).

    Access tokens are signed and stateless; refresh tokens are opaque values
    held by the :class:`SessionStore` and are valid for exactly one refresh.

    .. warning::
       Passwords are stored and compared in plaintext, mirroring the seeded
       user store. Hashing would change observable behavior and is out of
       scope for this service.
    """

    def __init__(
        self,
        *,
        token_provider: TokenProvider,
        session_store: SessionStore,
        token_cfg: AuthTokenConfig | None = None,
    ) -> None:
        """
        Initialize the service with its dependencies.

        :param token_provider: Adapter for signing/decoding access tokens.
        :param session_store: Seeded users and their valid refresh tokens.
        :param token_cfg: Access token expiry configuration.
        """
        self.tokens = token_provider
        self.store = session_store
        self.cfg = token_cfg or AuthTokenConfig(access_expires=timedelta(minutes=15))

    # ------------------------------------------------------------------ #
    # Sign-in
    # ------------------------------------------------------------------ #

    def issue_session(self, dto: LoginIn) -> SessionOut:
        """
        Check credentials and issue an access token plus a refresh token.

        :param dto: Login input.
        :returns: Token pair with the user's permissions and roles.
        :raises AuthenticationError: If the email is unknown or the password differs.
            Non-string values never match.
        """
        user = self.store.get_user(dto.email) if isinstance(dto.email, str) else None
        if user is None or dto.password != user.password:
            log.warning("session.rejected", extra={"email": dto.email})
            raise AuthenticationError("E-mail or password incorrect.")

        session = self._issue(user)
        log.info("session.issued", extra={"email": user.email})
        return session

    # ------------------------------------------------------------------ #
    # Refresh with rotation
    # ------------------------------------------------------------------ #

    def refresh_session(self, dto: RefreshIn) -> SessionOut:
        """
        Redeem a refresh token and emit a brand-new pair.

        The presented token is removed before the new pair is issued, so each
        refresh token works once.

        :raises AuthenticationError: Unknown user, missing token or a token
            not currently registered for the user.
        """
        user = self.store.get_user(dto.email)
        if user is None:
            raise AuthenticationError("User not found.")

        if not dto.refresh_token:
            raise AuthenticationError("Refresh token is required.")

        token = dto.refresh_token
        if not isinstance(token, str) or not self.store.consume_refresh_token(user.email, token):
            log.warning("session.refresh_rejected", extra={"email": user.email})
            raise AuthenticationError("Refresh token is invalid.")

        session = self._issue(user)
        log.info("session.refreshed", extra={"email": user.email})
        return session

    # ------------------------------------------------------------------ #
    # Token checks
    # ------------------------------------------------------------------ #

    def verify_access_token(self, token: str) -> AccessClaimsOut:
        """
        Verify signature and expiry of an access token.

        :raises TokenExpiredOrInvalidError: When verification fails.
        """
        claims = self.tokens.decode(token)
        return AccessClaimsOut(
            subject=str(claims.get("sub", "")),
            permissions=list(claims.get("permissions") or []),
            roles=list(claims.get("roles") or []),
        )

    def decode_without_verification(self, token: str) -> str:
        """
        Extract the subject of a token that may already be expired.

        Only the refresh endpoint uses this; protected routes go through
        :meth:`verify_access_token`.

        :raises MalformedTokenError: When the token cannot be parsed or has no subject.
        """
        claims = self.tokens.decode_unverified(token)
        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject:
            raise MalformedTokenError()
        return subject

    def whoami(self, email: str) -> UserProfileOut:
        """
        Return the public profile for the token subject.

        :raises InvalidError: When the subject is not a seeded user.
        """
        user = self.store.get_user(email)
        if user is None:
            raise InvalidError("User", "User not found.")
        return UserProfileOut(
            email=user.email,
            permissions=list(user.permissions),
            roles=list(user.roles),
        )

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _issue(self, user: UserRecord) -> SessionOut:
        claims: dict[str, Any] = {
            "permissions": list(user.permissions),
            "roles": list(user.roles),
        }
        token = self.tokens.create_access_token(
            identity=user.email,
            additional_claims=claims,
            expires_delta=self.cfg.access_expires,
        )
        refresh_token = self.store.new_refresh_token()
        self.store.add_refresh_token(user.email, refresh_token)
        return SessionOut(
            token=token,
            refresh_token=refresh_token,
            permissions=list(user.permissions),
            roles=list(user.roles),
        )
