# watchlist_api/services/auth/dto.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class LoginIn:
    """
    Input DTO for session creation.

    :param email: User email as typed by the client. Any JSON value is
        accepted here and only strings can match a user.
    :type email: str
    :param password: Raw password (compared verbatim).
    :type password: str
    """

    email: str
    password: str


@dataclass(frozen=True, slots=True)
class RefreshIn:
    """
    Input DTO for token refresh.

    :param email: Subject decoded from the (possibly expired) access token.
    :type email: str
    :param refresh_token: Opaque refresh token presented by the client.
    :type refresh_token: str | None
    """

    email: str
    refresh_token: str | None


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class SessionOut:
    """
    Output DTO for a freshly issued session.

    :param token: Signed access token.
    :param refresh_token: Opaque single-use refresh token.
    :param permissions: Permissions of the user.
    :param roles: Roles of the user.
    """

    token: str
    refresh_token: str
    permissions: list[str]
    roles: list[str]


@dataclass(frozen=True, slots=True)
class AccessClaimsOut:
    """Decoded, verified access token."""

    subject: str
    permissions: list[str] = field(default_factory=list)
    roles: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class UserProfileOut:
    """Public view of a seeded user (no password)."""

    email: str
    permissions: list[str]
    roles: list[str]


# ------------------------ Config DTO ------------------------------------- #


@dataclass(frozen=True, slots=True)
class AuthTokenConfig:
    """
    Token emission configuration.

    :param access_expires: Access token lifetime.
    :type access_expires: timedelta
    """

    access_expires: timedelta
