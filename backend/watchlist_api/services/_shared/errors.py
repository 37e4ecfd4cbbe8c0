"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and never import Flask, HTTP or
mongoengine. They are the stable contract between repositories, the token
ports and application services.

The translation to HTTP responses is handled by ``watchlist_api/core/errors.py``
via ``BaseService.translate_exceptions()``. Each error carries a stable
``code`` that ends up in the response body.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - Unknown subclasses are translated to ``400 Bad Request``.
    """

    code: str = "bad_request"


# --------------------------------------------------------------------------- #
# Resource errors
# --------------------------------------------------------------------------- #


@dataclass(slots=True, eq=False)
class NotFoundError(ServiceError):
    """
    Raised when an entity cannot be resolved.

    :param entity: Entity name (e.g., "Movie").
    :type entity: str
    :param key: Identifier or search key (kept for logs, not shown to clients).
    :type key: str
    """

    entity: str
    key: str
    code: str = field(default="not_found", init=False)

    def __str__(self) -> str:
        return f"{self.entity} not found"


@dataclass(slots=True, eq=False)
class MovieNotInWatchlistError(ServiceError):
    """Raised when a movie id is not part of a watchlist's collection."""

    watchlist_id: str
    movie_id: str
    code: str = field(default="movie.not_in_watchlist", init=False)

    def __str__(self) -> str:
        return "Movie not found in watchlist"


@dataclass(slots=True, eq=False)
class InvalidError(ServiceError):
    """
    Raised when a write is rejected (validation or uniqueness).

    :param entity: Entity name (e.g., "Movie").
    :param detail: Short human-readable explanation.
    """

    entity: str
    detail: str
    code: str = field(default="invalid", init=False)

    def __str__(self) -> str:
        return self.detail


@dataclass(slots=True, eq=False)
class DuplicateMoviesError(ServiceError):
    """Raised when none of the supplied movie ids are new to the watchlist."""

    watchlist_id: str
    movie_ids: Sequence[str]
    code: str = field(default="duplicateMovies", init=False)

    def __str__(self) -> str:
        return "Movie Already in Watchlist"


# --------------------------------------------------------------------------- #
# Authentication errors (all map to 401)
# --------------------------------------------------------------------------- #


class AuthenticationError(ServiceError):
    """Raised on bad credentials or an unusable refresh token."""

    code = "unauthorized"
    default_message = "Unauthorized"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class MissingTokenError(AuthenticationError):
    """The ``Authorization`` header or its bearer token is absent."""

    code = "token.invalid"
    default_message = "Token not present."


class MalformedTokenError(AuthenticationError):
    """The token cannot be parsed at all."""

    code = "token.invalid"
    default_message = "Invalid token format."


class TokenExpiredOrInvalidError(AuthenticationError):
    """Signature or expiry verification failed."""

    code = "token.expired"
    default_message = "Token invalid."
