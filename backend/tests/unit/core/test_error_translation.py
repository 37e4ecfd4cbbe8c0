"""Mapping of service errors onto API errors."""

from __future__ import annotations

import pytest
from watchlist_api.core import errors as api_errors
from watchlist_api.services._shared.base import BaseService
from watchlist_api.services._shared.errors import (
    AuthenticationError,
    DuplicateMoviesError,
    InvalidError,
    MissingTokenError,
    MovieNotInWatchlistError,
    NotFoundError,
    TokenExpiredOrInvalidError,
)


@pytest.mark.parametrize(
    "exc,status,code,message",
    [
        (NotFoundError("Movie", "x"), 404, "not_found", "Movie not found"),
        (MovieNotInWatchlistError("w", "m"), 404, "movie.not_in_watchlist", "Movie not found in watchlist"),
        (InvalidError("User", "User not found."), 400, "invalid", "User not found."),
        (DuplicateMoviesError("w", ["m"]), 400, "duplicateMovies", "Movie Already in Watchlist"),
        (AuthenticationError("E-mail or password incorrect."), 401, "unauthorized", "E-mail or password incorrect."),
        (MissingTokenError(), 401, "token.invalid", "Token not present."),
        (TokenExpiredOrInvalidError(), 401, "token.expired", "Token invalid."),
    ],
)
def test_translate_exceptions(exc, status, code, message):
    translated = BaseService.translate_exceptions(exc)

    assert isinstance(translated, api_errors.APIError)
    assert translated.status_code == status
    assert translated.code == code
    assert translated.message == message


def test_unrelated_exceptions_pass_through():
    exc = RuntimeError("boom")
    assert BaseService.translate_exceptions(exc) is exc
