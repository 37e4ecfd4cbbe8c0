# watchlist_api/services/watchlists/dto.py
from __future__ import annotations

from dataclasses import dataclass

from watchlist_api.models.movie import Movie
from watchlist_api.models.watchlist import Watchlist


@dataclass(frozen=True, slots=True)
class WatchlistWithMoviesOut:
    """
    A watchlist together with its resolved movies.

    :param watchlist: The stored watchlist document.
    :param movies: Movie documents in watchlist order; dangling ids are absent.
    """

    watchlist: Watchlist
    movies: list[Movie]
