# watchlist_api/services/watchlists/service.py
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from mongoengine.errors import ValidationError

from watchlist_api.models.watchlist import Watchlist, utcnow
from watchlist_api.repositories.movie import MovieRepository
from watchlist_api.repositories.watchlist import WatchlistRepository
from watchlist_api.services._shared.base import BaseService
from watchlist_api.services._shared.errors import (
    DuplicateMoviesError,
    InvalidError,
    MovieNotInWatchlistError,
    NotFoundError,
)
from watchlist_api.services.watchlists.dto import WatchlistWithMoviesOut

log = logging.getLogger(__name__)


class WatchlistService(BaseService):
    """
    Application service for user-curated **watchlists**.

    Responsibilities
    ----------------
    - CRUD over watchlists (timestamps handled here, not by clients).
    - Membership edits: add several movie ids at once, remove one.
    - Expand a watchlist's movie ids into full movie documents.

    Notes
    -----
    - Membership edits are read-modify-write on the whole document; concurrent
      edits resolve as last write wins.
    - Movie ids are not checked against the catalog when added.
    """

    def __init__(
        self,
        *,
        repo: WatchlistRepository | None = None,
        movies: MovieRepository | None = None,
    ) -> None:
        self.repo = repo or WatchlistRepository()
        self.movies = movies or MovieRepository()

    # ------------------------------------------------------------------ #
    # CRUD
    # ------------------------------------------------------------------ #

    def list_watchlists(self) -> list[Watchlist]:
        return self.repo.find_all()

    def get_watchlist(self, watchlist_id: str) -> Watchlist:
        """
        :raises NotFoundError: When the id is malformed or unknown.
        """
        watchlist = self.repo.find_by_id(watchlist_id)
        if watchlist is None:
            raise NotFoundError("Watchlist", watchlist_id)
        return watchlist

    def create_watchlist(self, data: Mapping[str, Any]) -> Watchlist:
        """
        Create a watchlist stamped with ``created_at``.

        :param data: ``name`` (required), optional ``description`` and ``movies``.
        :raises InvalidError: When the document fails validation.
        """
        watchlist = Watchlist(
            name=data.get("name"),
            description=data.get("description"),
            movies=_unique_in_order(data.get("movies") or []),
            created_at=utcnow(),
        )
        try:
            self.repo.insert(watchlist)
        except ValidationError as exc:
            raise InvalidError("Watchlist", str(exc)) from exc

        log.info("watchlist.created")
        return watchlist

    def update_watchlist(self, watchlist_id: str, data: Mapping[str, Any]) -> Watchlist:
        """
        Replace ``name``/``description`` when provided and stamp ``updated_at``.

        :raises NotFoundError: When the id does not resolve.
        :raises InvalidError: When the document fails validation.
        """
        changes = {k: data[k] for k in ("name", "description") if k in data}
        changes["updated_at"] = utcnow()
        try:
            watchlist = self.repo.update_by_id(watchlist_id, changes)
        except ValidationError as exc:
            raise InvalidError("Watchlist", str(exc)) from exc

        if watchlist is None:
            raise NotFoundError("Watchlist", watchlist_id)
        return watchlist

    def delete_watchlist(self, watchlist_id: str) -> Watchlist:
        """
        :raises NotFoundError: When the id does not resolve.
        """
        watchlist = self.repo.delete_by_id(watchlist_id)
        if watchlist is None:
            raise NotFoundError("Watchlist", watchlist_id)
        log.info("watchlist.deleted")
        return watchlist

    # ------------------------------------------------------------------ #
    # Membership
    # ------------------------------------------------------------------ #

    def add_movies(self, watchlist_id: str, movie_ids: Iterable[str]) -> Watchlist:
        """
        Append the ids not already in the watchlist, in first-seen order.

        :raises NotFoundError: When the watchlist does not exist.
        :raises DuplicateMoviesError: When no supplied id is new.
        """
        watchlist = self.get_watchlist(watchlist_id)
        present = set(watchlist.movies)
        requested = _unique_in_order(movie_ids)
        fresh = [m for m in requested if m not in present]
        if not fresh:
            raise DuplicateMoviesError(watchlist_id, requested)

        watchlist.movies = [*watchlist.movies, *fresh]
        self.repo.save(watchlist)
        log.info("watchlist.movies_added")
        return watchlist

    def remove_movie(self, watchlist_id: str, movie_id: str) -> Watchlist:
        """
        Remove ``movie_id`` from the watchlist.

        :raises NotFoundError: When the watchlist does not exist.
        :raises MovieNotInWatchlistError: When the id is not a member.
        """
        watchlist = self.get_watchlist(watchlist_id)
        movies = list(watchlist.movies)
        if movie_id not in movies:
            raise MovieNotInWatchlistError(watchlist_id, movie_id)

        movies.remove(movie_id)
        watchlist.movies = movies
        self.repo.save(watchlist)
        log.info("watchlist.movie_removed")
        return watchlist

    def get_with_movies(self, watchlist_id: str) -> WatchlistWithMoviesOut:
        """
        Return the watchlist with its ids resolved to movie documents.

        :raises NotFoundError: When the watchlist does not exist.
        """
        watchlist = self.get_watchlist(watchlist_id)
        return WatchlistWithMoviesOut(
            watchlist=watchlist,
            movies=self.movies.resolve_references(watchlist.movies),
        )


def _unique_in_order(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for v in values:
        if v not in seen:
            seen.add(v)
            out.append(v)
    return out
