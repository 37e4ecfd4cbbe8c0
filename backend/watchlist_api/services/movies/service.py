# watchlist_api/services/movies/service.py
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from mongoengine.errors import NotUniqueError, ValidationError

from watchlist_api.models.movie import Movie, Rating
from watchlist_api.repositories.movie import MovieRepository
from watchlist_api.services._shared.base import BaseService
from watchlist_api.services._shared.errors import InvalidError, NotFoundError

log = logging.getLogger(__name__)


class MovieService(BaseService):
    """
    Application service for the **movie catalog**.

    Responsibilities
    ----------------
    - List, read, create, partially update and delete movies.
    - Restrict field lookups and updates to whitelisted fields.

    Notes
    -----
    - Catalog routes are public; no authorization happens here.
    - Uniqueness and document validation failures are translated to
      :class:`InvalidError`.
    """

    def __init__(
        self,
        *,
        repo: MovieRepository | None = None,
    ) -> None:
        self.repo = repo or MovieRepository()

    # ------------------------------------------------------------------ #
    # Read
    # ------------------------------------------------------------------ #

    def list_movies(self) -> list[Movie]:
        """Return every movie in the catalog."""
        return self.repo.find_all()

    def get_movie(self, movie_id: str) -> Movie:
        """
        Retrieve a single movie by its document id.

        :raises NotFoundError: When the id is malformed or unknown.
        """
        movie = self.repo.find_by_id(movie_id)
        if movie is None:
            raise NotFoundError("Movie", movie_id)
        return movie

    def get_movie_by_field(self, field: str, value: str) -> Movie:
        """
        Retrieve the first movie whose ``field`` equals ``value``.

        :param field: A scalar movie field such as ``imdbID`` or ``Title``.
        :param value: Exact value to match.
        :raises NotFoundError: When nothing matches or ``field`` is not searchable.
        """
        movie = self.repo.find_one_by_field(field, value)
        if movie is None:
            raise NotFoundError("Movie", f"{field}={value}")
        return movie

    # ------------------------------------------------------------------ #
    # Write
    # ------------------------------------------------------------------ #

    def add_movie(self, data: Mapping[str, Any]) -> Movie:
        """
        Persist a new movie.

        :param data: Validated movie fields; ``Ratings`` may hold plain dicts.
        :returns: The stored movie with its generated id.
        :raises InvalidError: On a duplicate ``imdbID`` or a rejected document.
        """
        payload = dict(data)
        ratings = payload.pop("Ratings", None)
        if ratings is not None:
            payload["Ratings"] = [_as_rating(r) for r in ratings]

        try:
            movie = self.repo.insert(Movie(**payload))
        except NotUniqueError as exc:
            raise InvalidError("Movie", "Duplicate value for a unique field") from exc
        except ValidationError as exc:
            raise InvalidError("Movie", str(exc)) from exc

        log.info("movie.created imdbID=%s", movie.imdbID)
        return movie

    def update_movie(self, movie_id: str, data: Mapping[str, Any]) -> Movie:
        """
        Replace the provided subset of ``imdbID``, ``Title``, ``Year``,
        ``Type`` and ``Poster``. Any other key is ignored.

        :raises NotFoundError: When the id does not resolve.
        :raises InvalidError: When the write is rejected.
        """
        try:
            movie = self.repo.update_by_id(movie_id, data)
        except NotUniqueError as exc:
            raise InvalidError("Movie", "Duplicate value for a unique field") from exc
        except ValidationError as exc:
            raise InvalidError("Movie", str(exc)) from exc

        if movie is None:
            raise NotFoundError("Movie", movie_id)
        return movie

    def delete_movie(self, movie_id: str) -> Movie:
        """
        Delete a movie.

        Watchlists that reference it keep the id; populated views skip it.

        :raises NotFoundError: When the id does not resolve.
        """
        movie = self.repo.delete_by_id(movie_id)
        if movie is None:
            raise NotFoundError("Movie", movie_id)
        log.info("movie.deleted")
        return movie


def _as_rating(value: Any) -> Rating:
    if isinstance(value, Rating):
        return value
    return Rating(source=value.get("source"), value=value.get("value"))
