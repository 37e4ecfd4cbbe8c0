"""Movie repository."""

from __future__ import annotations

from collections.abc import Iterable

from watchlist_api.models.movie import Movie
from watchlist_api.repositories.base import DocumentRepository, as_object_id


class MovieRepository(DocumentRepository[Movie]):
    """Persistence operations for :class:`Movie` documents."""

    model = Movie
    _lookup_fields = Movie.LOOKUP_FIELDS
    _updatable_fields = Movie.UPDATABLE_FIELDS

    def resolve_references(self, refs: Iterable[str]) -> list[Movie]:
        """Resolve watchlist references to movies, preserving reference order.

        A reference that parses as an ObjectId is matched against ``_id``;
        anything else is matched against ``imdbID``. Unresolvable references
        are skipped.
        """
        refs = list(refs)
        by_oid = {str(m.id): m for m in self.find_many_by_ids(refs)}
        external = [r for r in refs if as_object_id(r) is None]
        by_imdb = (
            {m.imdbID: m for m in Movie.objects(imdbID__in=external)} if external else {}
        )

        resolved: list[Movie] = []
        for ref in refs:
            movie = by_oid.get(ref) if as_object_id(ref) is not None else by_imdb.get(ref)
            if movie is not None:
                resolved.append(movie)
        return resolved
