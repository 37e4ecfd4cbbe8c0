"""Watchlist resource schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, pre_dump, validate

from .movie import MovieSchema


class WatchlistSchema(Schema):
    """Representation of a watchlist with movie identifiers."""

    id = fields.String(data_key="_id", dump_only=True)
    name = fields.String()
    description = fields.String(allow_none=True)
    created_at = fields.DateTime()
    updated_at = fields.DateTime(allow_none=True)
    movies = fields.List(fields.String())


class WatchlistWithMoviesSchema(WatchlistSchema):
    """Watchlist whose ``movies`` are full movie documents.

    Dumps a :class:`~watchlist_api.services.watchlists.dto.WatchlistWithMoviesOut`.
    """

    movies = fields.List(fields.Nested(MovieSchema))

    @pre_dump
    def _merge_movies(self, out, **kwargs):
        wl = out.watchlist
        return {
            "id": wl.id,
            "name": wl.name,
            "description": wl.description,
            "created_at": wl.created_at,
            "updated_at": wl.updated_at,
            "movies": out.movies,
        }


class WatchlistCreateSchema(Schema):
    """Payload for creating a watchlist."""

    class Meta:
        unknown = EXCLUDE

    name = fields.String(required=True, validate=validate.Length(min=1))
    description = fields.String(load_default=None, allow_none=True)
    movies = fields.List(fields.String(), load_default=list)


class WatchlistUpdateSchema(Schema):
    """Payload for renaming or re-describing a watchlist."""

    class Meta:
        unknown = EXCLUDE

    name = fields.String(validate=validate.Length(min=1))
    description = fields.String(allow_none=True)


class AddMoviesSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    movie_ids = fields.List(fields.String(), data_key="movieIds", required=True)


class RemoveMovieSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    movie_id = fields.String(data_key="movieId", required=True)
