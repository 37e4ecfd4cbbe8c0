"""Watchlist endpoints, including membership edits."""

from __future__ import annotations

from flask import Blueprint

from watchlist_api.api.deps import json_response, request_json, timing
from watchlist_api.schemas import (
    AddMoviesSchema,
    RemoveMovieSchema,
    WatchlistCreateSchema,
    WatchlistSchema,
    WatchlistUpdateSchema,
    WatchlistWithMoviesSchema,
)
from watchlist_api.services.watchlists.service import WatchlistService

bp = Blueprint("watchlists", __name__)

watchlist_schema = WatchlistSchema()
watchlists_schema = WatchlistSchema(many=True)
watchlist_with_movies_schema = WatchlistWithMoviesSchema()
create_schema = WatchlistCreateSchema()
update_schema = WatchlistUpdateSchema()
add_movies_schema = AddMoviesSchema()
remove_movie_schema = RemoveMovieSchema()


@bp.get("")
@timing
def list_watchlists():
    return json_response(watchlists_schema.dump(WatchlistService().list_watchlists()))


@bp.get("/<watchlist_id>")
@timing
def get_watchlist(watchlist_id: str):
    return json_response(watchlist_schema.dump(WatchlistService().get_watchlist(watchlist_id)))


@bp.get("/<watchlist_id>/movies")
@timing
def get_watchlist_movies(watchlist_id: str):
    """Return the watchlist with its movie ids expanded to movie documents."""

    out = WatchlistService().get_with_movies(watchlist_id)
    return json_response(watchlist_with_movies_schema.dump(out))


@bp.put("/<watchlist_id>/movies")
@timing
def add_movies(watchlist_id: str):
    """Append ``movieIds`` that are not yet in the watchlist."""

    data = add_movies_schema.load(request_json())
    watchlist = WatchlistService().add_movies(watchlist_id, data["movie_ids"])
    return json_response(watchlist_schema.dump(watchlist))


@bp.put("/<watchlist_id>/moviesId")
@timing
def remove_movie(watchlist_id: str):
    """Remove ``movieId`` from the watchlist."""

    data = remove_movie_schema.load(request_json())
    watchlist = WatchlistService().remove_movie(watchlist_id, data["movie_id"])
    return json_response(watchlist_schema.dump(watchlist))


@bp.post("")
@timing
def create_watchlist():
    data = create_schema.load(request_json())
    watchlist = WatchlistService().create_watchlist(data)
    return json_response(watchlist_schema.dump(watchlist), status=201)


@bp.put("/<watchlist_id>")
@timing
def update_watchlist(watchlist_id: str):
    data = update_schema.load(request_json())
    watchlist = WatchlistService().update_watchlist(watchlist_id, data)
    return json_response(watchlist_schema.dump(watchlist))


@bp.delete("/<watchlist_id>")
@timing
def delete_watchlist(watchlist_id: str):
    WatchlistService().delete_watchlist(watchlist_id)
    return json_response({"message": "Watchlist deleted successfully"})
