"""Movie catalog endpoints."""

from __future__ import annotations

from flask import Blueprint

from watchlist_api.api.deps import json_response, request_json, timing
from watchlist_api.schemas import MovieSchema, MovieUpdateSchema
from watchlist_api.services.movies.service import MovieService

bp = Blueprint("movies", __name__)

movie_schema = MovieSchema()
movies_schema = MovieSchema(many=True)
movie_update_schema = MovieUpdateSchema()


@bp.get("")
@timing
def list_movies():
    return json_response(movies_schema.dump(MovieService().list_movies()))


@bp.get("/<movie_id>")
@timing
def get_movie(movie_id: str):
    return json_response(movie_schema.dump(MovieService().get_movie(movie_id)))


@bp.get("/<field>/<value>")
@timing
def get_movie_by_field(field: str, value: str):
    """Return the first movie whose ``field`` equals ``value``."""

    movie = MovieService().get_movie_by_field(field, value)
    return json_response(movie_schema.dump(movie))


@bp.post("")
@timing
def create_movie():
    data = movie_schema.load(request_json())
    movie = MovieService().add_movie(data)
    return json_response(movie_schema.dump(movie), status=201)


@bp.put("/<movie_id>")
@timing
def update_movie(movie_id: str):
    """Replace any of ``imdbID``, ``Title``, ``Year``, ``Type`` and ``Poster``."""

    data = movie_update_schema.load(request_json())
    movie = MovieService().update_movie(movie_id, data)
    return json_response(movie_schema.dump(movie))


@bp.delete("/<movie_id>")
@timing
def delete_movie(movie_id: str):
    MovieService().delete_movie(movie_id)
    return json_response({"message": "Movie deleted successfully"})
