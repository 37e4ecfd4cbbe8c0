"""Convenience exports for application schemas."""

from __future__ import annotations

from .auth import MeSchema, RefreshSchema, SessionCreateSchema, SessionResponseSchema
from .movie import MovieSchema, MovieUpdateSchema, RatingSchema
from .watchlist import (
    AddMoviesSchema,
    RemoveMovieSchema,
    WatchlistCreateSchema,
    WatchlistSchema,
    WatchlistUpdateSchema,
    WatchlistWithMoviesSchema,
)

__all__ = [
    "SessionCreateSchema",
    "RefreshSchema",
    "SessionResponseSchema",
    "MeSchema",
    "MovieSchema",
    "MovieUpdateSchema",
    "RatingSchema",
    "WatchlistSchema",
    "WatchlistWithMoviesSchema",
    "WatchlistCreateSchema",
    "WatchlistUpdateSchema",
    "AddMoviesSchema",
    "RemoveMovieSchema",
]
