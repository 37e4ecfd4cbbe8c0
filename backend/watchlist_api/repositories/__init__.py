"""Repository layer exports."""

from __future__ import annotations

from .base import DocumentRepository, as_object_id
from .movie import MovieRepository
from .watchlist import WatchlistRepository

__all__ = ["DocumentRepository", "MovieRepository", "WatchlistRepository", "as_object_id"]
