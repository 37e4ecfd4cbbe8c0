"""Document models persisted in MongoDB."""

from __future__ import annotations

from .movie import Movie, Rating
from .watchlist import Watchlist

__all__ = ["Movie", "Rating", "Watchlist"]
