"""Watchlist repository."""

from __future__ import annotations

from watchlist_api.models.watchlist import Watchlist
from watchlist_api.repositories.base import DocumentRepository


class WatchlistRepository(DocumentRepository[Watchlist]):
    """Persistence operations for :class:`Watchlist` documents."""

    model = Watchlist
    _updatable_fields = ("name", "description", "updated_at")
