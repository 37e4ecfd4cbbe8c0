"""Service layer public API.

This package exposes the essential building blocks for the service layer so that
callers can import from :mod:`watchlist_api.services` without knowing internal
structure.

Re-exports
----------
- Base primitives (from ``watchlist_api.services._shared.base``)
    * :class:`BaseService`

- Session service (from ``watchlist_api.services.auth``)
    * :class:`AuthService`
    * DTOs: :class:`LoginIn`, :class:`RefreshIn`, :class:`SessionOut`,
      :class:`UserProfileOut`

- Catalog and watchlist services
    * :class:`MovieService`
    * :class:`WatchlistService`, :class:`WatchlistWithMoviesOut`
"""

from __future__ import annotations

from ._shared.base import BaseService
from .auth.dto import LoginIn, RefreshIn, SessionOut, UserProfileOut
from .auth.service import AuthService
from .movies.service import MovieService
from .watchlists.dto import WatchlistWithMoviesOut
from .watchlists.service import WatchlistService

__all__ = [
    "BaseService",
    "AuthService",
    "LoginIn",
    "RefreshIn",
    "SessionOut",
    "UserProfileOut",
    "MovieService",
    "WatchlistService",
    "WatchlistWithMoviesOut",
]
