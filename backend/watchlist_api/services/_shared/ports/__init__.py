"""
watchlist_api.services._shared.ports
====================================

*Ports* (hexagonal interfaces) for the session mechanism.

Modules
-------
- :mod:`token_provider`:
    Defines :class:`~.TokenProvider`, the abstraction for signing and decoding
    access tokens, plus :class:`~.StubTokenProvider` for unit tests.

- :mod:`session_store`:
    Defines :class:`~.SessionStore` (seeded users + single-use refresh tokens)
    and its in-memory implementation :class:`~.InMemorySessionStore`.

Concrete adapters that need a framework (e.g. Flask-JWT-Extended) live under
``watchlist_api.infra``.
"""

from __future__ import annotations

from .session_store import InMemorySessionStore, SessionStore, UserRecord
from .token_provider import StubTokenProvider, TokenProvider

__all__ = [
    "TokenProvider",
    "StubTokenProvider",
    "SessionStore",
    "InMemorySessionStore",
    "UserRecord",
]
