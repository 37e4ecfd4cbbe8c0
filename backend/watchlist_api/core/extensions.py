"""Global Flask extension instances and initialization helpers."""

from __future__ import annotations

import logging

from flask import Flask, current_app
from flask_jwt_extended import JWTManager

from watchlist_api.seeds.users import load_seed_users
from watchlist_api.services._shared.ports.session_store import (
    InMemorySessionStore,
    SessionStore,
)

log = logging.getLogger(__name__)

# Global singletons (import-safe)
jwt = JWTManager()

SESSION_STORE_KEY = "session_store"


def init_app(app: Flask) -> None:
    """Initialize JWT signing and the per-application session store.

    Parameters
    ----------
    app: flask.Flask
        Application used to bind extension instances. A fresh
        :class:`InMemorySessionStore` is seeded from ``SESSION_SEED_FILE`` (or
        the built-in seed) and kept on ``app.extensions``.
    """
    jwt.init_app(app)

    users = load_seed_users(app.config.get("SESSION_SEED_FILE"))
    app.extensions[SESSION_STORE_KEY] = InMemorySessionStore(users)
    log.info("session_store.seeded users=%d", len(users))


def get_session_store() -> SessionStore:
    """Return the session store bound to the current application."""
    store = current_app.extensions.get(SESSION_STORE_KEY)
    if store is None:
        raise RuntimeError("Session store is not initialized. Call init_app() first.")
    return store
