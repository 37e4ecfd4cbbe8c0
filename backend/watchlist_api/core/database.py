"""MongoDB connection management through mongoengine.

The connection is opened in :func:`watchlist_api.factory.create_app` and is
shared by every document class through mongoengine's ``default`` alias.
"""

from __future__ import annotations

import logging
from typing import Any

from flask import Flask
from mongoengine import DEFAULT_CONNECTION_NAME, connect, disconnect
from mongoengine.connection import get_db
from pymongo.errors import PyMongoError

log = logging.getLogger(__name__)


def init_app(app: Flask) -> None:
    """Connect mongoengine using the application's configuration.

    Parameters
    ----------
    app: flask.Flask
        Application whose ``MONGODB_URI``, ``MONGODB_CLIENT_CLASS`` and
        ``MONGODB_PING`` settings are consulted.

    Raises
    ------
    RuntimeError
        When ``MONGODB_PING`` is enabled and the server cannot be reached. A
        database that is unavailable at boot is fatal.
    """
    uri = app.config["MONGODB_URI"]
    options: dict[str, Any] = {"host": uri, "alias": DEFAULT_CONNECTION_NAME}
    client_class = app.config.get("MONGODB_CLIENT_CLASS")
    if client_class is not None:
        options["mongo_client_class"] = client_class

    # Re-running the factory (tests, reloader) must not reuse a stale client
    disconnect(DEFAULT_CONNECTION_NAME)
    connect(**options)

    if app.config.get("MONGODB_PING", True):
        try:
            ping()
        except PyMongoError as exc:
            raise RuntimeError(f"Failed to connect to MongoDB at {uri!r}") from exc

    log.info("mongodb.connected db=%s", get_db().name)


def ping() -> None:
    """Round-trip a ``ping`` command against the configured database."""
    get_db().command("ping")
