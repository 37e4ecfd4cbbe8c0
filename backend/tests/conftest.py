"""Pytest fixtures wiring the app to an in-memory MongoDB.

Each test starts with empty collections and a freshly seeded session store so
data and refresh tokens never leak between cases.
"""

from __future__ import annotations

from collections.abc import Callable, Generator
from typing import Any

import mongomock
import pytest
from flask import Flask

from watchlist_api import create_app
from watchlist_api.core.config import TestingConfig
from watchlist_api.core.extensions import SESSION_STORE_KEY
from watchlist_api.models import Movie, Watchlist
from watchlist_api.seeds.users import load_seed_users
from watchlist_api.services._shared.ports import InMemorySessionStore

from tests.helpers.auth import ADMIN_EMAIL, expired_token, issue_token


class TestConfig(TestingConfig):
    """Testing configuration for creating the Flask app.

    Notes
    -----
    - Swaps the MongoDB driver for ``mongomock`` and skips the startup ping.
    - Uses a fixed JWT secret so tokens built in helpers verify.
    """

    MONGODB_URI = "mongodb://localhost:27017/watchlist_test"
    MONGODB_CLIENT_CLASS = mongomock.MongoClient
    MONGODB_PING = False
    JWT_SECRET_KEY = "test-jwt-secret-with-enough-length-for-hs256"
    SECRET_KEY = "test-secret"
    SESSION_SEED_FILE = None
    USE_PROXYFIX = False
    LOG_LEVEL = "WARNING"


@pytest.fixture(scope="session")
def app() -> Generator[Flask, None, None]:
    """Create a Flask application configured for testing.

    Returns
    -------
    Generator[Flask, None, None]
        Application with :class:`TestConfig` applied, inside an app context.
    """
    application = create_app(TestConfig, instance_relative_config=False)
    with application.app_context():
        yield application


@pytest.fixture(autouse=True)
def _clean_state(app: Flask) -> Generator[None, None, None]:
    """Empty the collections and reseed the session store around each test."""
    Movie.drop_collection()
    Watchlist.drop_collection()
    app.extensions[SESSION_STORE_KEY] = InMemorySessionStore(load_seed_users())
    yield
    Movie.drop_collection()
    Watchlist.drop_collection()


@pytest.fixture()
def client(app: Flask) -> Any:
    """Return a Flask test client."""
    return app.test_client()


@pytest.fixture()
def session_store(app: Flask) -> InMemorySessionStore:
    """The session store used by the running app."""
    return app.extensions[SESSION_STORE_KEY]


@pytest.fixture()
def auth_token(app: Flask) -> str:
    """Generate a valid access token for the seeded administrator."""
    return issue_token(ADMIN_EMAIL)


@pytest.fixture()
def auth_header(auth_token: str) -> dict[str, str]:
    """Authorization header for authenticated requests."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture()
def expired_auth_token(app: Flask) -> str:
    """Return an already expired access token for the administrator."""
    return expired_token(ADMIN_EMAIL)


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk


@pytest.fixture()
def freeze_time() -> Callable[[str | None], Any]:
    """Factory returning :func:`freezegun.freeze_time`.

    Examples
    --------
    >>> def test_with_frozen_time(freeze_time):
    ...     with freeze_time("2024-01-01"):
    ...         ...
    """
    from freezegun import freeze_time as _freeze_time

    def _factory(target: str | None = None) -> Any:
        return _freeze_time(target or "2024-01-01")

    return _factory
