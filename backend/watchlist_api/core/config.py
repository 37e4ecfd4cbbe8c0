"""Application settings with environment-based simple classes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from datetime import timedelta
from typing import Final

from dotenv import load_dotenv

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'


# Load .env during development (no-op when the file is missing)
load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def env_int(name: str, default: int) -> int:
    """Parse an integer from an environment variable, falling back to ``default``."""
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return int(val)


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    API_BASE_PREFIX: str
        Root path for registering API blueprints.
    SECRET_KEY: str
        Flask secret. Defaults to a development-safe placeholder and should be
        overridden in production.
    JWT_SECRET_KEY: str
        Key used by ``flask-jwt-extended`` for signing access tokens.
    JWT_ACCESS_TOKEN_EXPIRES: datetime.timedelta
        Lifetime of issued access tokens (``ACCESS_TOKEN_TTL_SECONDS``).
    MONGODB_URI: str
        Connection string (including database name) handed to mongoengine.
    MONGODB_PING: bool
        When ``True`` the factory pings MongoDB and aborts startup on failure.
    MONGODB_CLIENT_CLASS: type | None
        Optional client class override (tests inject ``mongomock.MongoClient``).
    SESSION_SEED_FILE: str | None
        Optional JSON file with the users loaded into the session store.
    PROPAGATE_EXCEPTIONS: bool
        Controls Flask error propagation.
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    CORS_ORIGINS: str
        Comma-separated list of allowed origins for CORS.
    USE_PROXYFIX: bool
        Wrap the WSGI app in werkzeug's ``ProxyFix`` (one trusted hop).
    DEBUG: bool
        Toggles Flask debug mode.
    TESTING: bool
        Enables Flask testing mode when ``True``.

    Notes
    -----
    Values are primarily sourced from environment variables, enabling
    configuration without code changes.
    """

    API_BASE_PREFIX = "/api"
    APP_VERSION = os.getenv("APP_VERSION", "dev")

    # Secrets / security
    SECRET_KEY = os.getenv("SECRET_KEY", "CHANGE_ME")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "CHANGE_ME_JWT")
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(seconds=env_int("ACCESS_TOKEN_TTL_SECONDS", 900))

    # MongoDB
    MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017/watchlistdb")
    MONGODB_PING = env_bool("MONGODB_PING", True)
    MONGODB_CLIENT_CLASS = None

    # Session store seed
    SESSION_SEED_FILE = os.getenv("SESSION_SEED_FILE")

    # Flask
    PROPAGATE_EXCEPTIONS = False

    # Logging & CORS
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    USE_PROXYFIX = env_bool("USE_PROXYFIX", True)

    # Flask built-ins
    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development."""

    DEBUG = env_bool("FLASK_DEBUG", True)
    CORS_MAX_AGE = 600  # 10 minutes


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    - Forces ``TESTING`` mode and disables debug logs.
    - Points at a throwaway database unless ``TEST_MONGODB_URI`` is set and
      skips the startup ping; the test suite swaps in an in-memory client.
    """

    TESTING = True
    DEBUG = False
    MONGODB_URI = os.getenv("TEST_MONGODB_URI", "mongodb://localhost:27017/watchlist_test")
    MONGODB_PING = False


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments."""

    DEBUG = False
    PROPAGATE_EXCEPTIONS = False


# Map names -> classes (simple, explicit)
CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``APP_ENV``.

    Returns
    -------
    type[BaseConfig]
        Class to pass to :meth:`flask.Config.from_object`.

    Notes
    -----
    Falls back to :class:`DevelopmentConfig` when ``APP_ENV`` is unset or
    unknown.
    """
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)
