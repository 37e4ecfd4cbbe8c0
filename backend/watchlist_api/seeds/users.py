"""Seed users loaded into the session store when the application starts."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from watchlist_api.services._shared.ports.session_store import UserRecord

LOGGER = logging.getLogger(__name__)

DEFAULT_USERS: tuple[Mapping[str, Any], ...] = (
    {
        "email": "admin@watchlist.dev",
        "password": "123456",
        "permissions": ["movies.list", "movies.create", "watchlists.list", "watchlists.create"],
        "roles": ["administrator"],
    },
    {
        "email": "editor@watchlist.dev",
        "password": "123456",
        "permissions": ["movies.list", "watchlists.list"],
        "roles": ["editor"],
    },
)


def build_users(rows: Iterable[Mapping[str, Any]]) -> list[UserRecord]:
    """Turn raw seed rows into :class:`UserRecord` values.

    :raises ValueError: When a row lacks ``email`` or ``password``.
    """
    users: list[UserRecord] = []
    for row in rows:
        email = row.get("email")
        password = row.get("password")
        if not email or password is None:
            raise ValueError(f"Seed user requires 'email' and 'password': {row!r}")
        users.append(
            UserRecord(
                email=str(email),
                password=str(password),
                permissions=tuple(row.get("permissions") or ()),
                roles=tuple(row.get("roles") or ()),
            )
        )
    return users


def load_seed_users(path: str | None = None) -> list[UserRecord]:
    """Load seed users from a JSON array file, or the built-in list when ``path`` is empty."""
    if not path:
        return build_users(DEFAULT_USERS)
    rows = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(rows, list):
        raise ValueError(f"Seed file {path!r} must contain a JSON array")
    LOGGER.info("Loading %d seed users from %s", len(rows), path)
    return build_users(rows)
