from __future__ import annotations

import threading
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol
from uuid import uuid4


@dataclass(frozen=True, slots=True)
class UserRecord:
    """
    Seeded user known to the session store.

    :ivar email: Unique login key.
    :ivar password: Plaintext password compared verbatim on sign-in.
    :ivar permissions: Permission strings embedded in access tokens.
    :ivar roles: Role strings embedded in access tokens.
    """

    email: str
    password: str
    permissions: tuple[str, ...] = field(default_factory=tuple)
    roles: tuple[str, ...] = field(default_factory=tuple)


class SessionStore(Protocol):
    """
    Process-local store of users and their currently valid refresh tokens.

    Refresh tokens are opaque strings. A user may hold several valid tokens at
    once; each one is single-use.
    """

    def get_user(self, email: str) -> UserRecord | None:
        """Return the seeded user for ``email`` (``None`` when unknown)."""

    def new_refresh_token(self) -> str:
        """Generate a new opaque refresh token value."""

    def add_refresh_token(self, email: str, token: str) -> None:
        """Register ``token`` as valid for ``email`` (appended, no cap)."""

    def has_refresh_token(self, email: str, token: str) -> bool:
        """Tell whether ``token`` is currently registered for ``email``."""

    def remove_refresh_token(self, email: str, token: str) -> bool:
        """Drop ``token`` for ``email``. :returns: True if it was registered."""

    def consume_refresh_token(self, email: str, token: str) -> bool:
        """
        Atomically check and remove ``token`` for ``email``.

        :returns: True exactly once per registered token.
        """

    def refresh_tokens(self, email: str) -> list[str]:
        """Snapshot of the tokens currently valid for ``email``."""


class InMemorySessionStore(SessionStore):
    """
    In-memory session store seeded once at application start.

    .. note::
       A single lock serializes token writes so that two concurrent refreshes
       presenting the same token cannot both consume it.
    """

    def __init__(self, users: Iterable[UserRecord] = ()) -> None:
        self._users: dict[str, UserRecord] = {u.email: u for u in users}
        self._tokens: dict[str, list[str]] = {}
        self._lock = threading.Lock()

    def get_user(self, email: str) -> UserRecord | None:
        return self._users.get(email)

    def new_refresh_token(self) -> str:
        return str(uuid4())

    def add_refresh_token(self, email: str, token: str) -> None:
        with self._lock:
            self._tokens.setdefault(email, []).append(token)

    def has_refresh_token(self, email: str, token: str) -> bool:
        return token in self._tokens.get(email, [])

    def remove_refresh_token(self, email: str, token: str) -> bool:
        with self._lock:
            return self._remove(email, token)

    def consume_refresh_token(self, email: str, token: str) -> bool:
        with self._lock:
            return self._remove(email, token)

    def refresh_tokens(self, email: str) -> list[str]:
        return list(self._tokens.get(email, []))

    def _remove(self, email: str, token: str) -> bool:
        # Empty lists are left in place; callers only ever look tokens up.
        tokens = self._tokens.get(email)
        if not tokens or token not in tokens:
            return False
        tokens.remove(token)
        return True
