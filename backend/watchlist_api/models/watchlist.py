"""Watchlist document."""

from __future__ import annotations

from datetime import UTC, datetime

from mongoengine import DateTimeField, Document, ListField, StringField


def utcnow() -> datetime:
    """Current UTC time as a naive datetime at millisecond precision.

    Matches the form MongoDB stores and returns.
    """
    now = datetime.now(UTC).replace(tzinfo=None)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class Watchlist(Document):
    """Named, ordered collection of movie identifiers.

    ``movies`` holds identifiers, not embedded documents, and never contains
    the same identifier twice. ``updated_at`` tracks name/description edits
    only; membership changes leave it untouched.
    """

    meta = {"collection": "watchlists", "db_alias": "default"}

    name = StringField(required=True)
    description = StringField()
    created_at = DateTimeField(default=utcnow)
    updated_at = DateTimeField()
    movies = ListField(StringField())

    def __repr__(self) -> str:
        return f"<Watchlist id={self.id} name={self.name!r}>"
