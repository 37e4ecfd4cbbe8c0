"""API blueprint package mounting every resource under the base prefix."""

from __future__ import annotations

from collections.abc import Iterable

from flask import Blueprint, Flask


def register_blueprint_group(
    app: Flask,
    *,
    base_prefix: str,
    entries: Iterable[tuple[Blueprint, str]],
) -> None:
    """Register related blueprints beneath a common prefix.

    Parameters
    ----------
    app:
        Application instance receiving the blueprints.
    base_prefix:
        Prefix applied to all entries, typically ``"/api"``.
    entries:
        Iterable of ``(blueprint, relative_prefix)`` pairs where
        ``relative_prefix`` is appended to ``base_prefix``. An empty relative
        prefix mounts the blueprint at the base itself.
    """

    for bp, rel_prefix in entries:
        segments = [base_prefix.strip("/"), rel_prefix.strip("/")]
        app.register_blueprint(bp, url_prefix="/" + "/".join(s for s in segments if s))


def init_app(app: Flask) -> None:
    """Register the API resources on the Flask app."""

    from watchlist_api.api.resources import REGISTRY

    register_blueprint_group(
        app,
        base_prefix=app.config.get("API_BASE_PREFIX", "/api"),
        entries=REGISTRY,
    )


__all__ = ["init_app", "register_blueprint_group"]
