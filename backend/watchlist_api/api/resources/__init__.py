"""API resource blueprints."""

from __future__ import annotations

from flask import Blueprint

# Import blueprints *only here* to keep imports localized and avoid cycles.
from .health import bp as health_bp
from .movies import bp as movies_bp
from .sessions import bp as sessions_bp
from .watchlists import bp as watchlists_bp

# Each tuple: (blueprint, url_prefix_relative_to_base)
REGISTRY: list[tuple[Blueprint, str]] = [
    (health_bp, ""),  # -> /api/health
    (sessions_bp, ""),  # -> /api/sessions, /api/refresh, /api/me
    (movies_bp, "/movies"),
    (watchlists_bp, "/watchlists"),
]
