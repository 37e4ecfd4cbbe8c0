"""HTTP middleware: CORS for the API prefix and upstream proxy headers."""

from __future__ import annotations

from flask import Flask
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix


def init_cors(app: Flask) -> None:
    """Configure CORS for API endpoints.

    ``CORS_ORIGINS`` is a comma-separated list. Blank or ``"*"`` allows any
    origin and disables credential support. Browsers may send the
    ``Authorization`` bearer header and read the ``X-Request-ID`` echo.
    """
    raw_origins = app.config.get("CORS_ORIGINS", "")
    origins = [o.strip() for o in raw_origins.split(",") if o.strip()]
    wildcard = len(origins) == 0 or origins == ["*"]
    prefix = app.config.get("API_BASE_PREFIX", "/api").rstrip("/")

    CORS(
        app,
        resources={rf"{prefix}/*": {"origins": "*" if wildcard else origins}},
        supports_credentials=not wildcard,
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
        max_age=app.config.get("CORS_MAX_AGE", 600),
    )


def init_proxy(app: Flask) -> None:
    """Trust one hop of ``X-Forwarded-*`` headers unless ``USE_PROXYFIX`` is off."""
    if app.config.get("USE_PROXYFIX", True):
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)


def init_app(app: Flask) -> None:
    init_proxy(app)
    init_cors(app)
