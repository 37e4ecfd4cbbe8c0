"""Logging for the Watchlist API.

Every line written to stdout is one JSON object. Lines emitted while a request
is being served carry that request's id, taken from ``X-Request-ID`` (or
``X-Correlation-ID``) when the caller sends one. The id is echoed back on the
response so clients can quote it, and it is the same id found in error bodies.

One ``request.completed`` line is written per request on the
``watchlist_api.access`` logger.
"""

from __future__ import annotations

import json
import logging
import sys
import time
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from flask import Flask, Response, g, has_request_context, request

REQUEST_ID_HEADER = "X-Request-ID"
_INCOMING_ID_HEADERS = (REQUEST_ID_HEADER, "X-Correlation-ID")

# Record attributes passed through ``extra=`` that make it into the output
EXTRA_KEYS = ("email", "method", "path", "status", "elapsed_ms", "endpoint")

access_log = logging.getLogger("watchlist_api.access")


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        line: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", None),
        }
        line.update({k: getattr(record, k) for k in EXTRA_KEYS if hasattr(record, k)})
        if record.exc_info:
            line["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(line, default=str)


class RequestIdFilter(logging.Filter):
    """Attach ``request_id`` to records (``None`` outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = ensure_request_id() if has_request_context() else None
        return True


def _incoming_request_id() -> str | None:
    return next(
        (request.headers[h] for h in _INCOMING_ID_HEADERS if request.headers.get(h)),
        None,
    )


def ensure_request_id() -> str:
    """
    Id of the request being served.

    Resolved once per request and cached on ``g``. Outside a request a fresh
    uuid is returned each call.
    """
    if not has_request_context():
        return str(uuid4())
    if "request_id" not in g:
        g.request_id = _incoming_request_id() or str(uuid4())
    return g.request_id


def _as_level(level: str | int) -> int | str:
    if isinstance(level, int):
        return level
    name = level.upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else name


def configure_logging(level: str | int = "INFO") -> None:
    """Replace the root handlers with a single JSON handler on stdout."""
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdFilter())
    handler.setFormatter(JSONFormatter())

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(_as_level(level))


def init_app(app: Flask) -> None:
    app.logger.addFilter(RequestIdFilter())

    @app.before_request
    def _start_request() -> None:
        # g can be shared by several requests under one pushed app context
        g.pop("request_id", None)
        g.request_started = time.perf_counter()
        ensure_request_id()

    @app.after_request
    def _finish_request(response: Response) -> Response:
        response.headers.setdefault(REQUEST_ID_HEADER, ensure_request_id())
        started = g.pop("request_started", None)
        extra: dict[str, Any] = {
            "method": request.method,
            "path": request.path,
            "status": response.status_code,
        }
        if started is not None:
            extra["elapsed_ms"] = round((time.perf_counter() - started) * 1000, 2)
        access_log.info("request.completed", extra=extra)
        return response


__all__ = [
    "REQUEST_ID_HEADER",
    "EXTRA_KEYS",
    "JSONFormatter",
    "RequestIdFilter",
    "ensure_request_id",
    "configure_logging",
    "init_app",
]
