"""Unit tests for the logging utility."""

from __future__ import annotations

import json
import logging

from watchlist_api.core.logger import JSONFormatter, configure_logging, ensure_request_id


def test_configure_logging_sets_level() -> None:
    """``configure_logging`` should set the root logger level."""

    configure_logging("DEBUG")
    assert logging.getLogger().level == logging.DEBUG
    configure_logging("WARNING")


def test_json_formatter_includes_known_extras() -> None:
    record = logging.LogRecord("watchlist_api", logging.INFO, __file__, 1, "session.issued", None, None)
    record.email = "a@a.com"
    record.request_id = "req-1"
    record.unrelated = "dropped"

    payload = json.loads(JSONFormatter().format(record))

    assert payload["message"] == "session.issued"
    assert payload["level"] == "INFO"
    assert payload["email"] == "a@a.com"
    assert payload["request_id"] == "req-1"
    assert "unrelated" not in payload


def test_request_id_falls_back_to_correlation_header(app) -> None:
    with app.test_request_context("/", headers={"X-Correlation-ID": "corr-7"}):
        assert ensure_request_id() == "corr-7"
        assert ensure_request_id() == "corr-7"


def test_request_id_is_stable_within_a_request(app) -> None:
    with app.test_request_context("/"):
        first = ensure_request_id()
        assert ensure_request_id() == first


def test_access_line_reports_status_and_elapsed_time(client, caplog) -> None:
    with caplog.at_level(logging.INFO, logger="watchlist_api.access"):
        client.get("/api/health", headers={"X-Request-ID": "req-acc"})

    [record] = [r for r in caplog.records if r.name == "watchlist_api.access"]
    assert record.getMessage() == "request.completed"
    assert record.status == 200
    assert record.path == "/api/health"
    assert record.elapsed_ms >= 0
