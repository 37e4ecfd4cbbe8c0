"""Integration tests for health, correlation ids and fallback errors."""

from __future__ import annotations

from tests.helpers.assertions import assert_error


def test_health_reports_database(client) -> None:
    resp = client.get("/api/health")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["status"] == "ok"
    assert body["db"] == "ok"
    assert "version" in body


def test_request_id_is_echoed(client) -> None:
    resp = client.get("/api/health", headers={"X-Request-ID": "abc-123"})
    assert resp.headers["X-Request-ID"] == "abc-123"


def test_request_id_is_generated(client) -> None:
    resp = client.get("/api/health")
    assert resp.headers.get("X-Request-ID")


def test_unknown_route_is_json(client) -> None:
    body = assert_error(client.get("/api/nothing/here/at/all"), 404, code="not_found")
    assert body["message"] == "Route '/api/nothing/here/at/all' not found"
