"""Assertion helper utilities for tests."""

from __future__ import annotations


def assert_json_keys(data: dict, required: set[str]) -> None:
    """Ensure that all required keys are present in ``data``.

    Raises
    ------
    AssertionError
        If any required key is missing.
    """

    missing = required - data.keys()
    assert not missing, f"Missing keys: {', '.join(sorted(missing))}"


def assert_error(resp, status: int, *, code: str | None = None, message: str | None = None) -> dict:
    """Check ``resp`` is a JSON error envelope with the given status.

    Returns
    -------
    dict
        The decoded body, for further assertions.
    """

    assert resp.status_code == status, resp.get_data(as_text=True)
    body = resp.get_json()
    assert_json_keys(body, {"error", "code", "message", "status", "request_id"})
    assert body["error"] is True
    assert body["status"] == status
    if code is not None:
        assert body["code"] == code
    if message is not None:
        assert body["message"] == message
    return body
