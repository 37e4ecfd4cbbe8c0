"""Unit tests for the in-memory session store."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest
from watchlist_api.services._shared.ports import InMemorySessionStore, UserRecord


@pytest.fixture()
def store() -> InMemorySessionStore:
    return InMemorySessionStore([UserRecord(email="a@a.com", password="x", roles=("editor",))])


def test_get_user_returns_seeded_user_or_none(store):
    assert store.get_user("a@a.com").roles == ("editor",)
    assert store.get_user("missing@a.com") is None


def test_new_refresh_tokens_are_unique(store):
    tokens = {store.new_refresh_token() for _ in range(50)}
    assert len(tokens) == 50


def test_user_may_hold_several_tokens(store):
    store.add_refresh_token("a@a.com", "t1")
    store.add_refresh_token("a@a.com", "t2")

    assert store.has_refresh_token("a@a.com", "t1")
    assert store.has_refresh_token("a@a.com", "t2")
    assert store.refresh_tokens("a@a.com") == ["t1", "t2"]


def test_tokens_are_scoped_per_user(store):
    store.add_refresh_token("a@a.com", "t1")
    assert not store.has_refresh_token("other@a.com", "t1")


def test_remove_only_drops_the_given_token(store):
    store.add_refresh_token("a@a.com", "t1")
    store.add_refresh_token("a@a.com", "t2")

    assert store.remove_refresh_token("a@a.com", "t1") is True
    assert store.refresh_tokens("a@a.com") == ["t2"]


def test_remove_unknown_token_is_a_noop(store):
    assert store.remove_refresh_token("a@a.com", "nope") is False
    assert store.refresh_tokens("a@a.com") == []


def test_consume_succeeds_once(store):
    store.add_refresh_token("a@a.com", "t1")

    assert store.consume_refresh_token("a@a.com", "t1") is True
    assert store.consume_refresh_token("a@a.com", "t1") is False


def test_concurrent_consume_has_a_single_winner(store):
    """Only one of many simultaneous redemptions of one token succeeds."""
    store.add_refresh_token("a@a.com", "shared")

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: store.consume_refresh_token("a@a.com", "shared"), range(32)))

    assert results.count(True) == 1
