"""Tests for the company search control state."""

from dashboard.components.search import (
    ACTIVE_QUERY_KEY,
    DRAFT_KEY,
    active_query,
    commit_search,
    init_search_state,
)


def test_init_seeds_default_company():
    state = {}
    init_search_state(state)

    assert state[DRAFT_KEY] == "Alpha Corp"
    assert active_query(state) == "Alpha Corp"


def test_init_keeps_existing_values():
    state = {DRAFT_KEY: "Gamma", ACTIVE_QUERY_KEY: "Beta"}
    init_search_state(state, "Alpha Corp")

    assert state[DRAFT_KEY] == "Gamma"
    assert active_query(state) == "Beta"


def test_editing_draft_does_not_change_active_query():
    state = {}
    init_search_state(state)

    state[DRAFT_KEY] = "Beta Industries"

    assert active_query(state) == "Alpha Corp"


def test_commit_moves_draft_into_active_query():
    state = {}
    init_search_state(state)
    state[DRAFT_KEY] = "  Beta Industries "

    committed = commit_search(state)

    assert committed == "Beta Industries"
    assert active_query(state) == "Beta Industries"


def test_blank_commit_is_ignored():
    state = {}
    init_search_state(state)
    state[DRAFT_KEY] = "   "

    assert commit_search(state) is None
    assert active_query(state) == "Alpha Corp"


def test_commit_same_query_twice_returns_it_each_time():
    """Re-searching the same name is a new search, not a no-op."""
    state = {}
    init_search_state(state)

    assert commit_search(state) == "Alpha Corp"
    assert commit_search(state) == "Alpha Corp"
