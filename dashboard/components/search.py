"""
Company search control.

Keeps the text being edited (the draft) separate from the committed
*active query* that drives loading. Editing the draft has no side effects;
only pressing Search commits it. State lives in any mutable mapping, which is
``st.session_state`` in the app and a plain dict in tests.
"""

from typing import MutableMapping, Any, Optional
import streamlit as st

from config.config import DEFAULT_COMPANY

DRAFT_KEY = "search_draft"
ACTIVE_QUERY_KEY = "active_query"


def init_search_state(
    state: MutableMapping[str, Any],
    default_query: str = DEFAULT_COMPANY,
) -> None:
    """Seed draft and active query with ``default_query`` on first use."""
    state.setdefault(DRAFT_KEY, default_query)
    state.setdefault(ACTIVE_QUERY_KEY, default_query)


def active_query(state: MutableMapping[str, Any]) -> Optional[str]:
    return state.get(ACTIVE_QUERY_KEY)


def commit_search(state: MutableMapping[str, Any]) -> Optional[str]:
    """
    Commit the draft as the active query.

    Returns:
        The committed query, or None when the draft is blank (nothing changes)
    """
    query = str(state.get(DRAFT_KEY, "")).strip()
    if not query:
        return None
    state[ACTIVE_QUERY_KEY] = query
    return query


def render_search_bar(state: MutableMapping[str, Any]) -> Optional[str]:
    """
    Draw the search field and button.

    Returns:
        The newly committed query when Search was pressed, otherwise None
    """
    col_input, col_button = st.columns([4, 1])
    with col_input:
        st.text_input(
            "Company name",
            key=DRAFT_KEY,
            placeholder="Enter company name...",
            label_visibility="collapsed",
        )
    with col_button:
        pressed = st.button("Search", type="primary")

    if not pressed:
        return None

    committed = commit_search(state)
    if committed is None:
        st.warning("⚠️ Enter a company name to search.")
    return committed
