"""
Scorecard panel component.

Renders the loader state: a loading indicator, a not-found or error message,
or the full scorecard (score, explanation, feature contributions and score
history chart). Use `render_panel(state)` to draw it and get back a status
dict for the sidebar.
"""

from html import escape
from typing import Any, Dict, List, Optional, Sequence, Tuple

import streamlit as st
import matplotlib.pyplot as plt
import matplotlib.dates as mdates

from config.config import CHART_LINE_COLOR, SCORE_AXIS_MAX, SCORE_AXIS_MIN
from config.schemas import HistoryPoint, ScoreReport
from service.score_loader import Failed, Loaded, LoaderState, Loading, NotFound
from dashboard.components.layout import (
    apply_custom_css,
    contribution_style,
    render_centered_message,
)

LOADING_MESSAGE = "Loading data..."
NOT_FOUND_MESSAGE = "Company not found."


def format_score(report: ScoreReport) -> str:
    """The headline number, exactly as reported."""
    return str(report.score)


def feature_rows(report: ScoreReport) -> List[Dict[str, str]]:
    """Feature contributions in report order with their display style."""
    return [
        {
            "feature": item.feature,
            "direction": item.direction,
            "style": contribution_style(item.direction),
        }
        for item in report.feature_contributions
    ]


def grid_rows(items: Sequence[Any], columns: int = 2) -> List[Sequence[Any]]:
    """Chunk ``items`` row-major into rows of ``columns`` cells."""
    return [items[i:i + columns] for i in range(0, len(items), columns)]


def render_history_chart(
    history: Sequence[HistoryPoint],
    y_domain: Tuple[int, int] = (SCORE_AXIS_MIN, SCORE_AXIS_MAX),
) -> plt.Figure:
    """
    Create the score history line chart.

    The y-axis is pinned to ``y_domain`` whatever the data; points outside it
    fall out of frame.

    Args:
        history: Chronological history points
        y_domain: (min, max) of the score axis

    Returns:
        Matplotlib figure
    """
    fig, ax = plt.subplots(figsize=(10, 4))
    ax.set_ylim(*y_domain)

    if not history:
        ax.text(0.5, 0.5, "No score history available",
                ha="center", va="center", transform=ax.transAxes)
        ax.set_title("Score History")
        return fig

    dates = [point.as_date() for point in history]
    scores = [point.score for point in history]

    ax.plot(dates, scores, color=CHART_LINE_COLOR, linewidth=3,
            marker="o", markersize=5, label="Score")
    ax.set_ylabel("Score")
    ax.grid(True, linestyle="--", alpha=0.5)

    ax.xaxis.set_major_formatter(mdates.DateFormatter('%Y-%m-%d'))
    ax.xaxis.set_major_locator(mdates.AutoDateLocator())
    fig.autofmt_xdate()

    plt.tight_layout()
    return fig


def _render_scorecard(report: ScoreReport) -> None:
    # Main score
    st.markdown(
        f'<div class="score-value">{format_score(report)}</div>'
        f'<div class="score-caption">Credit Score for '
        f'<span class="score-subject">{escape(report.subject_name)}</span></div>',
        unsafe_allow_html=True,
    )

    st.subheader("Why this score?")
    st.markdown(
        f'<div class="explanation-box">{escape(report.explanation)}</div>',
        unsafe_allow_html=True,
    )

    st.subheader("Feature Contributions")
    for row in grid_rows(feature_rows(report)):
        cols = st.columns(2)
        for col, item in zip(cols, row):
            with col:
                st.markdown(
                    f'<div class="contribution-row">'
                    f'<span>{escape(item["feature"])}</span>'
                    f'<span class="contribution-{item["style"]}">{escape(item["direction"])}</span>'
                    f'</div>',
                    unsafe_allow_html=True,
                )

    st.subheader("Score History")
    fig = render_history_chart(report.history)
    st.pyplot(fig)
    plt.close(fig)


def render_panel(state: Optional[LoaderState]) -> Dict[str, Any]:
    """
    Render the scorecard for the current loader state.

    Returns:
        Dict containing panel state and counts for external monitoring.
    """
    apply_custom_css()

    if state is None or isinstance(state, Loading):
        render_centered_message(LOADING_MESSAGE)
        return {"status": "loading", "query": getattr(state, "query", None)}

    if isinstance(state, NotFound):
        render_centered_message(NOT_FOUND_MESSAGE, color="#ef4444")
        return {"status": "not_found", "query": state.query}

    if isinstance(state, Failed):
        render_centered_message(f"⚠️ {escape(state.message)}", color="#ef4444")
        return {"status": "failed", "query": state.query, "message": state.message}

    if isinstance(state, Loaded):
        report = state.report
        _render_scorecard(report)
        return {
            "status": "success",
            "query": state.query,
            "score": report.score,
            "feature_count": len(report.feature_contributions),
            "history_count": len(report.history),
        }

    raise TypeError(f"Unknown loader state: {state!r}")
