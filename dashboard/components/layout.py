"""
Shared layout helpers for dashboard components.

Provides common UI utilities for colors, centred messages and styling.
"""

from typing import Optional
import streamlit as st

from config.config import NEGATIVE_COLOR, POSITIVE_COLOR


def contribution_style(direction: str) -> str:
    """
    Classify a contribution direction for display.

    Args:
        direction: Direction label, e.g. "Strongly Positive" or "Neutral"

    Returns:
        "positive" when the label contains "Positive", otherwise "negative"
    """
    return "positive" if "Positive" in direction else "negative"


def style_color(style: str) -> str:
    """Hex color for a contribution style."""
    return POSITIVE_COLOR if style == "positive" else NEGATIVE_COLOR


def render_centered_message(message: str, color: Optional[str] = None) -> None:
    """
    Render a message centred in a tall block, used for loading/empty states.

    Args:
        message: Text to show
        color: Optional CSS color for the text
    """
    color_css = f"color: {color};" if color else ""
    st.markdown(
        f'<div class="centered-state" style="{color_css}">{message}</div>',
        unsafe_allow_html=True,
    )


def apply_custom_css() -> None:
    """Apply custom CSS styling for the scorecard layout."""
    st.markdown(f"""
    <style>
    .centered-state {{
        display: flex;
        justify-content: center;
        align-items: center;
        min-height: 60vh;
        font-size: 1.25rem;
        font-weight: 600;
    }}

    .score-value {{
        font-size: 4rem;
        font-weight: 900;
        text-align: center;
        line-height: 1.1;
    }}

    .score-caption {{
        font-size: 1.25rem;
        text-align: center;
        color: #4b5563;
    }}

    .score-subject {{
        color: #4f46e5;
        font-weight: 700;
    }}

    .explanation-box {{
        background-color: #f3f4f6;
        border: 1px solid #e5e7eb;
        padding: 1.5rem;
        border-radius: 0.75rem;
        font-size: 1.1rem;
        line-height: 1.6;
    }}

    .contribution-row {{
        display: flex;
        justify-content: space-between;
        background-color: #f9fafb;
        border: 1px solid #e5e7eb;
        padding: 0.75rem 1rem;
        border-radius: 0.5rem;
        margin-bottom: 0.75rem;
    }}

    .contribution-positive {{
        color: {style_color("positive")};
        font-weight: 600;
    }}

    .contribution-negative {{
        color: {style_color("negative")};
        font-weight: 600;
    }}
    </style>
    """, unsafe_allow_html=True)
