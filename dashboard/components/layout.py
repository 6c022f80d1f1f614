"""
Shared layout helpers for dashboard components.

Provides common UI utilities for colors, number formatting, and stat tiles.
"""

from typing import Optional
import streamlit as st

from config.config import NOT_AVAILABLE, PERCENT_DECIMALS, TOOLTIP_DECIMALS


def difference_color(value: Optional[float]) -> str:
    """
    Get color for a Deep Learning minus XGBoost difference.

    Args:
        value: Difference value, or None when undefined

    Returns:
        "green" when Deep Learning is at least level, "red" when XGBoost
        leads, "gray" when the value is undefined
    """
    if value is None:
        return "gray"
    return "green" if value >= 0 else "red"


def format_number(value: Optional[float], decimals: int = TOOLTIP_DECIMALS) -> str:
    """
    Format a statistic for display.

    Args:
        value: Number to format, or None
        decimals: Digits after the decimal point

    Returns:
        Fixed-point string, or the N/A sentinel for undefined values
    """
    if value is None or value != value:
        return NOT_AVAILABLE
    return f"{value:.{decimals}f}"


def format_percent(value: Optional[float], decimals: int = PERCENT_DECIMALS) -> str:
    if value is None or value != value:
        return NOT_AVAILABLE
    return f"{value:.{decimals}f}%"


def render_stat_tile(
    label: str,
    value: int,
    percent: Optional[float] = None,
    show_percent: bool = True,
) -> None:
    """
    Render a summary tile with an optional percentage caption.

    Args:
        label: Tile title
        value: Count shown as the main figure
        percent: Share of the total (None when undefined)
        show_percent: Whether to show the percentage caption at all
    """
    st.metric(label=label, value=f"{value}")
    if show_percent:
        st.caption(format_percent(percent))


def render_average_badge(label: str, value: Optional[float]) -> None:
    """Render the colored average-difference badge."""
    color = difference_color(value)
    st.markdown(f"**{label}:** :{color}[**{format_number(value)}**]")


def render_insight_card(icon: str, title: str, body: str) -> None:
    """Render a narrative insight card."""
    st.info(f"**{title}**\n\n{body}", icon=icon)


def apply_custom_css() -> None:
    """Apply custom CSS styling for compact stat tiles."""
    st.markdown("""
    <style>
    .stMetric {
        background-color: #ffffff;
        border: 1px solid #e2e8f0;
        padding: 0.5rem 1rem;
        border-radius: 0.5rem;
    }
    </style>
    """, unsafe_allow_html=True)
