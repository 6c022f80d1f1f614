"""
AUROC difference panel component.

Plots Deep Learning minus XGBoost AUROC for every model comparison, with
reference lines at zero and at the average difference, and summarises
wins, losses and ties.
Use `render_panel()` to draw the panel from a `ViewState`, or
`build_static_figure()` for a matplotlib version of the chart.
"""

import asyncio
import math
from typing import Any, Dict, Optional

import matplotlib.pyplot as plt
import plotly.graph_objects as go
import streamlit as st

from config.config import (
    AVERAGE_BADGE_LABEL,
    AVERAGE_LABEL_DECIMALS,
    AVERAGE_LINE_COLOR,
    CHART_SUBTITLE,
    GRID_COLOR,
    PERFORMANCE_TREND_TEXT,
    SERIES_COLOR,
    SERIES_NAME,
    TOOLTIP_DECIMALS,
    X_AXIS_LABEL,
    Y_AXIS_LABEL,
    ZERO_LINE_COLOR,
    ZERO_LINE_LABEL,
)
from config.models import DashboardConfig
from config.schemas import AggregateStats, Dataset
from comparison.parser import summarize_issues
from comparison.state import ComparisonView, ViewState
from dashboard.components.layout import (
    apply_custom_css,
    format_number,
    render_average_badge,
    render_insight_card,
    render_stat_tile,
)
from utils.logging import get_logger

logger = get_logger(__name__)

VIEW_KEY = "_auroc_difference_view"


def chart_title(total: int) -> str:
    return f"Deep Learning models versus XGBoost over {total} model comparisons"


def average_label(stats: AggregateStats) -> Optional[str]:
    if stats.average_difference is None:
        return None
    return f"Average: {stats.average_difference:.{AVERAGE_LABEL_DECIMALS}f}"


def key_finding_text(stats: AggregateStats) -> str:
    """Summarise which model leads on average and by how much."""
    average = stats.average_difference
    if average is None or not math.isfinite(average):
        return "No valid comparisons were loaded, so there is no overall leader."

    points = format_number(abs(average), AVERAGE_LABEL_DECIMALS)
    scope = f"across all {stats.total} model comparisons"
    if average < 0:
        return f"On average, XGBoost outperforms Deep Learning by {points} AUROC points {scope}."
    if average > 0:
        return f"On average, Deep Learning outperforms XGBoost by {points} AUROC points {scope}."
    return f"On average, Deep Learning and XGBoost perform equally {scope}."


def build_interactive_figure(dataset: Dataset, stats: AggregateStats) -> go.Figure:
    """
    Create the Plotly line chart shown in the dashboard.

    Args:
        dataset: Comparison rows in file order
        stats: Aggregates for the same rows

    Returns:
        Plotly figure with hover values at 4 decimals and both reference lines
    """
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=[row.row_index for row in dataset],
        y=[row.difference for row in dataset],
        customdata=[[row.neural_net, row.xgboost] for row in dataset],
        mode="lines+markers",
        name=SERIES_NAME,
        line=dict(color=SERIES_COLOR, width=2),
        marker=dict(color=SERIES_COLOR, size=4),
        hovertemplate=(
            "Comparison: %{x}<br>"
            f"DL - XGB Difference: %{{y:.{TOOLTIP_DECIMALS}f}}<br>"
            f"Deep Learning AUROC: %{{customdata[0]:.{TOOLTIP_DECIMALS}f}}<br>"
            f"XGBoost AUROC: %{{customdata[1]:.{TOOLTIP_DECIMALS}f}}"
            "<extra></extra>"
        ),
    ))

    fig.add_hline(
        y=0,
        line_dash="dash",
        line_color=ZERO_LINE_COLOR,
        annotation_text=ZERO_LINE_LABEL,
        annotation_position="top right",
        annotation_font_color=ZERO_LINE_COLOR,
    )

    label = average_label(stats)
    if label is not None:
        fig.add_hline(
            y=stats.average_difference,
            line_color=AVERAGE_LINE_COLOR,
            line_width=2,
            annotation_text=f"<b>{label}</b>",
            annotation_position="top right",
            annotation_font_color=AVERAGE_LINE_COLOR,
        )

    fig.update_layout(
        title=chart_title(stats.total),
        xaxis_title=X_AXIS_LABEL,
        yaxis_title=Y_AXIS_LABEL,
        height=500,
        showlegend=True,
        legend=dict(orientation="h", yanchor="top", y=-0.15),
        plot_bgcolor="white",
        hovermode="closest",
    )
    fig.update_xaxes(showgrid=True, gridcolor=GRID_COLOR)
    fig.update_yaxes(showgrid=True, gridcolor=GRID_COLOR, zeroline=False)
    return fig


def build_static_figure(dataset: Dataset, stats: AggregateStats) -> plt.Figure:
    """
    Create a matplotlib version of the difference chart.

    Args:
        dataset: Comparison rows in file order
        stats: Aggregates for the same rows

    Returns:
        Matplotlib figure
    """
    fig, ax = plt.subplots(figsize=(12, 5))

    if not dataset:
        ax.text(0.5, 0.5, "No comparison data available",
                ha="center", va="center", transform=ax.transAxes)
        ax.set_title(chart_title(0))
        return fig

    ax.plot(
        [row.row_index for row in dataset],
        [row.difference for row in dataset],
        color=SERIES_COLOR, linewidth=1.5, marker="o", markersize=2, label=SERIES_NAME,
    )
    ax.axhline(y=0, color=ZERO_LINE_COLOR, linestyle="--", label=ZERO_LINE_LABEL)

    label = average_label(stats)
    if label is not None:
        ax.axhline(y=stats.average_difference, color=AVERAGE_LINE_COLOR, linewidth=2, label=label)

    ax.set_title(chart_title(stats.total))
    ax.set_xlabel(X_AXIS_LABEL)
    ax.set_ylabel(Y_AXIS_LABEL)
    ax.grid(True, color=GRID_COLOR, linestyle="--")
    ax.legend()

    plt.tight_layout()
    return fig


def _render_details(state: ViewState, config: Optional[DashboardConfig]) -> None:
    result = state.result
    with st.expander("ℹ️ Data Source & Quality"):
        if config is not None:
            st.write(f"**File:** `{config.file_path}`")
        st.write(f"**Parse errors:** {len(result.issues)}")
        for column, count in summarize_issues(result.issues).items():
            st.write(f"- {column}: {count}")
        if result.issues:
            st.code("\n".join(str(issue) for issue in result.issues[:50]))
        st.write(f"**Difference column mismatches:** {result.stats.mismatch_count}")


def render_panel(
    state: ViewState,
    *,
    config: Optional[DashboardConfig] = None
) -> Dict[str, Any]:
    """
    Render the AUROC difference panel.

    Args:
        state: Current view state
        config: Dashboard config, shown in the details section when given

    Returns:
        Dictionary with panel status and counts for external monitoring
    """
    if state.loading:
        st.info("⏳ Loading data...")
        return {"status": "loading", "total_count": 0}

    apply_custom_css()

    result = state.result
    stats = result.stats

    if not result.dataset:
        if result.error:
            st.warning(f"⚠️ No data loaded. {result.error}")
        else:
            st.warning("⚠️ No comparisons found in the data file.")
        _render_details(state, config)
        return {
            "status": "no_data",
            "total_count": 0,
            "error": result.error,
            "issue_count": len(result.issues),
        }

    # Header
    st.title(chart_title(stats.total))
    st.markdown(CHART_SUBTITLE)
    render_average_badge(AVERAGE_BADGE_LABEL, stats.average_difference)

    # Main chart
    fig = build_interactive_figure(result.dataset, stats)
    st.plotly_chart(fig, width="stretch")

    # Summary tiles
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        render_stat_tile("Total Comparisons", stats.total, show_percent=False)
    with col2:
        render_stat_tile("Deep Learning Wins", stats.wins, stats.win_pct)
    with col3:
        render_stat_tile("XGBoost Wins", stats.losses, stats.loss_pct)
    with col4:
        render_stat_tile("Tied Performance", stats.ties, stats.tie_pct)

    # Insights
    col_a, col_b = st.columns(2)
    with col_a:
        render_insight_card("📊", "Performance Trend", PERFORMANCE_TREND_TEXT)
    with col_b:
        render_insight_card("⚡", "Key Finding", key_finding_text(stats))

    _render_details(state, config)

    return {
        "status": "success",
        "total_count": stats.total,
        "wins": stats.wins,
        "losses": stats.losses,
        "ties": stats.ties,
        "average_difference": stats.average_difference,
        "issue_count": len(result.issues),
        "mismatch_count": stats.mismatch_count,
    }


def get_view(config: DashboardConfig) -> ComparisonView:
    """Return this session's view, loading the data on first use."""
    view = st.session_state.get(VIEW_KEY)
    if view is None:
        view = ComparisonView(config)
        with st.spinner("Loading data..."):
            asyncio.run(view.activate())
        st.session_state[VIEW_KEY] = view
    return view


def reset_view() -> None:
    """Drop this session's view so the next run loads the file again."""
    view = st.session_state.pop(VIEW_KEY, None)
    if view is not None:
        view.teardown()
        logger.info("AUROC difference view reset")
