"""
AUROC Difference Dashboard - Streamlit Application

Compares Deep Learning and XGBoost AUROC across model comparisons.
Run with: streamlit run dashboard/app.py
"""

import streamlit as st
import sys
from pathlib import Path
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend for Streamlit

# Add src and repository root to path so the app runs without installing
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.config import LOG_LEVEL
from config.models import DashboardConfig
from dashboard.components import auroc_difference
from utils.logging import get_logger, setup_logging

setup_logging(LOG_LEVEL)
logger = get_logger(__name__)


def main():
    """Main dashboard application."""

    # Page configuration
    st.set_page_config(
        page_title="AUROC Difference Dashboard",
        page_icon="📈",
        layout="wide",
        initial_sidebar_state="expanded"
    )

    config = DashboardConfig.from_defaults()

    # Sidebar controls
    st.sidebar.title("⚙️ Data")
    st.sidebar.caption(f"Source: `{config.file_name}`")
    if st.sidebar.button("🔄 Reload Data"):
        auroc_difference.reset_view()
        st.rerun()

    render_difference_panel(config)


def render_difference_panel(config: DashboardConfig):
    """Render the AUROC difference panel and its sidebar status."""
    try:
        view = auroc_difference.get_view(config)
        panel_result = auroc_difference.render_panel(view.state, config=config)

        # Show panel status in sidebar
        st.sidebar.subheader("📊 Panel Status")
        status = panel_result.get("status", "unknown")

        if status == "success":
            st.sidebar.success(f"✅ {panel_result.get('total_count', 0)} comparisons loaded")
            issue_count = panel_result.get("issue_count", 0)
            if issue_count:
                st.sidebar.warning(f"⚠️ {issue_count} parse errors")
            mismatch_count = panel_result.get("mismatch_count", 0)
            if mismatch_count:
                st.sidebar.warning(f"⚠️ {mismatch_count} Difference column mismatches")
        elif status == "no_data":
            st.sidebar.error("❌ No data loaded")
        else:
            st.sidebar.info(f"ℹ️ Status: {status}")

    except Exception as e:
        logger.exception("Error rendering AUROC difference panel")
        st.error(f"❌ Error rendering AUROC difference panel: {e}")
        st.sidebar.error("❌ Panel Error")


if __name__ == "__main__":
    main()
