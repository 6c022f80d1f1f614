"""Dashboard package namespace.

This package contains the Streamlit entry point and its UI components.
Components expose small `render_*` / `build_*` functions that return
primitives like status dicts and Plotly or matplotlib figures so they can
be embedded in Streamlit or exported from scripts.
"""
