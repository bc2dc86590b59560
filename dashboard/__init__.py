"""Dashboard package namespace.

This package contains the Streamlit entry point and the UI components of the
credit intelligence dashboard. Components keep their pure helpers (styling,
row building, chart figures) separate from the thin `render_*` functions
that draw them, so the helpers can be tested without a running app.
"""
