"""
Explainable Credit Intelligence Dashboard - Streamlit Application

Search a company and see its credit score, the reasoning behind it, the
contributing features and the score history.

Run with:
    streamlit run dashboard/app.py
    streamlit run dashboard/app.py -- --config dashboard.yaml
"""

import argparse
import streamlit as st
import sys
from pathlib import Path
import time
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend for Streamlit

# Add src to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))
# Add repository root to path so `dashboard.*` imports work
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.config import DASHBOARD_CONFIG_PATH
from config.models import DashboardSettings
from service.score_client import build_fetcher
from service.score_loader import ScoreLoader
from utils.logging import get_logger, setup_logging
from dashboard.components import scorecard
from dashboard.components.search import active_query, init_search_state, render_search_bar

logger = get_logger("dashboard")

LOADER_KEY = "_score_loader"


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Explainable credit intelligence dashboard")
    parser.add_argument(
        "--config",
        default=str(DASHBOARD_CONFIG_PATH),
        help="YAML file with a `dashboard:` section (default: %(default)s)",
    )
    args, _ = parser.parse_known_args(argv)
    return args


@st.cache_resource
def load_settings(config_path: str) -> DashboardSettings:
    """Load settings once per server process and configure logging."""
    settings = DashboardSettings.from_yaml(config_path)
    setup_logging(level=settings.log_level, log_file=settings.log_file)
    logger.info(f"Dashboard settings loaded (backend={settings.backend}, config={config_path})")
    return settings


def get_loader(settings: DashboardSettings) -> ScoreLoader:
    """Return this session's loader, creating it on first use."""
    if LOADER_KEY not in st.session_state:
        st.session_state[LOADER_KEY] = ScoreLoader(build_fetcher(settings))
    return st.session_state[LOADER_KEY]


def main():
    """Main dashboard application."""

    # Page configuration
    st.set_page_config(
        page_title="CredTech - Explainable Credit Dashboard",
        page_icon="💳",
        layout="wide",
    )

    settings = load_settings(_parse_args().config)
    init_search_state(st.session_state, settings.default_company)
    loader = get_loader(settings)
    # First mount: start loading the default company straight away
    loader.start(active_query(st.session_state))

    st.title("Explainable Credit Intelligence Dashboard")

    committed = render_search_bar(st.session_state)
    if committed is not None:
        loader.search(committed)

    render_scorecard_panel(loader)

    # A poll interval of 0 turns auto-refresh off
    if loader.is_loading and settings.poll_interval_sec > 0:
        time.sleep(settings.poll_interval_sec)
        st.rerun()


def render_scorecard_panel(loader: ScoreLoader):
    """Render the scorecard panel and its sidebar status."""
    st.sidebar.title("💳 Credit Intelligence")
    st.sidebar.caption(f"Backend: `{loader.fetcher.name}`")

    try:
        panel_result = scorecard.render_panel(loader.state)
    except Exception as e:
        logger.exception("Error rendering scorecard panel")
        st.error(f"❌ Error rendering scorecard: {e}")
        st.sidebar.error("❌ Panel Error")
        return

    st.sidebar.subheader("📊 Panel Status")
    status = panel_result.get("status", "unknown")
    query = panel_result.get("query")

    if status == "success":
        st.sidebar.success(f"✅ {query}: {panel_result.get('score')}")
        st.sidebar.write(f"- Features: {panel_result.get('feature_count', 0)}")
        st.sidebar.write(f"- History points: {panel_result.get('history_count', 0)}")
    elif status == "loading":
        st.sidebar.info(f"⏳ Loading {query or ''}".rstrip())
    elif status == "not_found":
        st.sidebar.warning(f"⚠️ No report for {query}")
    elif status == "failed":
        st.sidebar.error(f"❌ {panel_result.get('message')}")
    else:
        st.sidebar.info(f"ℹ️ Status: {status}")


if __name__ == "__main__":
    main()
