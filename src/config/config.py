"""Project-wide single-source configuration constants for the credit dashboard."""

from pathlib import Path
from utils.path_utils import find_repo_root

# ----- Base directory configuration -------
PROJECT_ROOT = find_repo_root()
DASHBOARD_CONFIG_PATH: Path = PROJECT_ROOT / "dashboard.yaml"

# ------ Logging -------
LOG_LEVEL: str = "INFO"

# ------ Search defaults -------
DEFAULT_COMPANY: str = "Alpha Corp"    # Query loaded on first mount

# ------ Score backend -------
SCORE_BACKEND: str = "mock"                        # "mock" | "http"
SCORE_API_BASE_URL: str = "http://localhost:8000"  # Used only by the http backend
SCORE_API_PATH: str = "/api/score"                 # GET {base}{path}?company=<name>
REQUEST_TIMEOUT_SEC: float = 10.0
MOCK_FETCH_DELAY_SEC: float = 2.0                  # Simulated backend latency

# ------ Dashboard refresh -------
POLL_INTERVAL_SEC: float = 0.5    # Rerun interval while a load is in flight

# ------ Score chart -------
SCORE_AXIS_MIN: int = 600
SCORE_AXIS_MAX: int = 850
CHART_LINE_COLOR: str = "#4f46e5"
POSITIVE_COLOR: str = "#16a34a"
NEGATIVE_COLOR: str = "#dc2626"
