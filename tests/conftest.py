"""Test configuration and shared fixtures."""

import pytest
import tempfile
from pathlib import Path

import matplotlib
matplotlib.use('Agg')

from helpers import ScriptedFetcher


@pytest.fixture
def temp_data_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_payload():
    """A score report as the backend would return it."""
    return {
        "name": "Beta Industries",
        "score": 688,
        "explanation": "Leverage rose while revenue stayed flat.",
        "featureContributions": [
            {"feature": "Revenue Growth", "contribution": "Neutral"},
            {"feature": "Debt-to-Equity Ratio", "contribution": "Strongly Negative"},
            {"feature": "Cash Reserves", "contribution": "Positive"},
        ],
        "history": [
            {"date": "2025-03-01", "score": 702},
            {"date": "2025-04-01", "score": 695},
            {"date": "2025-05-01", "score": 688},
        ],
    }


@pytest.fixture
def scripted_fetcher():
    """Fetcher whose answers and timing are controlled by the test."""
    fetcher = ScriptedFetcher()
    yield fetcher
    fetcher.release_all()
