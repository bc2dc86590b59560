"""End-to-end search flow through the mock backend and real worker threads."""

import time

from service.score_client import MockScoreFetcher
from service.score_loader import Loaded, Loading, ScoreLoader

MOCK_DELAY_SEC = 0.2


def test_default_company_scenario():
    """Alpha Corp loads after the delay with the canned report."""
    loader = ScoreLoader(MockScoreFetcher(delay_sec=MOCK_DELAY_SEC))
    try:
        started = time.monotonic()
        loader.start("Alpha Corp")

        assert isinstance(loader.state, Loading)
        assert loader.wait(timeout=5)
        assert time.monotonic() - started >= MOCK_DELAY_SEC

        state = loader.state
        assert isinstance(state, Loaded)
        report = state.report
        assert report.subject_name == "Alpha Corp"
        assert report.score == 750
        assert report.explanation
        assert len(report.feature_contributions) == 4
        assert len(report.history) == 6
        assert (report.history[-1].date, report.history[-1].score) == ("2025-06-01", 750)
    finally:
        loader.shutdown()


def test_rapid_double_search_shows_latest():
    """Searching A then B before A resolves must end on B."""
    loader = ScoreLoader(MockScoreFetcher(delay_sec=MOCK_DELAY_SEC))
    try:
        loader.search("A")
        id_b = loader.search("B")

        assert loader.wait(timeout=5)
        # Let the superseded fetch finish too
        time.sleep(MOCK_DELAY_SEC * 2)

        state = loader.state
        assert isinstance(state, Loaded)
        assert state.request_id == id_b
        assert state.report.subject_name == "B"
    finally:
        loader.shutdown()


def test_search_after_load_starts_fresh():
    loader = ScoreLoader(MockScoreFetcher(delay_sec=MOCK_DELAY_SEC))
    try:
        loader.start("Alpha Corp")
        assert loader.wait(timeout=5)

        loader.search("Beta Industries")
        assert isinstance(loader.state, Loading)
        assert loader.wait(timeout=5)
        assert loader.state.report.subject_name == "Beta Industries"
    finally:
        loader.shutdown()
