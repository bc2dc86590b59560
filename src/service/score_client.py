"""Score report fetchers.

Every way of obtaining a score report goes through
:meth:`ScoreReportFetcher.fetch_score_report`. The dashboard only ever talks to
that method, so swapping the mock for a real backend is a configuration
change:

- ``MockScoreFetcher``: waits a fixed delay, then returns a canned report.
- ``HttpScoreFetcher``: ``GET {base_url}/api/score?company=<name>``.
"""

import time
from abc import ABC, abstractmethod
from typing import Callable, Optional

import requests

from config.config import MOCK_FETCH_DELAY_SEC, REQUEST_TIMEOUT_SEC, SCORE_API_PATH
from config.models import DashboardSettings
from config.schemas import (
    FeatureContribution,
    HistoryPoint,
    MalformedReportError,
    ScoreReport,
)
from utils.decorators import retry, timer
from utils.logging import get_logger

logger = get_logger(__name__)


class ScoreFetchError(RuntimeError):
    """Raised when a score report could not be obtained.

    ``str(error)`` is safe to show to the user.
    """


class ScoreReportFetcher(ABC):
    """Abstract source of score reports."""

    name: str = "base"

    @abstractmethod
    def fetch_score_report(self, name: str) -> Optional[ScoreReport]:
        """Return the report for ``name``, or ``None`` if the company is unknown.

        Raises:
            ScoreFetchError: if the backend could not be reached or answered
                with something that is not a score report.
        """

    def close(self) -> None:
        """Release any held resources."""


MOCK_EXPLANATION = (
    "The score is primarily influenced by stable revenue growth and a recent "
    "increase in open-source contributions to a key industry project. However, "
    "it was slightly lowered by a recent, minor legal filing."
)


def build_mock_report(name: str) -> ScoreReport:
    """Canned report; only the subject name depends on the query."""
    return ScoreReport(
        subject_name=name,
        score=750,
        explanation=MOCK_EXPLANATION,
        feature_contributions=(
            FeatureContribution("Revenue Growth", "Positive"),
            FeatureContribution("Open-Source Contributions", "Strongly Positive"),
            FeatureContribution("Legal Filings", "Negative"),
            FeatureContribution("Debt-to-Equity Ratio", "Neutral"),
        ),
        history=(
            HistoryPoint("2025-01-01", 720),
            HistoryPoint("2025-02-01", 715),
            HistoryPoint("2025-03-01", 730),
            HistoryPoint("2025-04-01", 725),
            HistoryPoint("2025-05-01", 740),
            HistoryPoint("2025-06-01", 750),
        ),
    )


class MockScoreFetcher(ScoreReportFetcher):
    """Simulated backend: sleeps ``delay_sec`` then returns the canned report."""

    name = "mock"

    def __init__(
        self,
        delay_sec: float = MOCK_FETCH_DELAY_SEC,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.delay_sec = delay_sec
        self._sleep = sleep

    def fetch_score_report(self, name: str) -> Optional[ScoreReport]:
        logger.debug(f"[mock] simulating {self.delay_sec}s backend latency for '{name}'")
        if self.delay_sec > 0:
            self._sleep(self.delay_sec)
        return build_mock_report(name)


class HttpScoreFetcher(ScoreReportFetcher):
    """Fetch reports from a REST backend exposing ``GET /api/score``.

    Each fetch opens its own session from ``session_factory`` and closes it
    when done; ``requests.Session`` is not safe to share between the loader's
    worker threads.
    """

    name = "http"

    def __init__(
        self,
        base_url: str,
        timeout_sec: float = REQUEST_TIMEOUT_SEC,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_sec = timeout_sec
        self._session_factory = session_factory

    @property
    def url(self) -> str:
        return f"{self.base_url}{SCORE_API_PATH}"

    @timer
    def fetch_score_report(self, name: str) -> Optional[ScoreReport]:
        session = self._session_factory()
        try:
            response = self._get(session, name)
        finally:
            session.close()

        if response.status_code == 404:
            logger.info(f"[http] no score report for '{name}'")
            return None
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise ScoreFetchError(
                f"Score service returned HTTP {response.status_code}"
            ) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise ScoreFetchError("Score service returned invalid JSON") from e
        # An empty body is how a backend says "nothing here"
        if not payload:
            return None
        try:
            return ScoreReport.from_payload(payload)
        except MalformedReportError as e:
            raise ScoreFetchError(f"Score service returned a malformed report: {e}") from e

    @retry(max_attempts=2, delay=0.5, exceptions=(ScoreFetchError,))
    def _get(self, session: requests.Session, name: str) -> requests.Response:
        logger.info(f"[http] GET {self.url}?company={name}")
        try:
            return session.get(
                self.url, params={"company": name}, timeout=self.timeout_sec
            )
        except requests.Timeout as e:
            raise ScoreFetchError(
                f"Score service did not answer within {self.timeout_sec:g}s"
            ) from e
        except requests.RequestException as e:
            raise ScoreFetchError(f"Could not reach score service: {e}") from e


def build_fetcher(settings: DashboardSettings) -> ScoreReportFetcher:
    """Create the fetcher selected by ``settings.backend``."""
    if settings.backend == "mock":
        return MockScoreFetcher(delay_sec=settings.mock_delay_sec)
    if settings.backend == "http":
        return HttpScoreFetcher(
            settings.api_base_url, timeout_sec=settings.request_timeout_sec
        )
    raise ValueError(f"Unknown score backend: {settings.backend!r}")
