"""Test helper utilities."""

import threading
from typing import Any, Dict, List, Optional

from config.schemas import ScoreReport
from service.score_client import ScoreReportFetcher, build_mock_report


class ScriptedFetcher(ScoreReportFetcher):
    """Fetcher returning scripted results, optionally held until released.

    Results default to the canned mock report for the queried name. A scripted
    result that is an exception instance is raised instead of returned.
    """

    name = "scripted"

    def __init__(self, results: Optional[Dict[str, Any]] = None):
        self.results: Dict[str, Any] = dict(results or {})
        self.calls: List[str] = []
        self._gates: Dict[str, threading.Event] = {}
        self.closed = False

    def hold(self, query: str) -> threading.Event:
        """Block fetches of ``query`` until the returned event is set."""
        gate = threading.Event()
        self._gates[query] = gate
        return gate

    def release_all(self) -> None:
        for gate in self._gates.values():
            gate.set()

    def fetch_score_report(self, name: str) -> Optional[ScoreReport]:
        self.calls.append(name)
        gate = self._gates.get(name)
        if gate is not None:
            gate.wait(timeout=5)
        if name not in self.results:
            return build_mock_report(name)
        result = self.results[name]
        if isinstance(result, BaseException):
            raise result
        return result

    def close(self) -> None:
        self.closed = True
