"""Loader state machine for the score dashboard.

A search moves the loader to ``Loading`` immediately and fetches the report on
a worker thread. When the fetch returns, the loader moves to ``Loaded``,
``NotFound`` or ``Failed``, but only if no newer search has been issued in the
meantime: every search gets a monotonically increasing request id, and a
completion carrying an older id is dropped.
"""

import threading
import weakref
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Optional, Union

from config.schemas import ScoreReport
from service.score_client import ScoreFetchError, ScoreReportFetcher
from utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Loading:
    query: str
    request_id: int


@dataclass(frozen=True)
class Loaded:
    query: str
    request_id: int
    report: ScoreReport


@dataclass(frozen=True)
class NotFound:
    query: str
    request_id: int


@dataclass(frozen=True)
class Failed:
    query: str
    request_id: int
    message: str


LoaderState = Union[Loading, Loaded, NotFound, Failed]


class ScoreLoader:
    """Drives ``fetcher`` and exposes the current :data:`LoaderState`."""

    def __init__(
        self,
        fetcher: ScoreReportFetcher,
        on_change: Optional[Callable[[LoaderState], None]] = None,
        max_workers: int = 2,
    ):
        self.fetcher = fetcher
        self.on_change = on_change
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="score-fetch"
        )
        self._lock = threading.Lock()
        # Held across "install state, notify listener" so notifications keep state order
        self._emit_lock = threading.RLock()
        self._settled = threading.Event()
        self._latest_id = 0
        self._state: Optional[LoaderState] = None
        self._pending: Optional[Future] = None
        self._finalizer = weakref.finalize(self, _release, self._executor, fetcher)

    @property
    def state(self) -> Optional[LoaderState]:
        """Current state; ``None`` until the first search."""
        with self._lock:
            return self._state

    @property
    def latest_request_id(self) -> int:
        with self._lock:
            return self._latest_id

    @property
    def is_loading(self) -> bool:
        return isinstance(self.state, Loading)

    def start(self, query: str) -> int:
        """Issue the initial search unless one has already been made."""
        with self._lock:
            if self._state is not None:
                return self._latest_id
        return self.search(query)

    def search(self, query: str) -> int:
        """Start loading ``query`` and return its request id.

        The previous report is dropped at once; the loader is in ``Loading``
        when this returns.
        """
        with self._emit_lock:
            with self._lock:
                self._latest_id += 1
                request_id = self._latest_id
                if self._pending is not None and self._pending.cancel():
                    logger.debug(f"Cancelled queued request before #{request_id}")
                self._settled.clear()
                state = Loading(query=query, request_id=request_id)
                self._state = state

            logger.info(f"Search #{request_id} for '{query}' via {self.fetcher.name} backend")
            self._emit(state)

        future = self._executor.submit(self._fetch, query, request_id)
        with self._lock:
            if request_id == self._latest_id and not self._settled.is_set():
                self._pending = future
        return request_id

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the latest search settles; ``False`` on timeout."""
        return self._settled.wait(timeout)

    def shutdown(self, wait: bool = False) -> None:
        """Stop the worker pool; queued fetches are cancelled."""
        self._executor.shutdown(wait=wait, cancel_futures=True)
        self._finalizer()

    def _fetch(self, query: str, request_id: int) -> None:
        try:
            report = self.fetcher.fetch_score_report(query)
        except ScoreFetchError as e:
            logger.warning(f"Search #{request_id} for '{query}' failed: {e}")
            outcome: LoaderState = Failed(query, request_id, str(e))
        except Exception:
            logger.exception(f"Unexpected error in search #{request_id} for '{query}'")
            outcome = Failed(query, request_id, "Unexpected error while loading the score report.")
        else:
            if report:
                outcome = Loaded(query, request_id, report)
            else:
                outcome = NotFound(query, request_id)
        self._apply(outcome)

    def _apply(self, outcome: LoaderState) -> bool:
        """Install a completed outcome if it belongs to the latest search."""
        with self._emit_lock:
            with self._lock:
                if outcome.request_id != self._latest_id:
                    logger.debug(
                        f"Discarding stale result #{outcome.request_id} "
                        f"(latest is #{self._latest_id})"
                    )
                    return False
                self._state = outcome
                self._pending = None

            logger.info(f"Search #{outcome.request_id} settled as {type(outcome).__name__}")
            self._emit(outcome)
            # Waiters wake only after listeners have seen the outcome
            self._settled.set()
        return True

    def _emit(self, state: LoaderState) -> None:
        if self.on_change is None:
            return
        try:
            self.on_change(state)
        except Exception as e:
            logger.error(f"Error in loader state callback: {e}")


def _release(executor: ThreadPoolExecutor, fetcher: ScoreReportFetcher) -> None:
    """Finalizer for loaders dropped without ``shutdown``, e.g. on session end."""
    executor.shutdown(wait=False, cancel_futures=True)
    fetcher.close()
