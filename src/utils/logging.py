"""Logging setup for the dashboard and its score loader."""

import logging
import sys
from typing import Iterable, Optional, Union

# Worker threads are named "score-fetch_N", so the thread shows which search a line belongs to
DEFAULT_FORMAT = "%(asctime)s [%(threadName)s] %(name)s %(levelname)s: %(message)s"

# Third-party loggers that drown out the loader at DEBUG
QUIET_LOGGERS = ("urllib3", "matplotlib", "PIL", "watchdog")


def resolve_level(level: Union[str, int]) -> int:
    """Map a level name or number to a ``logging`` level; unknown names give INFO."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    level: Union[str, int] = "INFO",
    log_file: Optional[str] = None,
    format_string: str = DEFAULT_FORMAT,
    quiet: Iterable[str] = QUIET_LOGGERS,
) -> None:
    """Configure the root logger for a dashboard run.

    Replaces any handlers already installed, since Streamlit re-executes the
    app script and would otherwise stack duplicates.

    Args:
        level: Level name (``"DEBUG"``, ``"info"``...) or number
        log_file: Also append records to this file when given
        format_string: Record format
        quiet: Logger names held at WARNING regardless of ``level``
    """
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=resolve_level(level),
        format=format_string,
        handlers=handlers,
        force=True,
    )
    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name``; falls back to the default setup if nothing is configured."""
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
