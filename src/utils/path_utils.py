"""Locating the dashboard's project directory."""

from pathlib import Path
from typing import Optional, Sequence

PROJECT_MARKERS = ("dashboard.yaml", "pyproject.toml")


def find_repo_root(
    start: Optional[Path] = None,
    markers: Sequence[str] = PROJECT_MARKERS,
) -> Path:
    """Nearest ancestor of ``start`` holding any of ``markers``.

    ``start`` may be a file or a directory and defaults to this module. When
    nothing matches, as for an installed copy in site-packages, the current
    working directory is used so ``dashboard.yaml`` is looked up where the
    dashboard was launched.
    """
    here = (start or Path(__file__)).resolve()
    if not here.is_dir():
        here = here.parent
    for candidate in (here, *here.parents):
        if any((candidate / marker).exists() for marker in markers):
            return candidate
    return Path.cwd()
