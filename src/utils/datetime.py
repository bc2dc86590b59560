"""DateTime utilities for the project."""

from datetime import date


def parse_iso_date(value: str) -> date:
    """Parse an ISO ``YYYY-MM-DD`` string (a trailing time part is ignored)."""
    return date.fromisoformat(value[:10])
