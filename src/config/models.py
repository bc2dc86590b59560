"""Configuration models and data structures."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from config.config import (
    DEFAULT_COMPANY,
    LOG_LEVEL,
    MOCK_FETCH_DELAY_SEC,
    POLL_INTERVAL_SEC,
    REQUEST_TIMEOUT_SEC,
    SCORE_API_BASE_URL,
    SCORE_BACKEND,
)
from utils.io import maybe_load_yaml


@dataclass
class DashboardSettings:
    """Dashboard settings with YAML override support.

    The YAML file may carry a ``dashboard:`` section with any of the field
    names below; anything missing keeps its default.
    """
    default_company: str = DEFAULT_COMPANY
    backend: str = SCORE_BACKEND
    api_base_url: str = SCORE_API_BASE_URL
    request_timeout_sec: float = REQUEST_TIMEOUT_SEC
    mock_delay_sec: float = MOCK_FETCH_DELAY_SEC
    poll_interval_sec: float = POLL_INTERVAL_SEC
    log_level: str = LOG_LEVEL
    log_file: Optional[str] = None

    @classmethod
    def from_yaml(cls, yaml_path: Optional[str | Path] = None) -> 'DashboardSettings':
        """Create settings with optional YAML overrides."""
        yaml_config = maybe_load_yaml(yaml_path)
        section = yaml_config.get('dashboard', {})
        if not isinstance(section, dict):
            section = {}

        return cls(
            default_company=str(section.get('default_company', DEFAULT_COMPANY)),
            backend=str(section.get('backend', SCORE_BACKEND)).lower(),
            api_base_url=str(section.get('api_base_url', SCORE_API_BASE_URL)),
            request_timeout_sec=float(section.get('request_timeout_sec', REQUEST_TIMEOUT_SEC)),
            mock_delay_sec=float(section.get('mock_delay_sec', MOCK_FETCH_DELAY_SEC)),
            poll_interval_sec=float(section.get('poll_interval_sec', POLL_INTERVAL_SEC)),
            log_level=str(section.get('log_level', LOG_LEVEL)),
            log_file=section.get('log_file'),
        )
