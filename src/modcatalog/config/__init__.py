"""Application configuration helpers."""

from __future__ import annotations

from .env import int_from_env, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .identity import get_id_ranges
from .logging import configure_logging
from .report import (
    PAYLOAD_PATH_VAR,
    DownloadConfig,
    ReportConfig,
    get_download_config,
    get_payload_path,
    get_report_config,
)

__all__ = [
    "PAYLOAD_PATH_VAR",
    "ConfigurationError",
    "DownloadConfig",
    "MissingConfigurationError",
    "ReportConfig",
    "configure_logging",
    "get_download_config",
    "get_id_ranges",
    "get_payload_path",
    "get_report_config",
    "int_from_env",
    "require_env_vars",
]
