"""Reporting and download defaults shared with external collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .env import ENV_PREFIX, int_from_env, require_env_vars
from .errors import ConfigurationError

DEFAULT_TEXT_REPORT_WIDTH = 90
DEFAULT_DOWNLOAD_RETRIES = 2
PAYLOAD_PATH_VAR = f"{ENV_PREFIX}PAYLOAD_PATH"


@dataclass(frozen=True, slots=True)
class ReportConfig:
    text_report_width: int = DEFAULT_TEXT_REPORT_WIDTH


@dataclass(frozen=True, slots=True)
class DownloadConfig:
    retries: int = DEFAULT_DOWNLOAD_RETRIES


def get_report_config() -> ReportConfig:
    width = int_from_env(f"{ENV_PREFIX}TEXT_REPORT_WIDTH", DEFAULT_TEXT_REPORT_WIDTH)
    if width <= 0:
        raise ConfigurationError("Text report width must be positive")
    return ReportConfig(text_report_width=width)


def get_download_config() -> DownloadConfig:
    retries = int_from_env(f"{ENV_PREFIX}DOWNLOAD_RETRIES", DEFAULT_DOWNLOAD_RETRIES)
    if retries < 0:
        raise ConfigurationError("Download retries must be non-negative")
    return DownloadConfig(retries=retries)


def get_payload_path() -> Path:
    """Payload file used when the CLI is not given one explicitly."""

    values = require_env_vars([PAYLOAD_PATH_VAR])
    return Path(values[PAYLOAD_PATH_VAR].strip())
