from __future__ import annotations

import logging
from pathlib import Path

import pytest

from modcatalog.config import (
    ConfigurationError,
    MissingConfigurationError,
    configure_logging,
    get_download_config,
    get_id_ranges,
    get_payload_path,
    get_report_config,
    require_env_vars,
)
from modcatalog.domain.model import DEFAULT_ID_RANGES, IdClass, classify_id


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    result = require_env_vars(["EXAMPLE_VAR"])

    assert result["EXAMPLE_VAR"] == "value"


def test_require_env_vars_lists_every_missing_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MISSING_VAR", raising=False)
    monkeypatch.setenv("BLANK_VAR", "   ")

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["MISSING_VAR", "BLANK_VAR"])

    assert "BLANK_VAR, MISSING_VAR" in str(exc.value)


def test_payload_path_comes_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MODCATALOG_PAYLOAD_PATH", " catalog/payload.json ")

    assert get_payload_path() == Path("catalog/payload.json")


def test_payload_path_is_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MODCATALOG_PAYLOAD_PATH", raising=False)

    with pytest.raises(MissingConfigurationError, match="MODCATALOG_PAYLOAD_PATH"):
        get_payload_path()


def test_id_ranges_default_without_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LOWEST_GROUP_ID", "HIGHEST_GROUP_ID", "HIGHEST_FAKE_ID"):
        monkeypatch.delenv(f"MODCATALOG_{name}", raising=False)

    assert get_id_ranges() == DEFAULT_ID_RANGES


def test_id_ranges_read_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MODCATALOG_HIGHEST_GROUP_ID", "19_999")
    monkeypatch.setenv("MODCATALOG_HIGHEST_FAKE_ID", "19999")

    ranges = get_id_ranges()

    assert ranges.highest_group_id == 19_999
    assert classify_id(20_000, ranges) is IdClass.REAL


def test_id_ranges_reject_non_integer(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MODCATALOG_LOWEST_LOCAL_ID", "one hundred")

    with pytest.raises(ConfigurationError, match="MODCATALOG_LOWEST_LOCAL_ID must be an integer"):
        get_id_ranges()


def test_id_ranges_reject_inverted_range(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MODCATALOG_LOWEST_GROUP_ID", "2000000")

    with pytest.raises(ConfigurationError, match="group ID range is inverted"):
        get_id_ranges()


def test_report_and_download_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MODCATALOG_TEXT_REPORT_WIDTH", raising=False)
    monkeypatch.setenv("MODCATALOG_DOWNLOAD_RETRIES", "5")

    assert get_report_config().text_report_width == 90
    assert get_download_config().retries == 5


def test_report_width_must_be_positive(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MODCATALOG_TEXT_REPORT_WIDTH", "0")

    with pytest.raises(ConfigurationError, match="must be positive"):
        get_report_config()


def test_configure_logging_sets_root_level() -> None:
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = list(root.handlers)
    try:
        configure_logging(level=logging.DEBUG, force=True)
        assert root.level == logging.DEBUG
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for handler in previous_handlers:
            root.addHandler(handler)
        root.setLevel(previous_level)
