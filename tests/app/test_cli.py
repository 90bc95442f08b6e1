from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from modcatalog.ui import cli

if TYPE_CHECKING:
    from pathlib import Path


def test_classify_prints_class_and_tag(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["classify", "500", "5000001", "10001"])

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "500\tlocal\t[local mod 500]",
        "5000001\treal\t[Steam ID    5000001]",
        "10001\tgroup\t[Group 10001]",
    ]


def test_classify_honours_range_overrides(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("MODCATALOG_HIGHEST_LOCAL_ID", "400")

    cli.main(["classify", "--hide-id", "500"])

    assert capsys.readouterr().out.strip() == "500\tunknown\t[unknown mod]"


def test_apply_prints_labels(
    workshop_payload_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.main(["apply", str(workshop_payload_path), "--width", "40"])

    out = capsys.readouterr().out.splitlines()
    assert "[Steam ID    1000001] Traffic Manager" in out
    assert "[Group 10001] Road tools: 1000001, 1000002" in out
    assert all(len(line) <= 40 for line in out if line.startswith("[Steam ID"))


def test_apply_exits_1_when_session_aborts(tmp_path: Path) -> None:
    payload = tmp_path / "broken.json"
    payload.write_text(
        json.dumps({"groups": [{"group_id": 10001, "name": "Ghosts", "members": [11, 12]}]})
    )

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["apply", str(payload)])

    assert excinfo.value.code == 1


def test_apply_exits_2_on_invalid_payload(tmp_path: Path) -> None:
    payload = tmp_path / "invalid.json"
    payload.write_text(json.dumps({"mods": [{"name": "No id"}]}))

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["apply", str(payload)])

    assert excinfo.value.code == 2


def test_missing_payload_file_exits_2(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["apply", str(tmp_path / "missing.json")])

    assert excinfo.value.code == 2


def test_unknown_command_is_rejected_by_argparse() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["frobnicate"])

    assert excinfo.value.code == 2


def test_apply_reads_payload_path_from_env(
    monkeypatch: pytest.MonkeyPatch, workshop_payload_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("MODCATALOG_PAYLOAD_PATH", str(workshop_payload_path))

    cli.main(["apply"])

    assert "[Group 10001] Road tools: 1000001, 1000002" in capsys.readouterr().out.splitlines()


def test_apply_without_payload_or_env_exits_2(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.delenv("MODCATALOG_PAYLOAD_PATH", raising=False)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["apply"])

    assert excinfo.value.code == 2
    assert "Missing configuration for: MODCATALOG_PAYLOAD_PATH" in caplog.text
