from __future__ import annotations

import sys
from pathlib import Path

import pytest

from syslog_conformance import cli


def _run(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    monkeypatch.setattr(sys, "argv", ["syslog-conformance", *args])
    with pytest.raises(SystemExit) as exc:
        cli.main()
    return exc.value.code


def test_cli_file_pass(tmp_path: Path, write_messages, valid_messages, monkeypatch, capsys) -> None:
    path = tmp_path / "valid.log"
    write_messages(path, valid_messages)

    assert _run(monkeypatch, str(path), "--expected", str(len(valid_messages)), "-q") == 0
    out = capsys.readouterr().out
    assert f"{len(valid_messages)}/{len(valid_messages)} lines conform" in out


def test_cli_file_count_mismatch(tmp_path: Path, write_messages, valid_messages, monkeypatch, capsys) -> None:
    path = tmp_path / "valid.log"
    write_messages(path, valid_messages)

    assert _run(monkeypatch, str(path), "--expected", "99") == 1
    assert "Expected 99 lines" in capsys.readouterr().out


def test_cli_messages(monkeypatch, capsys) -> None:
    code = _run(monkeypatch, "-m", "<14>1 - - - - - - ok", "-m", "<14>2 - - - - - - bad")
    assert code == 1
    out = capsys.readouterr().out
    assert "message 1: ok" in out
    assert "message 2: [field_range]" in out


def test_cli_missing_file(tmp_path: Path, monkeypatch, capsys) -> None:
    assert _run(monkeypatch, str(tmp_path / "missing.log")) == 2
    assert "not found" in capsys.readouterr().err


def test_cli_requires_input(monkeypatch) -> None:
    assert _run(monkeypatch) == 2
