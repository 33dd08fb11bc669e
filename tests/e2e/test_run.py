"""End-to-end coverage for ``build_config`` + ``run`` against real files."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from minigrep import Config, IoError, UsageError, build_config, run
from minigrep.adapters.env.default import DefaultEnvLoader

POEM = "Rust:\nsafe, fast, productive.\nPick three.\nTrust me.\n"


def _write(tmp_path: Path, body: str, name: str = "poem.txt") -> str:
    path = tmp_path / name
    path.write_text(body, encoding="utf-8")
    return str(path)


def test_build_config_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    args = ["binary", "query", "filename"]

    monkeypatch.delenv("CASE_INSENSITIVE", raising=False)
    assert build_config(args).case_sensitive is True

    monkeypatch.setenv("CASE_INSENSITIVE", "kthx")
    assert build_config(args).case_sensitive is False


def test_build_config_with_injected_environment() -> None:
    config = build_config(["binary", "query", "filename"], env=DefaultEnvLoader(environ={"CASE_INSENSITIVE": ""}))
    assert config == Config("query", "filename", case_sensitive=False)


def test_build_config_not_enough_args() -> None:
    with pytest.raises(UsageError, match="Usage"):
        build_config(["binary"], env=DefaultEnvLoader(environ={}))


def test_run_emits_matches_in_order(tmp_path: Path) -> None:
    emitted: list[str] = []
    config = Config("rUsT", _write(tmp_path, POEM), case_sensitive=False)
    assert run(config, echo=emitted.append) == ["Rust:", "Trust me."]
    assert emitted == ["Rust:", "Trust me."]


def test_run_case_sensitive(tmp_path: Path) -> None:
    emitted: list[str] = []
    run(Config("Rust", _write(tmp_path, POEM)), echo=emitted.append)
    assert emitted == ["Rust:"]


def test_run_with_empty_file(tmp_path: Path) -> None:
    emitted: list[str] = []
    config = build_config(["binary", "query", _write(tmp_path, "", "empty.txt")], env=DefaultEnvLoader(environ={}))
    assert run(config, echo=emitted.append) == []
    assert emitted == []


def test_run_with_missing_file(tmp_path: Path) -> None:
    emitted: list[str] = []
    config = build_config(
        ["binary", "query", str(tmp_path / "this-file-does-not-exist")],
        env=DefaultEnvLoader(environ={}),
    )
    with pytest.raises(IoError) as info:
        run(config, echo=emitted.append)
    assert isinstance(info.value.cause, FileNotFoundError)
    assert emitted == []


def test_run_uses_injected_reader() -> None:
    class _MemoryReader:
        def __init__(self) -> None:
            self.requested: list[str] = []

        def read(self, filename: str) -> str:
            self.requested.append(filename)
            return "Duct tape.\nproductive\n"

    reader = _MemoryReader()
    assert run(Config("duct", "virtual.txt"), reader=reader, echo=lambda line: None) == ["productive"]
    assert reader.requested == ["virtual.txt"]


def test_run_defaults_to_stdout(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    run(Config("three", _write(tmp_path, POEM)))
    assert capsys.readouterr().out == "Pick three.\n"


def test_run_logs_summary(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="minigrep")
    path = _write(tmp_path, POEM)
    run(Config("t", path), echo=lambda line: None)
    record = caplog.records[-1]
    assert record.getMessage() == "search_complete"
    assert getattr(record, "context") == {"stage": "search", "path": path, "matches": 4, "case_sensitive": True}
