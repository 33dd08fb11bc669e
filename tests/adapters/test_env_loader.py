"""Environment loader adapter tests."""

from __future__ import annotations

import pytest

from minigrep.adapters.env.default import DefaultEnvLoader


def test_snapshot_keeps_only_requested_names() -> None:
    loader = DefaultEnvLoader(environ={"CASE_INSENSITIVE": "kthx", "HOME": "/root"})
    assert loader.snapshot("CASE_INSENSITIVE") == {"CASE_INSENSITIVE": "kthx"}


def test_snapshot_keeps_empty_values() -> None:
    loader = DefaultEnvLoader(environ={"CASE_INSENSITIVE": ""})
    assert loader.snapshot("CASE_INSENSITIVE") == {"CASE_INSENSITIVE": ""}


def test_empty_mapping_is_not_replaced_by_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CASE_INSENSITIVE", "1")
    assert DefaultEnvLoader(environ={}).snapshot("CASE_INSENSITIVE") == {}


def test_defaults_to_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CASE_INSENSITIVE", "yes")
    assert DefaultEnvLoader().snapshot("CASE_INSENSITIVE") == {"CASE_INSENSITIVE": "yes"}
    monkeypatch.delenv("CASE_INSENSITIVE")
    assert DefaultEnvLoader().snapshot("CASE_INSENSITIVE") == {}
