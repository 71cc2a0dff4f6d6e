"""Shared pytest fixtures for dobcheck tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from dobcheck.config.settings import DobSettings


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no DOBCHECK_* env vars.

    Keeps a developer's own dobcheck.toml or environment out of results.
    """
    for key in list(os.environ):
        if key.startswith("DOBCHECK_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path: Path) -> DobSettings:
    """Default settings with no config file."""
    return DobSettings.from_cli(start=tmp_path)
