"""Shared pytest fixtures for tsctl tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty temp dir so no stray tsctl.toml or env var is picked up."""
    monkeypatch.chdir(tmp_path)
    for name in ("TSCTL_CONFIG", "TSCTL_ARITH__STRICT", "TSCTL_OUTPUT__SHOW_TOTAL_NS"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path
