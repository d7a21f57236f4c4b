"""Tests for the add, sub, and shift commands."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from tsctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestAddSub:
    def test_add(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "add", "2", "800000000", "1", "500000000"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "4 300000000"

    def test_sub(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "sub", "0", "0", "0", "1"])
        assert result.stdout.strip() == "-1 999999999"

    def test_json_add(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "add", "10", "0", "0", "250"])
        parsed = json.loads(result.stdout)
        assert parsed["ok"] is True
        assert parsed["data"] == {"seconds": 10, "nanoseconds": 250}

    def test_strict_from_config(self, cli_runner: CliRunner, _isolated_cwd: Path) -> None:
        (_isolated_cwd / "tsctl.toml").write_text("[arith]\nstrict = true\n")
        result = cli_runner.invoke(cli, ["--json", "add", "0", "1000000000", "0", "0"])
        assert result.exit_code == 1
        parsed = json.loads(result.stderr[result.stderr.index("{") :])
        assert parsed["error"]["code"] == "NOT_NORMALIZED"

    def test_show_total_ns_from_config(self, cli_runner: CliRunner, _isolated_cwd: Path) -> None:
        (_isolated_cwd / "tsctl.toml").write_text("[output]\nshow_total_ns = true\n")
        result = cli_runner.invoke(cli, ["add", "1", "0", "0", "5"])
        assert "total_ns: 1000000005" in result.stdout


@pytest.mark.usefixtures("_isolated_cwd")
class TestShift:
    def test_forward(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "shift", "1", "900000000", "200000000"])
        assert result.stdout.strip() == "2 100000000"

    def test_back(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "shift", "--back", "1", "0", "1"])
        assert result.stdout.strip() == "0 999999999"

    def test_negative_offset_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["shift", "--", "1", "0", "-5"])
        assert result.exit_code == 1
        assert "non-negative" in result.stderr

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["shift", "--examples"])
        assert result.exit_code == 0
        assert "tsctl shift --back" in result.stdout


@pytest.mark.usefixtures("_isolated_cwd")
class TestBadConfig:
    @pytest.mark.parametrize("content", ['[arith]\nstrict = "maybe"\n', "[extra]\nx = 1\n"])
    def test_invalid_config_exits_cleanly(
        self, cli_runner: CliRunner, _isolated_cwd: Path, content: str
    ) -> None:
        (_isolated_cwd / "tsctl.toml").write_text(content)
        result = cli_runner.invoke(cli, ["add", "1", "0", "0", "5"])
        assert result.exit_code == 1
        assert "Invalid config in" in result.stderr
        assert result.stdout == ""

    def test_missing_explicit_config(self, cli_runner: CliRunner, _isolated_cwd: Path) -> None:
        result = cli_runner.invoke(cli, ["-c", "nope.toml", "add", "1", "0", "0", "5"])
        assert result.exit_code == 1
        assert "Config file not found" in result.stderr
