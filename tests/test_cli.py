"""Tests for the root wedbook group: flags, settings layering and config errors."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from wedbook import __version__
from wedbook.cli import cli


def test_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert f"wedbook, version {__version__}" in result.output


@pytest.mark.usefixtures("_isolated_config")
class TestRootGroup:
    def test_no_args_prints_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "Usage" in result.output
        assert "check" in result.output

    def test_short_help_alias(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-h"])
        assert result.exit_code == 0
        assert "WEDBOOK_" in result.output

    def test_env_setting_applies_without_flag(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("WEDBOOK_JSON_OUTPUT", "true")
        result = cli_runner.invoke(cli, ["check", "phone", "98765432"])
        assert result.exit_code == 0
        assert json.loads(result.output)["value"] == "98765432"

    def test_toml_setting_applies_without_flag(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        (tmp_path / "wedbook.toml").write_text("quiet = true\n")
        result = cli_runner.invoke(cli, ["check", "job", " Florist "])
        assert result.exit_code == 0
        assert result.output.strip() == "Florist"


@pytest.mark.usefixtures("_isolated_config")
class TestConfigErrors:
    def test_missing_config_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        missing = tmp_path / "missing.toml"
        result = cli_runner.invoke(cli, ["-c", str(missing), "check", "name", "Alice"])
        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_invalid_toml(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "wedbook.toml").write_text("[output\n")
        result = cli_runner.invoke(cli, ["check", "name", "Alice"])
        assert result.exit_code == 1
        assert "Invalid TOML" in result.output

    def test_version_skips_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["-c", str(tmp_path / "missing.toml"), "--version"])
        assert result.exit_code == 0
