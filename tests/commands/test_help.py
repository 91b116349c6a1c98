"""Parametrized help and --examples tests for all CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from wedbook.cli import cli

HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--help"], ["check", "tags", "fields", "--json", "--log-json"]),
    (["check", "--help"], ["RAW", "wedding_name", "--examples"]),
    (["tags", "--help"], ["RAWS"]),
    (["fields", "--help"], ["rejected"]),
]


@pytest.mark.usefixtures("_isolated_config")
@pytest.mark.parametrize("args,keywords", HELP_COMMANDS)
def test_help(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    for keyword in keywords:
        assert keyword in result.output


@pytest.mark.usefixtures("_isolated_config")
@pytest.mark.parametrize("command", ["check", "tags", "fields"])
def test_examples(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--examples"])
    assert result.exit_code == 0
    assert f"wedbook {command}" in result.output
