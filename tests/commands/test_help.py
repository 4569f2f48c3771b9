"""Every command answers --help and --examples."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from ministryctl.cli import cli

COMMANDS = [
    ["birthdays"],
    ["birthdays", "upcoming"],
    ["birthdays", "month"],
    ["birthdays", "today"],
    ["members"],
    ["members", "list"],
    ["members", "facts"],
    ["meeting"],
    ["meeting", "anchor"],
    ["meeting", "attendance"],
]


@pytest.mark.parametrize("path", COMMANDS, ids=" ".join)
def test_help(cli_runner: CliRunner, path: list[str]) -> None:
    result = cli_runner.invoke(cli, [*path, "--help"])
    assert result.exit_code == 0
    assert "Usage" in result.output
    assert "--examples" in result.output


@pytest.mark.parametrize("path", COMMANDS, ids=" ".join)
def test_examples(cli_runner: CliRunner, path: list[str]) -> None:
    result = cli_runner.invoke(cli, [*path, "--examples"])
    assert result.exit_code == 0
    assert f"ministryctl {path[0]}" in result.output
