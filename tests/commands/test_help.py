"""Parametrized ``--help`` and ``--examples`` tests for all commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from tracectl.cli import cli

HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--help"], ["get", "list", "resources", "--json", "--quiet"]),
    (["get", "--help"], ["RESOURCE", "--file"]),
    (["list", "--help"], ["RESOURCE", "--file"]),
    (["resources", "--help"], []),
]

EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["get", "--examples"], ["tracectl get config", "-f -"]),
    (["list", "--examples"], ["tracectl list variableset"]),
    (["resources", "--examples"], ["tracectl --json resources"]),
    (["--examples"], ["tracectl resources", "tracectl get config"]),
]


@pytest.mark.parametrize(("args", "keywords"), HELP_COMMANDS)
def test_help(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    for keyword in keywords:
        assert keyword in result.output


@pytest.mark.parametrize(("args", "keywords"), EXAMPLES_COMMANDS)
def test_examples(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Examples for" in result.output
    for keyword in keywords:
        assert keyword in result.output
