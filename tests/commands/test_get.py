"""Tests for the ``get`` command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from tracectl.cli import cli
from tests.conftest import CONFIG_YAML


class TestGetCommand:
    def test_table(self, cli_runner: CliRunner, config_yaml: Path) -> None:
        result = cli_runner.invoke(cli, ["get", "config", "-f", str(config_yaml)])
        assert result.exit_code == 0, result.output
        assert "ANALYTICS ENABLED" in result.output
        assert "current" in result.output
        assert "true" in result.output

    def test_json(self, cli_runner: CliRunner, config_yaml: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "get", "config", "-f", str(config_yaml)])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "get_resource"
        assert data["data"]["rows"] == [["current", "Config", "true"]]
        assert data["data"]["items"][0]["spec"]["analyticsEnabled"] is True

    def test_quiet(self, cli_runner: CliRunner, variable_set_json: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "get", "variableset", "-f", str(variable_set_json)])
        assert result.exit_code == 0
        assert result.output.strip() == "staging"

    def test_stdin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "get", "config", "-f", "-"], input=CONFIG_YAML)
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["items"][0]["spec"]["id"] == "current"

    def test_verbose_shows_source(self, cli_runner: CliRunner, config_yaml: Path) -> None:
        result = cli_runner.invoke(cli, ["-v", "get", "config", "-f", str(config_yaml)])
        assert result.exit_code == 0
        assert "resource_type: Config" in result.output

    def test_requires_file(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["get", "config"])
        assert result.exit_code == 2


class TestGetErrors:
    def test_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["get", "config", "-f", str(tmp_path / "none.yaml")])
        assert result.exit_code == 1
        assert "Cannot read" in result.output

    def test_unknown_resource_json(self, cli_runner: CliRunner, config_yaml: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "get", "trace", "-f", str(config_yaml)])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["error"]["code"] == "UNKNOWN_RESOURCE"

    def test_wrong_resource_type(self, cli_runner: CliRunner, config_yaml: Path) -> None:
        result = cli_runner.invoke(cli, ["get", "demo", "-f", str(config_yaml)])
        assert result.exit_code == 1
        assert "Expected resource of type 'Demo'" in result.output

    def test_invalid_json(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text('{"type": "Config", "spec": ')
        result = cli_runner.invoke(cli, ["--json", "get", "config", "-f", str(bad)])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "DECODE_ERROR"
