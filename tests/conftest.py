"""Shared pytest fixtures and sample resource documents for tracectl tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

CONFIG_YAML = """\
type: Config
spec:
  id: current
  name: Config
  analyticsEnabled: true
"""

CONFIG_DOC: dict[str, Any] = {
    "type": "Config",
    "spec": {"id": "current", "name": "Config", "analyticsEnabled": False},
}

VARIABLE_SET_DOC: dict[str, Any] = {
    "type": "VariableSet",
    "spec": {
        "id": "staging",
        "name": "Staging",
        "description": "Staging endpoints",
        "values": [{"key": "HOST", "value": "staging.example.com"}],
    },
}

VARIABLE_SET_LIST_DOC: dict[str, Any] = {
    "count": 2,
    "items": [
        VARIABLE_SET_DOC,
        {"type": "VariableSet", "spec": {"id": "prod", "name": "Production"}},
    ],
}

POLLING_PROFILE_DOC: dict[str, Any] = {
    "type": "PollingProfile",
    "spec": {
        "id": "current",
        "name": "Default",
        "default": True,
        "strategy": "periodic",
        "periodic": {"retryDelay": "5s", "timeout": "1m", "selectorMatchRetries": 3},
    },
}

DEMO_DOC: dict[str, Any] = {
    "type": "Demo",
    "spec": {
        "id": "pokeshop",
        "name": "Pokeshop",
        "type": "pokeshop",
        "enabled": True,
        "pokeshop": {"httpEndpoint": "http://demo-api:8081", "grpcEndpoint": "demo-rpc:8082"},
    },
}

DEMO_LIST_DOC: dict[str, Any] = {
    "count": 2,
    "items": [
        DEMO_DOC,
        {
            "type": "Demo",
            "spec": {"id": "otel", "name": "OTel Store", "type": "otelstore", "enabled": False},
        },
    ],
}


def write_json(path: Path, doc: Any) -> Path:
    """Write *doc* to *path* as JSON and return the path."""
    path.write_text(json.dumps(doc), encoding="utf-8")
    return path


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's tracectl.toml and TRACECTL_* env vars out of tests."""
    for var in ("TRACECTL_CONFIG", "TRACECTL_JSON_OUTPUT", "TRACECTL_QUIET", "TRACECTL_VERBOSE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def config_yaml(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG_YAML, encoding="utf-8")
    return path


@pytest.fixture
def config_json(tmp_path: Path) -> Path:
    return write_json(tmp_path / "config.json", CONFIG_DOC)


@pytest.fixture
def variable_set_json(tmp_path: Path) -> Path:
    return write_json(tmp_path / "variable-set.json", VARIABLE_SET_DOC)


@pytest.fixture
def variable_set_list_json(tmp_path: Path) -> Path:
    return write_json(tmp_path / "variable-sets.json", VARIABLE_SET_LIST_DOC)


@pytest.fixture
def polling_profile_json(tmp_path: Path) -> Path:
    return write_json(tmp_path / "polling-profile.json", POLLING_PROFILE_DOC)


@pytest.fixture
def demo_list_json(tmp_path: Path) -> Path:
    return write_json(tmp_path / "demos.json", DEMO_LIST_DOC)
