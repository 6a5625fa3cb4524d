"""Tests for AppContext construction."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tracectl.commands import _context
from tracectl.commands._context import AppContext
from tracectl.config.settings import TracectlSettings


@pytest.fixture(autouse=True)
def _keep_caplog_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    """configure_logging replaces root handlers, which would drop caplog's."""
    monkeypatch.setattr(_context, "configure_logging", lambda **_: None)


class TestConfigReport:
    def test_logs_located_config(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        (tmp_path / "tracectl.toml").write_text("[output]\nwidth = 90\n")
        with caplog.at_level(logging.DEBUG, logger="tracectl"):
            AppContext(TracectlSettings.from_cli(start=tmp_path))
        assert f"Loaded config {tmp_path / 'tracectl.toml'} (project)" in caplog.text

    def test_silent_without_config(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="tracectl"):
            AppContext(TracectlSettings.from_cli(start=tmp_path))
        assert "Loaded config" not in caplog.text
