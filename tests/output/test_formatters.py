"""Tests for the format_result dispatcher and OutputSettings."""

import json

from tracectl.output.formatters import OutputSettings, format_result
from tracectl.services.result import ServiceError, ServiceResult


def _ok(op: str = "get_resource", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "get_resource", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="ERR", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False
        assert s.show_count is True
        assert s.width is None


class TestFormatResult:
    def test_json_mode(self) -> None:
        result = _ok(items=[{"type": "Config", "spec": {"id": "current"}}])
        data = json.loads(format_result(result, settings=OutputSettings(json_output=True)))
        assert data["ok"] is True
        assert data["data"]["items"][0]["spec"]["id"] == "current"

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_ok(), settings=settings))["op"] == "get_resource"

    def test_quiet_mode(self) -> None:
        result = _ok(items=[{"spec": {"id": "current"}}])
        assert format_result(result, settings=OutputSettings(quiet=True)) == "current"

    def test_default_is_rich(self) -> None:
        output = format_result(_ok("other", key="val"))
        assert not output.startswith("{")
        assert "key: val" in output

    def test_error(self) -> None:
        output = format_result(_err(msg="Bad"))
        assert "ERROR" in output
        assert "Bad" in output
