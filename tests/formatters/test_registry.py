"""Tests for formatter lookup by resource name."""

from __future__ import annotations

import pytest

from tracectl.domain.errors import UnknownResourceError
from tracectl.formatters import (
    ConfigFormatter,
    DemoFormatter,
    PollingProfileFormatter,
    VariableSetFormatter,
    get_formatter,
    resource_names,
)


def test_resource_names_sorted() -> None:
    assert resource_names() == ["config", "demo", "pollingprofile", "variableset"]


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("config", ConfigFormatter),
        ("Config", ConfigFormatter),
        ("configuration", ConfigFormatter),
        ("variableset", VariableSetFormatter),
        ("environment", VariableSetFormatter),
        ("variable-set", VariableSetFormatter),
        ("polling-profile", PollingProfileFormatter),
        (" demo ", DemoFormatter),
    ],
)
def test_get_formatter(name: str, expected: type) -> None:
    assert isinstance(get_formatter(name), expected)


def test_unknown_resource() -> None:
    with pytest.raises(UnknownResourceError) as exc_info:
        get_formatter("transaction")
    assert exc_info.value.code == "UNKNOWN_RESOURCE"
    assert "config" in str(exc_info.value)
