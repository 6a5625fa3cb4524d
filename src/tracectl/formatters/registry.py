"""Lookup of formatters by resource name."""

from __future__ import annotations

from tracectl.domain.errors import UnknownResourceError
from tracectl.formatters.base import ResourceFormatter
from tracectl.formatters.config import ConfigFormatter
from tracectl.formatters.demo import DemoFormatter
from tracectl.formatters.polling_profile import PollingProfileFormatter
from tracectl.formatters.variable_set import VariableSetFormatter

FORMATTERS: dict[str, ResourceFormatter] = {
    f.name: f
    for f in (
        ConfigFormatter(),
        VariableSetFormatter(),
        PollingProfileFormatter(),
        DemoFormatter(),
    )
}

# Older CLI releases called variable sets "environments".
ALIASES: dict[str, str] = {
    "configuration": "config",
    "environment": "variableset",
    "variable-set": "variableset",
    "polling-profile": "pollingprofile",
}


def resource_names() -> list[str]:
    """Canonical resource names, sorted."""
    return sorted(FORMATTERS)


def get_formatter(name: str) -> ResourceFormatter:
    """Resolve *name* (case-insensitive, aliases allowed) to its formatter.

    Raises:
        UnknownResourceError: no formatter is registered under *name*.
    """
    key = name.strip().lower()
    key = ALIASES.get(key, key)
    try:
        return FORMATTERS[key]
    except KeyError:
        raise UnknownResourceError(name, resource_names()) from None
