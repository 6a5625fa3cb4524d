"""Formatters mapping resource documents to tables and records."""

from tracectl.formatters.base import ResourceFormatter, ResourceTable
from tracectl.formatters.config import ConfigFormatter
from tracectl.formatters.demo import DemoFormatter
from tracectl.formatters.polling_profile import PollingProfileFormatter
from tracectl.formatters.registry import get_formatter, resource_names
from tracectl.formatters.variable_set import VariableSetFormatter

__all__ = [
    "ConfigFormatter",
    "DemoFormatter",
    "PollingProfileFormatter",
    "ResourceFormatter",
    "ResourceTable",
    "VariableSetFormatter",
    "get_formatter",
    "resource_names",
]
