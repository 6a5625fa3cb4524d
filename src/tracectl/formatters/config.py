"""Formatter for the server configuration resource (singleton only)."""

from __future__ import annotations

from tracectl.domain.types import ResourceType
from tracectl.formatters.base import ResourceFormatter, flag, text
from tracectl.openapi.configuration import Configuration, ConfigurationResource


class ConfigFormatter(ResourceFormatter):
    name = "config"
    resource_type = ResourceType.CONFIG
    header = ("ID", "NAME", "ANALYTICS ENABLED")
    resource_model = ConfigurationResource

    def table_row(self, resource: ConfigurationResource) -> tuple[str, ...]:
        spec = resource.spec or Configuration()
        return (text(spec.id), text(spec.name), flag(spec.analytics_enabled))
