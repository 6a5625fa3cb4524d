"""Formatter for demo applications."""

from __future__ import annotations

from tracectl.domain.types import ResourceType
from tracectl.formatters.base import ResourceFormatter, flag, text
from tracectl.openapi.demo import Demo, DemoResource, ListDemos200Response


class DemoFormatter(ResourceFormatter):
    name = "demo"
    resource_type = ResourceType.DEMO
    header = ("ID", "NAME", "TYPE", "ENABLED")
    resource_model = DemoResource
    list_model = ListDemos200Response

    def table_row(self, resource: DemoResource) -> tuple[str, ...]:
        spec = resource.spec or Demo()
        return (text(spec.id), text(spec.name), text(spec.type), flag(spec.enabled))
