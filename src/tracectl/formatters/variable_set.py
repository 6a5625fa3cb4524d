"""Formatter for variable sets."""

from __future__ import annotations

from tracectl.domain.types import ResourceType
from tracectl.formatters.base import ResourceFormatter, text
from tracectl.openapi.variable_set import (
    ListVariableSets200Response,
    VariableSet,
    VariableSetResource,
)


class VariableSetFormatter(ResourceFormatter):
    name = "variableset"
    resource_type = ResourceType.VARIABLE_SET
    header = ("ID", "NAME", "DESCRIPTION")
    resource_model = VariableSetResource
    list_model = ListVariableSets200Response

    def table_row(self, resource: VariableSetResource) -> tuple[str, ...]:
        spec = resource.spec or VariableSet()
        return (text(spec.id), text(spec.name), text(spec.description))
