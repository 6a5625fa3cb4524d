"""Variable set resources and their list response."""

from __future__ import annotations

from tracectl.openapi.base import ApiModel, Int32, ResourceEnvelope


class VariableSetValue(ApiModel):
    key: str | None = None
    value: str | None = None


class VariableSet(ApiModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    values: list[VariableSetValue] | None = None


class VariableSetResource(ResourceEnvelope):
    """Represents a variable set as a versioned resource."""

    spec: VariableSet | None = None


class ListVariableSets200Response(ApiModel):
    """Paginated page of variable sets."""

    count: Int32 | None = None
    items: list[VariableSetResource] | None = None
