"""Server configuration resource."""

from __future__ import annotations

from tracectl.openapi.base import ApiModel, ResourceEnvelope


class Configuration(ApiModel):
    id: str | None = None
    name: str | None = None
    # Not optional upstream: always present on the wire.
    analytics_enabled: bool = False


class ConfigurationResource(ResourceEnvelope):
    """Represents the configuration as a versioned resource."""

    spec: Configuration | None = None
