"""Resource kinds exposed by the platform API.

The enum values are the ``type`` strings carried in resource envelopes.
"""

from __future__ import annotations

from enum import StrEnum


class ResourceType(StrEnum):
    """Envelope ``type`` values for resources the CLI understands."""

    CONFIG = "Config"
    VARIABLE_SET = "VariableSet"
    POLLING_PROFILE = "PollingProfile"
    DEMO = "Demo"


class DemoType(StrEnum):
    """Bundled demo applications."""

    POKESHOP = "pokeshop"
    OTELSTORE = "otelstore"


class PollingStrategy(StrEnum):
    """Strategies a polling profile can use."""

    PERIODIC = "periodic"
