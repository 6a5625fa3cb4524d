"""Records mirroring the platform's OpenAPI schemas."""

from tracectl.openapi.base import ApiModel, Int32, ResourceEnvelope
from tracectl.openapi.configuration import Configuration, ConfigurationResource
from tracectl.openapi.demo import (
    Demo,
    DemoOpenTelemetryStore,
    DemoPokeshop,
    DemoResource,
    ListDemos200Response,
)
from tracectl.openapi.polling_profile import (
    PeriodicPollingConfig,
    PollingProfile,
    PollingProfileResource,
)
from tracectl.openapi.variable_set import (
    ListVariableSets200Response,
    VariableSet,
    VariableSetResource,
    VariableSetValue,
)

__all__ = [
    "ApiModel",
    "Configuration",
    "ConfigurationResource",
    "Demo",
    "DemoOpenTelemetryStore",
    "DemoPokeshop",
    "DemoResource",
    "Int32",
    "ListDemos200Response",
    "ListVariableSets200Response",
    "PeriodicPollingConfig",
    "PollingProfile",
    "PollingProfileResource",
    "ResourceEnvelope",
    "VariableSet",
    "VariableSetResource",
    "VariableSetValue",
]
