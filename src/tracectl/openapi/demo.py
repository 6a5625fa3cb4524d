"""Demo application resources and their list response."""

from __future__ import annotations

from tracectl.domain.types import DemoType
from tracectl.openapi.base import ApiModel, Int32, ResourceEnvelope


class DemoPokeshop(ApiModel):
    http_endpoint: str | None = None
    grpc_endpoint: str | None = None


class DemoOpenTelemetryStore(ApiModel):
    frontend_endpoint: str | None = None
    product_catalog_endpoint: str | None = None
    cart_endpoint: str | None = None
    checkout_endpoint: str | None = None


class Demo(ApiModel):
    id: str | None = None
    name: str | None = None
    type: DemoType | None = None
    enabled: bool | None = None
    pokeshop: DemoPokeshop | None = None
    opentelemetry_store: DemoOpenTelemetryStore | None = None


class DemoResource(ResourceEnvelope):
    """Represents a demo as a versioned resource."""

    spec: Demo | None = None


class ListDemos200Response(ApiModel):
    """Paginated page of demos."""

    count: Int32 | None = None
    items: list[DemoResource] | None = None
