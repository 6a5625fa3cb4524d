"""Polling profile resource."""

from __future__ import annotations

from tracectl.domain.types import PollingStrategy
from tracectl.openapi.base import ApiModel, Int32, ResourceEnvelope


class PeriodicPollingConfig(ApiModel):
    retry_delay: str | None = None
    timeout: str | None = None
    selector_match_retries: Int32 | None = None


class PollingProfile(ApiModel):
    id: str | None = None
    name: str | None = None
    default: bool | None = None
    strategy: PollingStrategy | None = None
    periodic: PeriodicPollingConfig | None = None


class PollingProfileResource(ResourceEnvelope):
    """Represents a polling profile as a versioned resource."""

    spec: PollingProfile | None = None
