"""Formatter for the polling profile resource (singleton only)."""

from __future__ import annotations

from tracectl.domain.types import ResourceType
from tracectl.formatters.base import ResourceFormatter, text
from tracectl.openapi.polling_profile import PollingProfile, PollingProfileResource


class PollingProfileFormatter(ResourceFormatter):
    name = "pollingprofile"
    resource_type = ResourceType.POLLING_PROFILE
    header = ("ID", "NAME", "STRATEGY")
    resource_model = PollingProfileResource

    def table_row(self, resource: PollingProfileResource) -> tuple[str, ...]:
        spec = resource.spec or PollingProfile()
        return (text(spec.id), text(spec.name), text(spec.strategy))
