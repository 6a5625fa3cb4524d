"""ResourceFormatter: adapts resource documents to tables and records.

Each concrete formatter knows one resource kind: the model used to decode
a singleton document, the optional model for a paginated list response,
and how a decoded resource maps onto a fixed row of display columns.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar

from tracectl.domain.errors import ResourceTypeError

if TYPE_CHECKING:
    from tracectl.domain.types import ResourceType
    from tracectl.infrastructure.file import ResourceFile
    from tracectl.openapi.base import ApiModel, ResourceEnvelope

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceTable:
    """A fixed header and zero or more rows of stringified cells.

    An empty table (no header) is falsy; formatters return one for
    list/singleton combinations they do not support.
    """

    header: tuple[str, ...] = ()
    rows: list[tuple[str, ...]] = field(default_factory=list)

    @classmethod
    def empty(cls) -> ResourceTable:
        return cls()

    def __bool__(self) -> bool:
        return bool(self.header)


def text(value: Any) -> str:
    """Render an optional scalar cell; absent values become ``""``."""
    return "" if value is None else str(value)


def flag(value: bool | None) -> str:
    """Render a boolean cell as ``true``/``false`` (absent reads as false)."""
    return "true" if value else "false"


class ResourceFormatter(ABC):
    """Base for per-resource formatters.

    Subclasses set the class attributes and implement :meth:`table_row`.
    Leaving ``list_model`` as None marks the resource as singleton-only:
    the list operations then return empty results.
    """

    name: ClassVar[str]
    resource_type: ClassVar[ResourceType]
    header: ClassVar[tuple[str, ...]]
    resource_model: ClassVar[type[ResourceEnvelope]]
    list_model: ClassVar[type[ApiModel] | None] = None

    @property
    def supports_list(self) -> bool:
        return self.list_model is not None

    def tabulate(self, resources: list[ResourceEnvelope]) -> ResourceTable:
        """Lay already decoded resources out under :attr:`header`."""
        return ResourceTable(header=self.header, rows=[self.table_row(r) for r in resources])

    def to_table(self, file: ResourceFile) -> ResourceTable:
        """Decode a singleton document into a one-row table."""
        return self.tabulate([self.to_struct(file)])

    def to_list_table(self, file: ResourceFile) -> ResourceTable:
        """Decode a list response into a table with one row per item."""
        if not self.supports_list:
            return ResourceTable.empty()
        return self.tabulate(self.to_list_struct(file))

    def to_struct(self, file: ResourceFile) -> ResourceEnvelope:
        """Decode a singleton document into its resource record.

        Raises:
            ResourceTypeError: the envelope names another resource kind.
            ResourceDecodeError: the document does not match the schema.
        """
        self._check_type(file.resource_type)
        resource = self.resource_model.from_json(file.json_contents())
        logger.debug("Decoded %s resource from %s", self.name, file.path)
        return resource

    def to_list_struct(self, file: ResourceFile) -> list[ResourceEnvelope]:
        """Decode a list response into its resource records."""
        if self.list_model is None:
            return []
        page = self.list_model.from_json(file.json_contents())
        items: list[ResourceEnvelope] = list(getattr(page, "items", None) or [])
        for item in items:
            self._check_type(item.type)
        logger.debug("Decoded %d %s item(s) from %s", len(items), self.name, file.path)
        return items

    @abstractmethod
    def table_row(self, resource: Any) -> tuple[str, ...]:
        """Map one decoded resource onto the columns of :attr:`header`."""

    def _check_type(self, actual: str | None) -> None:
        if actual is not None and actual != self.resource_type:
            raise ResourceTypeError(str(self.resource_type), actual)
