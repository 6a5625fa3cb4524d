"""ResourceService: turns resource files into tables and records."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from tracectl.domain.errors import TracectlError
from tracectl.formatters.base import ResourceTable
from tracectl.formatters.registry import FORMATTERS, get_formatter
from tracectl.infrastructure.file import ResourceFile
from tracectl.services.base import BaseService
from tracectl.services.result import ServiceResult

if TYPE_CHECKING:
    from tracectl.formatters.base import ResourceFormatter
    from tracectl.openapi.base import ApiModel

logger = logging.getLogger(__name__)


class ResourceService(BaseService):
    """Format singleton and list resource documents."""

    def get(self, resource: str, path: str | Path) -> ServiceResult:
        """Decode a singleton document for *resource* from *path*."""
        op = "get_resource"
        try:
            formatter = get_formatter(resource)
            file = ResourceFile.read(path)
            record = formatter.to_struct(file)
        except TracectlError as exc:
            return self._failure(op, exc, resource=resource, path=str(path))

        return ServiceResult(
            ok=True,
            op=op,
            data=_payload(formatter, formatter.tabulate([record]), [record]),
            meta=_meta(formatter, file),
        )

    def list(self, resource: str, path: str | Path) -> ServiceResult:
        """Decode a list response for *resource* from *path*.

        Resources without list support yield an empty table, not an error.
        """
        op = "list_resources"
        try:
            formatter = get_formatter(resource)
            file = ResourceFile.read(path)
            records = formatter.to_list_struct(file)
        except TracectlError as exc:
            return self._failure(op, exc, resource=resource, path=str(path))

        warnings: list[str] = []
        table = formatter.tabulate(records) if formatter.supports_list else ResourceTable.empty()
        if not formatter.supports_list:
            logger.debug("%s has no list representation", formatter.name)
            warnings.append(f"'{formatter.name}' has no list representation")

        data = _payload(formatter, table, records)
        data["count"] = len(table.rows)
        return ServiceResult(
            ok=True,
            op=op,
            data=data,
            warnings=warnings,
            meta=_meta(formatter, file),
        )

    def describe(self) -> ServiceResult:
        """List the resource kinds this client can format."""
        items = [
            {
                "id": name,
                "resource_type": str(f.resource_type),
                "list_supported": f.supports_list,
                "columns": list(f.header),
            }
            for name, f in sorted(FORMATTERS.items())
        ]
        return ServiceResult(
            ok=True,
            op="list_resource_types",
            data={"items": items, "count": len(items)},
        )


def _payload(
    formatter: ResourceFormatter,
    table: ResourceTable,
    records: list[ApiModel],
) -> dict[str, Any]:
    return {
        "resource": formatter.name,
        "columns": list(table.header),
        "rows": [list(row) for row in table.rows],
        "items": [record.to_dict() for record in records],
    }


def _meta(formatter: ResourceFormatter, file: ResourceFile) -> dict[str, Any]:
    return {"path": file.path, "resource_type": str(formatter.resource_type)}
