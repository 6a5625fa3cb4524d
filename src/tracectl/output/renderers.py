"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  Renderers
are dispatched by ``result.op`` in :func:`render_result`; unknown ops
fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from tracectl.output.console import create_console, get_output, style_for_cell

if TYPE_CHECKING:
    from rich.console import Console

    from tracectl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    no_color: bool = False,
    width: int | None = None,
    show_count: bool = True,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(no_color=no_color, width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose, show_count=show_count)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: ids, one per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if items and isinstance(items, list):
        ids = [_extract_id(item) for item in items]
        if any(ids):
            return "\n".join(i for i in ids if i)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _extract_id(item: Any) -> str:
    """Extract an id from a resource envelope or a flat dict."""
    if not isinstance(item, dict):
        return ""
    spec = item.get("spec")
    if isinstance(spec, dict) and spec.get("id") is not None:
        return str(spec["id"])
    val = item.get("id")
    return "" if val is None else str(val)


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="tt.ok")
    op = Text(f"  {result.op}", style="tt.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="tt.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="tt.id")
    elif key == "path":
        v = Text(str(value), style="tt.path")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


def _table(columns: list[str], rows: list[list[str]]) -> Table:
    """Build a Rich Table with a fixed header and stringified cells."""
    table = Table(show_header=True, header_style="tt.header", pad_edge=False, expand=False)
    for i, col in enumerate(columns):
        if i == 0:
            table.add_column(col, style="tt.id", no_wrap=True)
        else:
            table.add_column(col)
    for row in rows:
        table.add_row(*(Text(cell, style=style_for_cell(cell)) for cell in row))
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="tt.error")
    op = Text(f"  {result.op}", style="tt.op")
    console.print(label, op, Text(" — "), Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Resource renderers ────────────────────────────────────────────────


def _render_resource_table(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_count: bool = True,
) -> None:
    """Render get_resource / list_resources as a table."""
    d = result.data
    columns: list[str] = d.get("columns", [])
    rows: list[list[str]] = d.get("rows", [])

    if not columns:
        _status_line(console, result)
        _field(console, "resource", d.get("resource", ""))
        _field(console, "rows", 0)
    else:
        console.print(_table(columns, rows))
        if show_count and result.op == "list_resources":
            console.print(f"\n{d.get('count', len(rows))} items")

    if verbose:
        _render_meta(console, result)


def _render_resource_types(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_count: bool = True,
) -> None:
    """Render the table of supported resource kinds."""
    items = result.data.get("items", [])
    rows = [
        [
            str(item.get("id", "")),
            str(item.get("resource_type", "")),
            "true" if item.get("list_supported") else "false",
            ", ".join(item.get("columns", [])),
        ]
        for item in items
    ]
    console.print(_table(["RESOURCE", "TYPE", "LIST", "COLUMNS"], rows))
    if show_count:
        console.print(f"\n{result.data.get('count', len(items))} resources")


def _render_generic(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_count: bool = True,
) -> None:
    """Fallback: status line plus one field per data key."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    "get_resource": _render_resource_table,
    "list_resources": _render_resource_table,
    "list_resource_types": _render_resource_types,
}
