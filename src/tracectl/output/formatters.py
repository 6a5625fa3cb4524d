"""Output mode dispatch.

The CLI renders a ServiceResult for humans (rich tables) or machines
(``--json``).  :func:`format_result` picks the mode from OutputSettings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from tracectl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from tracectl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output-affecting flags, resolved from settings at emit time."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    no_color: bool = False
    width: int | None = None
    show_count: bool = True


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet, quiet wins over the rich renderers.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(
        result,
        verbose=settings.verbose,
        no_color=settings.no_color,
        width=settings.width,
        show_count=settings.show_count,
    )
