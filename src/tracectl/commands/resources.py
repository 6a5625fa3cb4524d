"""Command: show the resource kinds tracectl can format."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tracectl.commands._base import TracectlCommand

if TYPE_CHECKING:
    from tracectl.commands._context import AppContext


@click.command(
    cls=TracectlCommand,
    examples="""\
  tracectl resources
  tracectl --json resources""",
)
@click.pass_obj
def resources(app: AppContext) -> None:
    """List supported resource kinds and their table columns."""
    from tracectl.services.resource import ResourceService

    app.emit(ResourceService().describe())
