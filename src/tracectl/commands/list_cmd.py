"""Command: show a page of resources."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tracectl.commands._base import TracectlCommand

if TYPE_CHECKING:
    from tracectl.commands._context import AppContext


@click.command(
    "list",
    cls=TracectlCommand,
    examples="""\
  tracectl list variableset -f variable-sets.json
  tracectl list demo -f demos.json
  tracectl -q list variableset -f variable-sets.json""",
)
@click.argument("resource")
@click.option(
    "-f",
    "--file",
    "file_path",
    required=True,
    help="List response document (JSON or YAML). Use - for stdin.",
)
@click.pass_obj
def list_cmd(app: AppContext, resource: str, file_path: str) -> None:
    """Show every RESOURCE in a list response as a table."""
    from tracectl.services.resource import ResourceService

    app.emit(ResourceService().list(resource, file_path))
