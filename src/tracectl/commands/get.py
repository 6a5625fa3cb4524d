"""Command: show a single resource."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tracectl.commands._base import TracectlCommand

if TYPE_CHECKING:
    from tracectl.commands._context import AppContext


@click.command(
    cls=TracectlCommand,
    examples="""\
  tracectl get config -f config.yaml
  tracectl get variableset -f staging.json
  tracectl --json get demo -f pokeshop.yaml
  cat profile.json | tracectl get pollingprofile -f -""",
)
@click.argument("resource")
@click.option(
    "-f",
    "--file",
    "file_path",
    required=True,
    help="Resource document (JSON or YAML). Use - for stdin.",
)
@click.pass_obj
def get(app: AppContext, resource: str, file_path: str) -> None:
    """Show one RESOURCE read from a file as a table."""
    from tracectl.services.resource import ResourceService

    app.emit(ResourceService().get(resource, file_path))
