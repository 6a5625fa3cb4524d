"""Subcommand modules for tracectl.

register_commands() imports command modules lazily so ``tracectl --help``
stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from tracectl.commands.get import get
    from tracectl.commands.list_cmd import list_cmd
    from tracectl.commands.resources import resources

    cli.add_command(get)
    cli.add_command(list_cmd)
    cli.add_command(resources)
