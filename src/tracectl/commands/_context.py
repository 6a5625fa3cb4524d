"""AppContext: shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``.  Owns logging setup and result emission
(stdout/stderr routing plus exit codes).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from tracectl.config.logging import configure_logging
from tracectl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from tracectl.config.settings import TracectlSettings
    from tracectl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: TracectlSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.config_path is not None:
            logger.debug("Loaded config %s (%s)", settings.config_path, settings.config_origin)

    @property
    def output_settings(self) -> OutputSettings:
        s = self.settings
        return OutputSettings(
            json_output=s.json_output,
            quiet=s.quiet,
            verbose=s.verbose,
            no_color=s.output.no_color,
            width=s.output.width,
            show_count=s.output.show_count,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout.  Warnings go to stderr so they do not
          pollute piped output; in JSON mode they are already in the payload.
        * Failure: writes to stderr and exits with code 1.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
