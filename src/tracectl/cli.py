"""Root CLI group for tracectl with global flags and command registration."""

from __future__ import annotations

import click

from tracectl import __version__
from tracectl.commands import register_commands
from tracectl.commands._base import TracectlGroup
from tracectl.commands._context import AppContext
from tracectl.config.settings import TracectlSettings


@click.group(
    cls=TracectlGroup,
    invoke_without_command=True,
    examples="""\
  tracectl resources
  tracectl get config -f config.yaml
  tracectl --json list variableset -f environments.json
  tracectl -c ~/work/tracectl.toml list demo -f demos.yaml""",
)
@click.version_option(version=__version__, prog_name="tracectl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print resource ids only.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """tracectl: format tracing test platform resources."""
    flags = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
    }
    # Unset flags must not mask TRACECTL_* env vars.
    settings = TracectlSettings.from_cli(
        config_path=config_path,
        **{k: v for k, v in flags.items() if v},
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
