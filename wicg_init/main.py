"""
WICG init — CLI entrypoint.

Usage:
    wicg-init --help
    wicg-init init
    wicg-init init "The Widget API"
"""

from __future__ import annotations

import os
from pathlib import Path

import click

from wicg_init import __version__
from wicg_init.core.observability.logging_config import setup_logging
from wicg_init.ui.cli.messages import EXAMPLE, LOGO


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="wicg-init")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to .wicg-init.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """WICG init — scaffold a new incubation project."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("WICG_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("WICG_LOG_FILE"),
        log_file_level=os.environ.get("WICG_LOG_FILE_LEVEL"),
    )

    # No subcommand: show what the tool does instead of running it
    if ctx.invoked_subcommand is None:
        click.secho(LOGO, fg="magenta")
        click.echo(ctx.get_help())
        click.echo(EXAMPLE)


from wicg_init.ui.cli.init import init

cli.add_command(init)


if __name__ == "__main__":
    cli()
