"""
CLI command for scaffolding a project.

Thin wrapper over ``wicg_init.core.use_cases.init``: wires the real git
and terminal adapters, renders progress, and maps failures to exit codes.
"""

from __future__ import annotations

import json
import sys
import traceback
from pathlib import Path

import click

from wicg_init.ui.cli.messages import FINISHED, LOGO

_STYLES = {
    "heading": ("", {"fg": "cyan", "bold": True}),
    "ok": (" ✅ ", {"fg": "green"}),
    "warn": (" ⚠️  ", {"fg": "yellow"}),
    "error": (" => Error! ", {"fg": "red"}),
    "info": ("", {"fg": "green"}),
}


def render_progress(kind: str, message: str) -> None:
    """Print one progress event from the init use case."""
    prefix, style = _STYLES.get(kind, ("", {}))
    if kind == "heading":
        click.echo()
        click.secho(message, **style)
        click.secho("─" * len(message), **style)
        return
    click.secho(f"{prefix}{message}", err=kind == "error", **style)


@click.command("init")
@click.argument("name", required=False)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.pass_context
def init(ctx: click.Context, name: str | None, as_json: bool) -> None:
    """Start a new incubation project in the current directory."""
    from wicg_init.adapters.terminal.prompt import ClickPrompter
    from wicg_init.adapters.vcs.git import GitAdapter
    from wicg_init.core.config.loader import ConfigError, load_settings
    from wicg_init.core.use_cases.init import run_init

    cwd = Path.cwd()
    try:
        settings = load_settings(ctx.obj.get("config_path"), start_dir=cwd)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    git = GitAdapter(cwd, timeout=settings.git_timeout)
    if not git.is_available():
        click.secho("❌ git is not installed or not on PATH", fg="red", err=True)
        sys.exit(1)

    if not ctx.obj.get("quiet"):
        click.secho(LOGO, fg="magenta")

    try:
        result = run_init(
            git=git,
            prompter=ClickPrompter(),
            cwd=cwd,
            project_name=name,
            settings=settings,
            progress=render_progress,
        )
    except Exception:
        click.secho(f"\n{traceback.format_exc()}", fg="red", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))

    if result.error:
        icon = "🙅" if result.canceled else "❌"
        click.secho(f"\n {icon} {result.error}", fg="red", err=True)
        sys.exit(1)

    if not as_json:
        click.echo(FINISHED)
