"""
Init use case — scaffold a new incubation project in a directory.

This is the top-level orchestrator:

    collect → git setup → materialize → add/commit → report

Every stage depends on the previous one, so any failure stops the run.
Nothing already done is undone: a branch switched before templates
failed stays switched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from wicg_init.adapters.base import GitClient
from wicg_init.adapters.terminal.prompt import Prompter, UserCanceled
from wicg_init.adapters.vcs.git import GitCommandError
from wicg_init.core.config.loader import InitSettings
from wicg_init.core.models import AnswerRecord
from wicg_init.core.observability.diagnostics import Diagnostics
from wicg_init.core.services.collect import CollectContext, collect_project_data
from wicg_init.core.services.materialize import MaterializeResult, materialize

logger = logging.getLogger(__name__)

# progress(kind, message) — kind is one of heading, ok, warn, error, info
ProgressFn = Callable[[str, str], None]


def _silent(kind: str, message: str) -> None:
    logger.debug("[%s] %s", kind, message)


@dataclass
class InitResult:
    """Result of an init run."""

    answers: AnswerRecord | None = None
    materialized: MaterializeResult | None = None
    committed: bool = False
    canceled: bool = False
    error: str | None = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        result: dict = {}
        if self.error:
            result["error"] = self.error
            result["canceled"] = self.canceled
        if self.answers:
            result["answers"] = self.answers.as_template_values()
        if self.materialized:
            result["files"] = self.materialized.to_dict()
        result["committed"] = self.committed
        return result


def setup_git(git: GitClient, answers: AnswerRecord, progress: ProgressFn) -> None:
    """Initialize the repository if needed and switch to the main branch."""
    progress("heading", "Performing git tasks")
    if answers.needs_git_init:
        output = git.init()
        progress("ok", output.strip())
    git.switch_branch(answers.main_branch)
    progress("ok", f"switched to branch {answers.main_branch}")


def commit_files(
    git: GitClient,
    files: list[str],
    message: str,
) -> bool:
    """Stage and commit exactly ``files``. No-op for an empty list."""
    if not files:
        logger.info("Nothing written — skipping commit")
        return False
    git.run("add", "--", *files)
    git.run("commit", "-m", message, "--", *files)
    return True


def run_init(
    git: GitClient,
    prompter: Prompter,
    cwd: Path | None = None,
    project_name: str | None = None,
    settings: InitSettings | None = None,
    progress: ProgressFn | None = None,
) -> InitResult:
    """Scaffold a project in ``cwd``.

    Args:
        git: Git client bound to ``cwd``.
        prompter: Where questions are answered.
        cwd: Destination directory (default: process cwd).
        project_name: Project name given on the command line, if any.
        settings: Loaded configuration (default: built-in settings).
        progress: Optional callback receiving ``(kind, message)`` events.

    Returns:
        InitResult. Cancellation and git failures are reported in
        ``error``; anything else propagates.
    """
    cwd = cwd or Path.cwd()
    settings = settings or InitSettings()
    progress = progress or _silent
    result = InitResult()

    # ── Collect ──────────────────────────────────────────────────
    progress("heading", "About this WICG project")
    ctx = CollectContext(
        git=git,
        prompter=prompter,
        cwd=cwd,
        settings=settings,
        project_name=project_name or "",
    )
    try:
        result.answers = collect_project_data(ctx)
    except UserCanceled as e:
        result.canceled = True
        result.error = str(e)
        return result
    except GitCommandError as e:
        result.error = str(e)
        return result

    answers = result.answers

    try:
        # ── Git setup ────────────────────────────────────────────
        setup_git(git, answers, progress)

        # ── Templates ────────────────────────────────────────────
        progress("heading", "Creating Templates")
        result.materialized = materialize(
            settings.templates_dir, cwd, answers, result.diagnostics
        )
        _report_files(result.materialized, progress)

        # ── Commit ───────────────────────────────────────────────
        result.committed = commit_files(
            git, result.materialized.written, settings.commit_message
        )
        if result.committed:
            progress("info", f'Committed changes to "{answers.main_branch}" branch.')
    except GitCommandError as e:
        result.error = str(e)

    return result


def _report_files(materialized: MaterializeResult, progress: ProgressFn) -> None:
    for outcome in materialized.outcomes:
        if outcome.status == "written":
            progress("ok", f"Created {outcome.name}")
        elif outcome.status == "skipped":
            progress("warn", f"Skipping {outcome.name} (already exists)")
        else:
            progress("error", f"could not create {outcome.name}: {outcome.reason}")
    for diag in materialized.diagnostics.warnings:
        if diag.token:
            progress("warn", f"Warning: {diag.message}")
