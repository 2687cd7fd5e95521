"""
Project data collection — the ordered question pipeline.

Each step is a plain function ``step(data, ctx) -> dict`` that sees the
answers gathered so far and returns the field(s) it owns.  The runner
executes them front to back, so dependency order is the order of
``PIPELINE``:

    repoName → projectName → userName → userEmail → affiliationHint
    → affiliation → affiliationURL → mainBranch

A ``UserCanceled`` raised by any prompt escapes the runner untouched;
no partial ``AnswerRecord`` is ever built.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from wicg_init.adapters.base import GitClient
from wicg_init.adapters.terminal.prompt import Prompter, Question
from wicg_init.adapters.vcs.git import GitCommandError
from wicg_init.core.config.loader import InitSettings
from wicg_init.core.models import AnswerRecord

logger = logging.getLogger(__name__)


@dataclass
class CollectContext:
    """External capabilities and inputs available to every step."""

    git: GitClient
    prompter: Prompter
    cwd: Path = field(default_factory=Path.cwd)
    settings: InitSettings = field(default_factory=InitSettings)
    project_name: str = ""


Step = Callable[[dict[str, Any], CollectContext], dict[str, Any]]


def upper_case_first_letter(word: str) -> str:
    """Capitalize only the first character ("example.org" → "Example.org")."""
    if not isinstance(word, str):
        raise TypeError("Expected string")
    return word[:1].upper() + word[1:]


def affiliation_hint(email: str) -> str:
    """Domain part of an email address, or "" when there is no "@"."""
    _, at, domain = email.partition("@")
    return domain.strip() if at else ""


def _ask(ctx: CollectContext, key: str, description: str, default: str = "") -> str:
    return ctx.prompter.ask(Question(key, description, default)).strip()


def _git_default(ctx: CollectContext, key: str) -> str:
    """Read a git config value to use as a prompt default ("" when unset)."""
    try:
        return ctx.git.get_config_data(key).strip()
    except GitCommandError as e:
        # `git config --get` exits 1 for a missing key; anything else is real
        if e.returncode != 1:
            raise
        logger.debug("git config %s is not set", key)
        return ""


# ── Steps ───────────────────────────────────────────────────────


def ask_repo_name(data: dict[str, Any], ctx: CollectContext) -> dict[str, Any]:
    try:
        return {"repoName": ctx.git.get_repo_name(), "needsGitInit": False}
    except GitCommandError as e:
        logger.info("Not a git repository yet (%s)", e.stderr or e)
    repo = _ask(ctx, "repoName", "Name of Git repository:", ctx.cwd.name)
    return {"repoName": repo, "needsGitInit": True}


def ask_project_name(data: dict[str, Any], ctx: CollectContext) -> dict[str, Any]:
    if ctx.project_name.strip():
        return {"projectName": ctx.project_name.strip()}
    default = f"The {upper_case_first_letter(data['repoName'])} API"
    return {"projectName": _ask(ctx, "projectName", "Name of project:", default)}


def ask_user_name(data: dict[str, Any], ctx: CollectContext) -> dict[str, Any]:
    default = _git_default(ctx, "user.name")
    return {"userName": _ask(ctx, "userName", "Primary Editor of the spec:", default)}


def ask_email(data: dict[str, Any], ctx: CollectContext) -> dict[str, Any]:
    default = _git_default(ctx, "user.email")
    return {"userEmail": _ask(ctx, "userEmail", "Email (optional):", default)}


def derive_affiliation_hint(data: dict[str, Any], ctx: CollectContext) -> dict[str, Any]:
    return {"affiliationHint": affiliation_hint(data["userEmail"])}


def ask_affiliation(data: dict[str, Any], ctx: CollectContext) -> dict[str, Any]:
    hint = upper_case_first_letter(data["affiliationHint"])
    example = hint or ctx.settings.affiliation_sample
    description = f"Company affiliation (e.g., {example} Inc.):"
    return {"affiliation": _ask(ctx, "affiliation", description, hint)}


def ask_affiliation_url(data: dict[str, Any], ctx: CollectContext) -> dict[str, Any]:
    if not data["affiliation"]:
        return {"affiliationURL": ""}
    hint = data["affiliationHint"]
    default = f"https://{hint}" if hint else ""
    return {"affiliationURL": _ask(ctx, "affiliationURL", "Company URL:", default)}


def ask_main_branch(data: dict[str, Any], ctx: CollectContext) -> dict[str, Any]:
    default = ctx.settings.main_branch
    return {"mainBranch": _ask(ctx, "mainBranch", "Main git branch for the spec:", default)}


PIPELINE: tuple[Step, ...] = (
    ask_repo_name,
    ask_project_name,
    ask_user_name,
    ask_email,
    derive_affiliation_hint,
    ask_affiliation,
    ask_affiliation_url,
    ask_main_branch,
)


def run_steps(steps: tuple[Step, ...] | list[Step], ctx: CollectContext) -> dict[str, Any]:
    """Run steps in order, merging each one's fields into the working data.

    Raises:
        ValueError: If a step tries to set a field an earlier step owns.
    """
    data: dict[str, Any] = {}
    for step in steps:
        fields = step(data, ctx)
        clash = data.keys() & fields.keys()
        if clash:
            raise ValueError(f"{step.__name__} overwrites {', '.join(sorted(clash))}")
        data.update(fields)
        logger.debug("%s → %s", step.__name__, ", ".join(fields))
    return data


def collect_project_data(ctx: CollectContext) -> AnswerRecord:
    """Ask every question and return the consolidated answers."""
    return AnswerRecord.model_validate(run_steps(PIPELINE, ctx))
