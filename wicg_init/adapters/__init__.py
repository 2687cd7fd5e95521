"""Adapters — bindings to git and the terminal.

Public re-exports for convenient access.
"""

from wicg_init.adapters.base import GitClient
from wicg_init.adapters.mock import MockGit, ScriptedPrompter
from wicg_init.adapters.terminal.prompt import ClickPrompter, Prompter, Question, UserCanceled
from wicg_init.adapters.vcs.git import GitAdapter, GitCommandError

__all__ = [
    "ClickPrompter",
    "GitAdapter",
    "GitClient",
    "GitCommandError",
    "MockGit",
    "Prompter",
    "Question",
    "ScriptedPrompter",
    "UserCanceled",
]
