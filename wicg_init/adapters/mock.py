"""
Mock adapters — in-memory test doubles for git and the prompt.

Used by the test suite to drive the whole init flow without a terminal
or a git binary.  Both doubles keep a call log so tests can assert on
exactly which operations were issued.
"""

from __future__ import annotations

from wicg_init.adapters.base import GitClient
from wicg_init.adapters.terminal.prompt import Prompter, Question, UserCanceled
from wicg_init.adapters.vcs.git import GitCommandError


class MockGit(GitClient):
    """Universal git double.

    By default the working directory is not a repository (so the flow
    has to ``init``) and no config values are set.
    """

    def __init__(
        self,
        repo_name: str | None = None,
        config: dict[str, str] | None = None,
    ):
        self._repo_name = repo_name
        self._config = dict(config or {})
        self._failures: dict[str, str] = {}
        self._call_log: list[tuple[str, ...]] = []

    @property
    def call_log(self) -> list[tuple[str, ...]]:
        """Every call received, as ``(operation, *args)`` tuples."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    def calls(self, operation: str) -> list[tuple[str, ...]]:
        """Calls for a single operation (``run`` calls are keyed by subcommand)."""
        return [c for c in self._call_log if c[0] == operation]

    def set_failure(self, operation: str, error: str = "Mock failure") -> None:
        """Make ``operation`` (or a ``run`` subcommand) raise GitCommandError."""
        self._failures[operation] = error

    def _record(self, operation: str, *args: str) -> None:
        self._call_log.append((operation, *args))
        if operation in self._failures:
            raise GitCommandError([operation, *args], 128, self._failures[operation])

    def get_repo_name(self) -> str:
        self._record("get_repo_name")
        if self._repo_name is None:
            raise GitCommandError(
                ["rev-parse", "--show-toplevel"],
                128,
                "fatal: not a git repository (or any of the parent directories): .git",
            )
        return self._repo_name

    def get_config_data(self, key: str) -> str:
        self._record("get_config_data", key)
        if key not in self._config:
            raise GitCommandError(["config", "--get", key], 1)
        return self._config[key]

    def switch_branch(self, name: str) -> str:
        self._record("switch_branch", name)
        return f"Switched to a new branch '{name}'"

    def init(self) -> str:
        self._record("init")
        self._repo_name = self._repo_name or "repo"
        return "Initialized empty Git repository in /mock/.git/"

    def run(self, *args: str) -> str:
        subcommand = args[0] if args else ""
        self._record(subcommand, *args[1:])
        return f"[mock] git {' '.join(args)}"

    def reset(self) -> None:
        """Clear call log and configured failures."""
        self._call_log.clear()
        self._failures.clear()


class ScriptedPrompter(Prompter):
    """Answers questions from a dict keyed by ``Question.key``.

    Keys without a scripted answer accept the question's default, like a
    user pressing enter.  ``cancel_at`` raises UserCanceled when that key
    is asked.
    """

    def __init__(self, answers: dict[str, str] | None = None, cancel_at: str | None = None):
        self._answers = dict(answers or {})
        self._cancel_at = cancel_at
        self.asked: list[Question] = []

    @property
    def asked_keys(self) -> list[str]:
        return [q.key for q in self.asked]

    def question(self, key: str) -> Question | None:
        """The question asked for ``key``, if any."""
        for q in self.asked:
            if q.key == key:
                return q
        return None

    def ask(self, question: Question) -> str:
        self.asked.append(question)
        if question.key == self._cancel_at:
            raise UserCanceled()
        return self._answers.get(question.key, question.default)
