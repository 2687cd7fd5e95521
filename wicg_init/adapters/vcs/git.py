"""
Git adapter — version control operations.

Provides the handful of git operations the init flow needs (repo name,
config reads, init, branch switch, add/commit) through the ``GitClient``
contract.  Uses the git CLI — one subprocess per call, no retries.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from wicg_init.adapters.base import GitClient

logger = logging.getLogger(__name__)


class GitCommandError(Exception):
    """A git invocation exited non-zero (or could not be started)."""

    def __init__(self, args: tuple[str, ...] | list[str], returncode: int, stderr: str = ""):
        self.command = ["git", *args]
        self.returncode = returncode
        self.stderr = stderr.strip()
        detail = self.stderr or f"exit code {returncode}"
        super().__init__(f"`{' '.join(self.command)}` failed: {detail}")


class GitAdapter(GitClient):
    """Subprocess-backed git client bound to one working directory.

    Args:
        cwd: Directory every command runs in (default: process cwd).
        timeout: Per-command timeout in seconds.
    """

    def __init__(self, cwd: Path | str | None = None, timeout: int = 30):
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.timeout = timeout

    def is_available(self) -> bool:
        return shutil.which("git") is not None

    # ── Operations ──────────────────────────────────────────────

    def get_repo_name(self) -> str:
        toplevel = self._git(["rev-parse", "--show-toplevel"]).strip()
        return Path(toplevel).name

    def get_config_data(self, key: str) -> str:
        return self._git(["config", "--get", key]).strip()

    def switch_branch(self, name: str) -> str:
        if self._branch_exists(name):
            return self._git(["checkout", name])
        return self._git(["checkout", "-b", name])

    def init(self) -> str:
        return self._git(["init"])

    def run(self, *args: str) -> str:
        return self._git(list(args))

    # ── Helpers ─────────────────────────────────────────────────

    def _branch_exists(self, name: str) -> bool:
        try:
            self._git(["show-ref", "--verify", "--quiet", f"refs/heads/{name}"])
        except GitCommandError:
            return False
        return True

    def _git(self, args: list[str]) -> str:
        """Run a git command and return stdout (git's own messages included)."""
        logger.debug("Executing: git %s (cwd=%s)", " ".join(args), self.cwd)
        try:
            result = subprocess.run(
                ["git", *args],
                cwd=str(self.cwd),
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise GitCommandError(args, 127, f"git executable not found: {e}") from e
        except subprocess.TimeoutExpired as e:
            raise GitCommandError(args, -1, f"timed out after {self.timeout}s") from e

        if result.returncode != 0:
            raise GitCommandError(args, result.returncode, result.stderr)
        # `git checkout` reports on stderr; keep it so callers can show it
        return result.stdout or result.stderr
