"""
Adapter base — the contracts between the core and external tools.

The core never shells out or reads the terminal directly.  It talks to
git through ``GitClient`` and to the user through ``Prompter``
(see ``wicg_init.adapters.terminal.prompt``), so tests can swap in the
in-memory doubles from ``wicg_init.adapters.mock``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class GitClient(ABC):
    """The fixed vocabulary of git operations the init flow needs.

    Every method is a single git invocation (``switch_branch`` may need
    two).  Failures raise ``GitCommandError``; there are no retries.
    """

    @abstractmethod
    def get_repo_name(self) -> str:
        """Name of the repository containing the working directory.

        Raises GitCommandError when not inside a repository.
        """

    @abstractmethod
    def get_config_data(self, key: str) -> str:
        """Read a single git config value (e.g. ``user.name``).

        Raises GitCommandError when the key is unset.
        """

    @abstractmethod
    def switch_branch(self, name: str) -> str:
        """Check out ``name``, creating it first if it does not exist."""

    @abstractmethod
    def init(self) -> str:
        """Initialize a repository in the working directory."""

    @abstractmethod
    def run(self, *args: str) -> str:
        """Run an arbitrary git subcommand and return its stdout."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"
