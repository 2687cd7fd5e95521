"""
Shared test fixtures and configuration.
"""

import shutil
import subprocess
from pathlib import Path

import pytest

from wicg_init.adapters.mock import MockGit, ScriptedPrompter
from wicg_init.core.models import AnswerRecord

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")

README_TEMPLATE = "# {{projectName}}\nBy {{userName}} ({{userEmail}})"


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    """A template directory with a single README.md."""
    tdir = tmp_path / "templates"
    tdir.mkdir()
    (tdir / "README.md").write_text(README_TEMPLATE, encoding="utf-8")
    return tdir


@pytest.fixture
def dest_dir(tmp_path: Path) -> Path:
    """An empty destination directory."""
    dest = tmp_path / "project"
    dest.mkdir()
    return dest


@pytest.fixture
def answers() -> AnswerRecord:
    return AnswerRecord(
        repo_name="widget",
        project_name="The Widget API",
        user_name="Ada",
        user_email="ada@example.org",
        affiliation="Example.org",
        affiliation_url="https://example.org",
        main_branch="gh-pages",
    )


@pytest.fixture
def mock_git() -> MockGit:
    """A git double for a directory that is not a repository yet."""
    return MockGit(config={"user.name": "Ada Lovelace", "user.email": "ada@example.org"})


@pytest.fixture
def prompter() -> ScriptedPrompter:
    """A prompter that accepts every default."""
    return ScriptedPrompter()


@pytest.fixture
def git_env(tmp_path: Path, monkeypatch) -> Path:
    """Isolate git from the user's config and give commits an identity.

    Returns the isolated HOME directory.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))
    for var in ("GIT_DIR", "GIT_WORK_TREE", "GIT_CONFIG_GLOBAL", "GIT_INDEX_FILE"):
        monkeypatch.delenv(var, raising=False)
    for var in ("GIT_AUTHOR", "GIT_COMMITTER"):
        monkeypatch.setenv(f"{var}_NAME", "Test Bot")
        monkeypatch.setenv(f"{var}_EMAIL", "bot@example.com")
    return home


def git(*args: str, cwd: Path) -> str:
    """Run git in a test repo and return stdout."""
    return subprocess.run(
        ["git", *args], cwd=cwd, capture_output=True, text=True, check=True
    ).stdout
