"""
Tests for CLI commands — help, version, and the interactive init flow.
"""

import json
from pathlib import Path

from click.testing import CliRunner

from conftest import git, requires_git
from wicg_init.main import cli


class TestCLIGlobal:
    """Tests for global CLI behavior."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "scaffold a new incubation project" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_no_arguments_prints_help_and_example(self):
        runner = CliRunner()
        result = runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "Usage:" in result.output
        assert "init" in result.output
        assert "Example:" in result.output
        assert "About this WICG project" not in result.output

    def test_init_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["init", "--help"])
        assert result.exit_code == 0
        assert "NAME" in result.output

    def test_init_without_git_binary(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("PATH", str(tmp_path))
        monkeypatch.delenv("WICG_INIT_TEMPLATES", raising=False)
        runner = CliRunner()
        result = runner.invoke(cli, ["init"], input="")
        assert result.exit_code == 1
        assert "git is not installed" in result.output
        assert "About this WICG project" not in result.output
        assert list(tmp_path.iterdir()) == []


@requires_git
class TestInitCommand:
    """Runs the real flow: click prompts, git subprocesses, files on disk."""

    def _invoke(self, args: list[str], input: str):
        runner = CliRunner()
        return runner.invoke(cli, args, input=input)

    def test_fresh_directory(self, tmp_path: Path, git_env, monkeypatch):
        work = tmp_path / "widget"
        work.mkdir()
        monkeypatch.chdir(work)

        # repo name, user name, email, affiliation, affiliation URL, branch
        result = self._invoke(["init", "The Widget API"], "\nAda\nada@example.org\n\n\n\n")

        assert result.exit_code == 0, result.output
        assert "Performing git tasks" in result.output
        assert "Created README.md" in result.output
        assert 'Committed changes to "gh-pages" branch.' in result.output

        readme = (work / "README.md").read_text(encoding="utf-8")
        assert readme.startswith("# The Widget API")
        assert "Ada (ada@example.org), Example.org" in readme

        assert git("rev-parse", "--abbrev-ref", "HEAD", cwd=work).strip() == "gh-pages"
        assert git("log", "--format=%s", cwd=work).strip() == "feat: add WICG files."
        committed = git("show", "--name-only", "--pretty=format:", "HEAD", cwd=work).split()
        assert "README.md" in committed
        assert "index.html" in committed

    def test_existing_files_are_kept_and_not_committed(self, tmp_path: Path, git_env, monkeypatch):
        work = tmp_path / "gadget"
        work.mkdir()
        monkeypatch.chdir(work)
        (work / "README.md").write_text("my own readme")

        result = self._invoke(["init", "The Gadget API"], "\nAda\n\n\n\n")

        assert result.exit_code == 0, result.output
        assert "Skipping README.md (already exists)" in result.output
        assert (work / "README.md").read_text() == "my own readme"
        committed = git("show", "--name-only", "--pretty=format:", "HEAD", cwd=work).split()
        assert "README.md" not in committed
        assert "index.html" in committed

    def test_rerun_is_a_no_op(self, tmp_path: Path, git_env, monkeypatch):
        work = tmp_path / "widget"
        work.mkdir()
        monkeypatch.chdir(work)
        first = self._invoke(["init", "The Widget API"], "\nAda\n\n\n\n")
        assert first.exit_code == 0, first.output

        # inside a repo now: no repo-name question
        second = self._invoke(["init", "The Widget API"], "Ada\n\n\n\n")
        assert second.exit_code == 0, second.output
        assert "Committed changes" not in second.output
        assert git("rev-list", "--count", "HEAD", cwd=work).strip() == "1"

    def test_cancel_leaves_directory_untouched(self, tmp_path: Path, git_env, monkeypatch):
        work = tmp_path / "widget"
        work.mkdir()
        monkeypatch.chdir(work)

        result = self._invoke(["init"], "widget\n")

        assert result.exit_code == 1
        assert "User canceled." in result.output
        assert list(work.iterdir()) == []

    def test_json_output(self, tmp_path: Path, git_env, monkeypatch):
        work = tmp_path / "widget"
        work.mkdir()
        monkeypatch.chdir(work)

        result = self._invoke(["-q", "init", "The Widget API", "--json"], "\nAda\n\n\n\n")

        assert result.exit_code == 0, result.output
        payload = result.output[result.output.index("{\n"):]
        data = json.loads(payload)
        assert data["committed"] is True
        assert data["answers"]["repoName"] == "widget"
        assert "README.md" in data["files"]["written"]

    def test_bad_config_file(self, tmp_path: Path, git_env, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = tmp_path / "bad.yml"
        config.write_text("main_branch: [unclosed\n")
        result = self._invoke(["--config", str(config), "init"], "")
        assert result.exit_code == 1
        assert "Invalid YAML" in result.output
