"""
Tests for settings loading — discovery, YAML parsing, env overrides.
"""

import textwrap
from pathlib import Path

import pytest

from wicg_init.core.config.loader import (
    CONFIG_FILE,
    ConfigError,
    InitSettings,
    find_config_file,
    load_settings,
)
from wicg_init.core.data import TEMPLATES_DIR


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("WICG_INIT_TEMPLATES", raising=False)
    monkeypatch.delenv("WICG_INIT_BRANCH", raising=False)


class TestFindConfigFile:
    def test_in_start_dir(self, tmp_path: Path):
        (tmp_path / CONFIG_FILE).write_text("main_branch: main\n")
        assert find_config_file(tmp_path) == (tmp_path / CONFIG_FILE).resolve()

    def test_walks_up(self, tmp_path: Path):
        (tmp_path / CONFIG_FILE).write_text("main_branch: main\n")
        deep = tmp_path / "a" / "b"
        deep.mkdir(parents=True)
        assert find_config_file(deep) == (tmp_path / CONFIG_FILE).resolve()


class TestLoadSettings:
    def test_defaults(self, tmp_path: Path):
        settings = InitSettings()
        assert settings.templates_dir == TEMPLATES_DIR
        assert settings.main_branch == "gh-pages"
        assert settings.commit_message == "feat: add WICG files."

    def test_from_file(self, tmp_path: Path):
        tdir = tmp_path / "tpl"
        tdir.mkdir()
        config = tmp_path / CONFIG_FILE
        config.write_text(textwrap.dedent("""\
            templates_dir: tpl
            main_branch: main
            commit_message: "chore: scaffold"
        """))
        settings = load_settings(config)
        assert settings.templates_dir == tdir.resolve()
        assert settings.main_branch == "main"
        assert settings.commit_message == "chore: scaffold"

    def test_discovered_from_start_dir(self, tmp_path: Path):
        (tmp_path / CONFIG_FILE).write_text("main_branch: trunk\n")
        assert load_settings(start_dir=tmp_path).main_branch == "trunk"

    def test_empty_file(self, tmp_path: Path):
        config = tmp_path / CONFIG_FILE
        config.write_text("")
        assert load_settings(config).main_branch == "gh-pages"

    def test_env_overrides(self, tmp_path: Path, monkeypatch):
        (tmp_path / CONFIG_FILE).write_text("main_branch: trunk\n")
        monkeypatch.setenv("WICG_INIT_BRANCH", "main")
        monkeypatch.setenv("WICG_INIT_TEMPLATES", str(tmp_path))
        settings = load_settings(start_dir=tmp_path)
        assert settings.main_branch == "main"
        assert settings.templates_dir == tmp_path

    def test_missing_explicit_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_settings(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        config = tmp_path / CONFIG_FILE
        config.write_text("main_branch: [oops\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_settings(config)

    def test_not_a_mapping(self, tmp_path: Path):
        config = tmp_path / CONFIG_FILE
        config.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_settings(config)

    def test_unknown_key(self, tmp_path: Path):
        config = tmp_path / CONFIG_FILE
        config.write_text("branch: main\n")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_settings(config)

    def test_missing_templates_dir(self, tmp_path: Path):
        config = tmp_path / CONFIG_FILE
        config.write_text("templates_dir: nowhere\n")
        with pytest.raises(ConfigError, match="Templates directory not found"):
            load_settings(config)
