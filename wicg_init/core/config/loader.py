"""
Configuration loader — reads .wicg-init.yml into InitSettings.

Configuration is optional: with no file and no environment overrides
the bundled templates, the ``gh-pages`` branch and the stock commit
message are used.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from wicg_init.core.data import TEMPLATES_DIR

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = ".wicg-init.yml"

ENV_TEMPLATES = "WICG_INIT_TEMPLATES"
ENV_BRANCH = "WICG_INIT_BRANCH"


class ConfigError(Exception):
    """Raised when the configuration file is invalid or unreadable."""


class InitSettings(BaseModel):
    """Tunable knobs of the init flow."""

    model_config = ConfigDict(extra="forbid")

    templates_dir: Path = TEMPLATES_DIR
    main_branch: str = "gh-pages"
    commit_message: str = "feat: add WICG files."
    affiliation_sample: str = "Monsters"
    git_timeout: int = Field(default=30, gt=0)


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Nearest .wicg-init.yml in ``start_dir`` (default: cwd) or an ancestor."""
    start = (start_dir or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        if (directory / CONFIG_FILE).is_file():
            return directory / CONFIG_FILE
    return None


def load_settings(path: Path | None = None, start_dir: Path | None = None) -> InitSettings:
    """Load settings from YAML (if any) and apply environment overrides.

    Args:
        path: Explicit config path. If None, searches upward from start_dir.
        start_dir: Where the upward search begins (default: cwd).

    Returns:
        Validated InitSettings.

    Raises:
        ConfigError: If an explicit file is missing or any file is invalid.
    """
    data: dict = {}

    if path is not None and not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    if path is None:
        path = find_config_file(start_dir)

    if path is not None:
        logger.debug("Loading settings from %s", path)
        data = _read_yaml(path)
        # Relative template dirs are relative to the config file
        tdir = data.get("templates_dir")
        if tdir and not Path(tdir).is_absolute():
            data["templates_dir"] = (path.parent / tdir).resolve()

    if os.environ.get(ENV_TEMPLATES):
        data["templates_dir"] = Path(os.environ[ENV_TEMPLATES]).expanduser()
    if os.environ.get(ENV_BRANCH):
        data["main_branch"] = os.environ[ENV_BRANCH]

    try:
        settings = InitSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    if not settings.templates_dir.is_dir():
        raise ConfigError(f"Templates directory not found: {settings.templates_dir}")

    return settings


def _read_yaml(path: Path) -> dict:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")
    return data
