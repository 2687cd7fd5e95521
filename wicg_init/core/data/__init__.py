"""
Bundled data — the template files every new project starts from.

Templates use ``{{placeholder}}`` markers named after the answer keys
(``projectName``, ``userName``, ``affiliationURL`` ...).
"""

from __future__ import annotations

from pathlib import Path

_DATA_DIR = Path(__file__).parent

TEMPLATES_DIR = _DATA_DIR / "templates"
