"""
Diagnostics collector — warnings and errors returned alongside results.

Operations that can degrade without failing (a template with a
placeholder nobody answered, a file that could not be written) record
what happened here instead of printing.  The caller decides how to show
them; entries are also logged at DEBUG so ``--debug`` runs keep a trace.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal

logger = logging.getLogger(__name__)

Level = Literal["info", "warning", "error"]


@dataclass(frozen=True)
class Diagnostic:
    """One recorded event."""

    level: Level
    message: str
    token: str | None = None
    source: str | None = None

    def to_dict(self) -> dict:
        return {
            "level": self.level,
            "message": self.message,
            "token": self.token,
            "source": self.source,
        }


@dataclass
class Diagnostics:
    """Ordered collection of diagnostics for one operation."""

    entries: list[Diagnostic] = field(default_factory=list)

    def add(
        self,
        level: Level,
        message: str,
        *,
        token: str | None = None,
        source: str | None = None,
        log: logging.Logger | None = None,
    ) -> Diagnostic:
        entry = Diagnostic(level=level, message=message, token=token, source=source)
        self.entries.append(entry)
        (log or logger).debug("%s: %s", level, message)
        return entry

    def info(self, message: str, **kwargs) -> Diagnostic:
        return self.add("info", message, **kwargs)

    def warning(self, message: str, **kwargs) -> Diagnostic:
        return self.add("warning", message, **kwargs)

    def error(self, message: str, **kwargs) -> Diagnostic:
        return self.add("error", message, **kwargs)

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.entries if d.level == "warning"]

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.entries if d.level == "error"]

    def for_token(self, token: str) -> list[Diagnostic]:
        return [d for d in self.entries if d.token == token]

    def __len__(self) -> int:
        return len(self.entries)

    def to_list(self) -> list[dict]:
        return [d.to_dict() for d in self.entries]
