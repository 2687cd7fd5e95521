"""
Template file models — what goes in and what came out of materialization.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict


class TemplateFile(BaseModel):
    """A template read from the template directory.

    Attributes:
        source:      Path of the template file (read-only input).
        destination: Where the populated file goes.
        content:     Raw template text.
    """

    model_config = ConfigDict(frozen=True)

    source: Path
    destination: Path
    content: str

    @property
    def name(self) -> str:
        return self.source.name


class WriteOutcome(BaseModel):
    """Result of materializing one template.

    Attributes:
        name:          Basename of the destination file.
        status:        written, skipped (already exists) or failed.
        bytes_written: Size of the written file (0 unless written).
        reason:        Why it was skipped or what made it fail.
    """

    name: str
    status: Literal["written", "skipped", "failed"]
    bytes_written: int = 0
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.status == "written"

    @classmethod
    def written(cls, name: str, bytes_written: int) -> WriteOutcome:
        return cls(name=name, status="written", bytes_written=bytes_written)

    @classmethod
    def skipped(cls, name: str, reason: str = "already-exists") -> WriteOutcome:
        return cls(name=name, status="skipped", reason=reason)

    @classmethod
    def failed(cls, name: str, reason: str) -> WriteOutcome:
        return cls(name=name, status="failed", reason=reason)
