"""
Template materialization — populate templates into the destination.

Never overwrites: a destination that already exists is skipped, which
makes re-running safe.  A file that cannot be read or written is
reported and skipped without stopping the rest of the batch.  The
returned ``written`` list is exactly what the caller should commit.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from wicg_init.core.models import AnswerRecord, TemplateFile, WriteOutcome
from wicg_init.core.observability.diagnostics import Diagnostics
from wicg_init.core.services.placeholders import populate

logger = logging.getLogger(__name__)


@dataclass
class MaterializeResult:
    """Outcome of one materialize pass."""

    outcomes: list[WriteOutcome] = field(default_factory=list)
    diagnostics: Diagnostics = field(default_factory=Diagnostics)

    @property
    def written(self) -> list[str]:
        """Basenames actually written, sorted."""
        return sorted(o.name for o in self.outcomes if o.status == "written")

    @property
    def skipped(self) -> list[str]:
        return sorted(o.name for o in self.outcomes if o.status == "skipped")

    @property
    def failed(self) -> list[str]:
        return sorted(o.name for o in self.outcomes if o.status == "failed")

    def to_dict(self) -> dict:
        return {
            "written": self.written,
            "skipped": self.skipped,
            "failed": self.failed,
            "outcomes": [o.model_dump() for o in self.outcomes],
            "diagnostics": self.diagnostics.to_list(),
        }


def list_templates(templates_dir: Path) -> list[Path]:
    """Regular files directly under ``templates_dir``, sorted by name."""
    return sorted(
        (p for p in templates_dir.iterdir() if p.is_file()),
        key=lambda p: p.name,
    )


def _write_exclusive(path: Path, payload: bytes) -> int:
    """Create ``path`` with ``payload``; raises FileExistsError if it appeared.

    A partially written file is removed before the error propagates.
    """
    f = open(path, "xb")
    try:
        with f:
            f.write(payload)
    except OSError:
        path.unlink(missing_ok=True)
        raise
    return len(payload)


def materialize_one(
    source: Path,
    destination_dir: Path,
    values: Mapping[str, Any],
    diagnostics: Diagnostics,
) -> WriteOutcome:
    """Populate a single template into ``destination_dir``."""
    destination = destination_dir / source.name
    name = destination.name

    if destination.exists():
        diagnostics.warning(f"Skipping {name} (already exists)", source=name, log=logger)
        return WriteOutcome.skipped(name)

    try:
        template = TemplateFile(
            source=source,
            destination=destination,
            content=source.read_text(encoding="utf-8"),
        )
    except (OSError, UnicodeDecodeError) as e:
        diagnostics.error(f"could not read template {source.name}: {e}", source=name, log=logger)
        return WriteOutcome.failed(name, str(e))

    data = populate(template.content, values, template.name, diagnostics)
    try:
        payload = data.encode("utf-8")
    except UnicodeEncodeError as e:
        # e.g. surrogate-escaped answers typed under a C locale
        diagnostics.error(f"could not encode {name}: {e}", source=name, log=logger)
        return WriteOutcome.failed(name, str(e))

    try:
        size = _write_exclusive(template.destination, payload)
    except FileExistsError:
        diagnostics.warning(f"Skipping {name} (already exists)", source=name, log=logger)
        return WriteOutcome.skipped(name)
    except OSError as e:
        diagnostics.error(f"could not create {name}: {e}", source=name, log=logger)
        return WriteOutcome.failed(name, str(e))

    logger.info("Created %s (%d bytes)", name, size)
    return WriteOutcome.written(name, size)


def materialize(
    templates_dir: Path,
    destination_dir: Path,
    answers: AnswerRecord | Mapping[str, Any],
    diagnostics: Diagnostics | None = None,
) -> MaterializeResult:
    """Populate every template in ``templates_dir`` into ``destination_dir``.

    Args:
        templates_dir: Directory of template files (not recursed into).
        destination_dir: Where populated files are created.
        answers: Values for placeholder substitution.
        diagnostics: Optional collector; a fresh one is used otherwise.

    Returns:
        MaterializeResult with one outcome per template.
    """
    result = MaterializeResult(
        diagnostics=diagnostics if diagnostics is not None else Diagnostics()
    )
    values = answers.as_template_values() if isinstance(answers, AnswerRecord) else answers

    for source in list_templates(templates_dir):
        result.outcomes.append(
            materialize_one(source, destination_dir, values, result.diagnostics)
        )

    logger.debug(
        "Materialized %d template(s): %d written, %d skipped, %d failed",
        len(result.outcomes),
        len(result.written),
        len(result.skipped),
        len(result.failed),
    )
    return result
