"""
Placeholder handling — find ``{{token}}`` markers and resolve them.

Two explicit phases:

    tokens = extract_placeholders(text)                       # what is asked for
    pairs = resolve_placeholders(tokens, values, "README.md")  # what it becomes
    text = apply_substitutions(text, pairs)

There is no escaping, nesting or logic — a token is ``{{`` + word
characters + ``}}``, matched case-sensitively against the answer keys.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

from wicg_init.core.observability.diagnostics import Diagnostics

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")


def extract_placeholders(text: str) -> set[str]:
    """Return the distinct token names found in ``text``.

    Absence of placeholders is normal: empty text gives an empty set.
    """
    if not text:
        return set()
    return set(PLACEHOLDER_PATTERN.findall(text))


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def resolve_placeholders(
    tokens: Iterable[str],
    values: Mapping[str, Any],
    source_label: str,
    diagnostics: Diagnostics | None = None,
) -> list[tuple[str, str]]:
    """Pair each token with the value it should be replaced by.

    Missing or empty values fall back to the token name itself, so the
    gap stays visible in the generated file, and a warning naming the
    token and ``source_label`` is recorded.

    Returns:
        ``(token, value)`` pairs sorted by token.
    """
    pairs: list[tuple[str, str]] = []
    for token in sorted(set(tokens)):
        value = values.get(token)
        if value:
            pairs.append((token, _render(value)))
            continue

        message = f"no match for `{token}` in template {source_label}"
        if diagnostics is not None:
            diagnostics.warning(message, token=token, source=source_label, log=logger)
        else:
            logger.warning(message)
        pairs.append((token, token))
    return pairs


def apply_substitutions(text: str, substitutions: Iterable[tuple[str, str]]) -> str:
    """Replace every ``{{token}}`` occurrence with its value."""
    for token, value in substitutions:
        text = text.replace("{{" + token + "}}", value)
    return text


def populate(
    text: str,
    values: Mapping[str, Any],
    source_label: str,
    diagnostics: Diagnostics | None = None,
) -> str:
    """Extract, resolve and apply in one go."""
    tokens = extract_placeholders(text)
    return apply_substitutions(
        text, resolve_placeholders(tokens, values, source_label, diagnostics)
    )
