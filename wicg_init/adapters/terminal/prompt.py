"""
Prompt adapter — asks the user one question at a time.

The collection pipeline only sees ``Prompter.ask``.  The click-backed
implementation turns an aborted prompt (Ctrl-C, closed stdin) into
``UserCanceled`` so the whole run stops before touching git or disk.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

import click

# Marker shown before every question
PROMPT_MARKER = " 👉 "


class UserCanceled(Exception):
    """The user aborted a prompt."""

    def __init__(self, message: str = "User canceled."):
        super().__init__(message)


@dataclass(frozen=True)
class Question:
    """A single prompt.

    Attributes:
        key:         Answer field this question fills (e.g. ``userName``).
        description: Text shown to the user.
        default:     Value used when the user just presses enter.
    """

    key: str
    description: str
    default: str = ""


class Prompter(ABC):
    """Something that can answer questions."""

    @abstractmethod
    def ask(self, question: Question) -> str:
        """Return the raw answer. Raises UserCanceled on abort."""


class ClickPrompter(Prompter):
    """Interactive prompter on top of ``click.prompt``."""

    def ask(self, question: Question) -> str:
        try:
            return click.prompt(
                f"{PROMPT_MARKER}{question.description}",
                default=question.default,
                show_default=bool(question.default),
                prompt_suffix=" ",
            )
        except click.Abort as e:
            raise UserCanceled() from e
