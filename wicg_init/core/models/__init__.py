"""
Domain models — Pydantic types for the init flow.

All models are re-exported here for convenient access:

    from wicg_init.core.models import AnswerRecord, TemplateFile, WriteOutcome
"""

from wicg_init.core.models.answers import AnswerRecord
from wicg_init.core.models.template import TemplateFile, WriteOutcome

__all__ = [
    "AnswerRecord",
    "TemplateFile",
    "WriteOutcome",
]
