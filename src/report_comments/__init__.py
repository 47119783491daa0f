"""
report-comments package.

Placeholder expansion, pronoun tokenizing and message helpers for student
report-card comments.
"""

from .core.placeholders import (
    CopyResultSummary,
    PronounRecord,
    ReplacePronounsResult,
    ReplacementCount,
    StudentData,
    replace_placeholders,
    replace_pronouns_with_placeholders,
    validate_placeholders,
)
from .core.copy_messages import format_success_message

__version__ = "0.1.0"

__all__ = [
    "CopyResultSummary",
    "PronounRecord",
    "ReplacePronounsResult",
    "ReplacementCount",
    "StudentData",
    "format_success_message",
    "replace_placeholders",
    "replace_pronouns_with_placeholders",
    "validate_placeholders",
]
