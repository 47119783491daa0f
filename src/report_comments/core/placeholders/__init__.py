"""Placeholder expansion, pronoun tokenizing and template validation."""

from .models import (
    CopyResultSummary,
    InvalidRecordError,
    PronounRecord,
    ReplacePronounsResult,
    ReplacementCount,
    StudentData,
)
from .expander import (
    SUPPORTED_TOKENS,
    capitalize_first,
    is_sentence_start,
    replace_placeholders,
)
from .pronouns import build_pronoun_pattern, replace_pronouns_with_placeholders
from .validator import validate_placeholders
from .analyzer import PlaceholderAnalysis, analyse_template, find_placeholders

__all__ = [
    "CopyResultSummary",
    "InvalidRecordError",
    "PronounRecord",
    "ReplacePronounsResult",
    "ReplacementCount",
    "StudentData",
    "SUPPORTED_TOKENS",
    "capitalize_first",
    "is_sentence_start",
    "replace_placeholders",
    "build_pronoun_pattern",
    "replace_pronouns_with_placeholders",
    "validate_placeholders",
    "PlaceholderAnalysis",
    "analyse_template",
    "find_placeholders",
]
