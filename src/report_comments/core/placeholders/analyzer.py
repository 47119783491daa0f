"""Placeholder usage analysis for comment templates."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Union

from .expander import SUPPORTED_TOKENS, expected_value
from .models import StudentData
from .validator import validate_placeholders

TOKEN_PATTERN = re.compile(r"<([a-zA-Z][a-zA-Z ]*)>")


def find_placeholders(text: str) -> set[str]:
    """Return the supported tokens referenced in ``text``, lowercased."""

    found = {f"<{match.group(1).lower()}>" for match in TOKEN_PATTERN.finditer(text or "")}
    return found & set(SUPPORTED_TOKENS)


def find_unknown_tokens(text: str) -> set[str]:
    """Return ``<word ...>`` tokens in ``text`` that are not supported placeholders."""

    supported = set(SUPPORTED_TOKENS)
    return {
        match.group(0)
        for match in TOKEN_PATTERN.finditer(text or "")
        if match.group(0).lower() not in supported
    }


@dataclass(slots=True)
class PlaceholderAnalysis:
    """Which placeholders a template uses and which the student data can fill."""

    used: set[str]
    satisfied: set[str]
    missing: set[str]
    unknown: set[str]
    warnings: tuple[str, ...]

    @property
    def is_complete(self) -> bool:
        return not self.missing and not self.warnings


def analyse_template(
    text: str,
    student_data: Union[StudentData, Mapping[str, Any], None] = None,
) -> PlaceholderAnalysis:
    """Inspect ``text`` and report placeholder usage against ``student_data``."""

    student = StudentData.coerce(student_data)
    used = find_placeholders(text)
    satisfied = {token for token in used if expected_value(token, student) is not None}

    return PlaceholderAnalysis(
        used=used,
        satisfied=satisfied,
        missing=used - satisfied,
        unknown=find_unknown_tokens(text),
        warnings=tuple(validate_placeholders(text or "")),
    )


__all__ = [
    "PlaceholderAnalysis",
    "analyse_template",
    "find_placeholders",
    "find_unknown_tokens",
]
