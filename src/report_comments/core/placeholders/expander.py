"""Expand ``<first name>``-style tokens in comment templates with student data."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Optional, Union

from .models import StudentData

FIRST_NAME_TOKEN = "<first name>"
LAST_NAME_TOKEN = "<last name>"
GRADE_TOKEN = "<grade>"
PRONOUN_TOKEN = "<pronoun>"
POSSESSIVE_PRONOUN_TOKEN = "<possessive pronoun>"

SENTENCE_TERMINATORS = frozenset(".!?")


def _is_valid_string(value: object) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _is_valid_grade(value: object) -> bool:
    # 0 is a valid grade
    return value is not None


def format_grade(grade: Union[int, float]) -> str:
    """Render a numeric grade the way it is shown to teachers (``92.0`` -> ``"92"``)."""

    if isinstance(grade, float):
        if math.isnan(grade):
            return "NaN"
        if math.isinf(grade):
            return "Infinity" if grade > 0 else "-Infinity"
        if grade.is_integer():
            return str(int(grade))
    return str(grade)


def is_sentence_start(text: str, index: int) -> bool:
    """Return ``True`` if ``index`` begins a sentence in ``text``.

    Position 0 is always a sentence start. Otherwise whitespace before
    ``index`` is skipped and the nearest remaining character must be one of
    ``.``, ``!`` or ``?``. No abbreviation or quotation handling.
    """

    if index <= 0:
        return True
    position = index - 1
    while position >= 0 and text[position].isspace():
        position -= 1
    if position < 0:
        # only whitespace precedes the match
        return False
    return text[position] in SENTENCE_TERMINATORS


def capitalize_first(value: str) -> str:
    """Uppercase the first character of ``value`` and leave the rest untouched."""

    if not value:
        return value
    return value[0].upper() + value[1:]


class TemplateSentenceStarts:
    """Sentence-start flags for the pronoun tokens written in a template.

    Flags are taken from the template as the author wrote it and follow each
    token as earlier passes grow or shrink the text around it. Tokens that
    only appear because a substituted value spelled them fall back to the
    text being rewritten.
    """

    def __init__(self, template: str, patterns: Iterable[re.Pattern[str]]):
        self._flags: dict[int, bool] = {}
        for pattern in patterns:
            for match in pattern.finditer(template):
                self._flags[match.start()] = is_sentence_start(template, match.start())

    def at(self, text: str, index: int) -> bool:
        flag = self._flags.get(index)
        if flag is None:
            return is_sentence_start(text, index)
        return flag

    def shift(self, edits: list[tuple[int, int, int]]) -> None:
        """Move tracked offsets past ``(start, old_length, new_length)`` edits of one pass."""

        if not edits:
            return
        shifted: dict[int, bool] = {}
        for position, flag in self._flags.items():
            delta = sum(new - old for start, old, new in edits if start < position)
            shifted[position + delta] = flag
        self._flags = shifted


@dataclass(frozen=True)
class PlaceholderHandler:
    """One token kind: how to find it, where its value comes from, when it applies."""

    token: str
    pattern: re.Pattern[str]
    accessor: Callable[[StudentData], Any]
    is_valid: Callable[[Any], bool]
    render: Callable[[Any], str] = str
    capitalize_at_sentence_start: bool = False

    def apply(
        self,
        text: str,
        student: StudentData,
        sentence_starts: Optional[TemplateSentenceStarts] = None,
    ) -> str:
        value = self.accessor(student)
        if not self.is_valid(value):
            return text
        rendered = self.render(value)
        edits: list[tuple[int, int, int]] = []

        # callable replacement so backslashes in names stay literal
        def _replace(match: re.Match[str]) -> str:
            replacement = rendered
            if self.capitalize_at_sentence_start:
                if sentence_starts is not None:
                    at_start = sentence_starts.at(match.string, match.start())
                else:
                    at_start = is_sentence_start(match.string, match.start())
                if at_start:
                    replacement = capitalize_first(rendered)
            edits.append((match.start(), len(match.group(0)), len(replacement)))
            return replacement

        result = self.pattern.sub(_replace, text)
        if sentence_starts is not None:
            sentence_starts.shift(edits)
        return result


def _token_pattern(token: str) -> re.Pattern[str]:
    return re.compile(re.escape(token), re.IGNORECASE)


PLACEHOLDER_HANDLERS: tuple[PlaceholderHandler, ...] = (
    PlaceholderHandler(
        token=FIRST_NAME_TOKEN,
        pattern=_token_pattern(FIRST_NAME_TOKEN),
        accessor=lambda student: student.first_name,
        is_valid=_is_valid_string,
    ),
    PlaceholderHandler(
        token=LAST_NAME_TOKEN,
        pattern=_token_pattern(LAST_NAME_TOKEN),
        accessor=lambda student: student.last_name,
        is_valid=_is_valid_string,
    ),
    PlaceholderHandler(
        token=GRADE_TOKEN,
        pattern=_token_pattern(GRADE_TOKEN),
        accessor=lambda student: student.grade,
        is_valid=_is_valid_grade,
        render=format_grade,
    ),
    PlaceholderHandler(
        token=PRONOUN_TOKEN,
        pattern=_token_pattern(PRONOUN_TOKEN),
        accessor=lambda student: student.pronoun,
        is_valid=_is_valid_string,
        capitalize_at_sentence_start=True,
    ),
    PlaceholderHandler(
        token=POSSESSIVE_PRONOUN_TOKEN,
        pattern=_token_pattern(POSSESSIVE_PRONOUN_TOKEN),
        accessor=lambda student: student.possessive_pronoun,
        is_valid=_is_valid_string,
        capitalize_at_sentence_start=True,
    ),
)

SUPPORTED_TOKENS: tuple[str, ...] = tuple(handler.token for handler in PLACEHOLDER_HANDLERS)


def replace_placeholders(
    text: str,
    student_data: Union[StudentData, Mapping[str, Any], None],
) -> str:
    """Replace the supported placeholders in ``text`` with ``student_data`` values.

    Tokens whose value is missing or blank are left verbatim, as are unknown
    ``<...>`` tokens. Handlers run in a fixed order over the accumulating
    result, so a substituted value that spells a later token is expanded too.
    Pronoun capitalization is decided by where each token sits in ``text``
    itself, not by the values substituted before it.
    """

    student = StudentData.coerce(student_data)
    sentence_starts = TemplateSentenceStarts(
        text,
        (handler.pattern for handler in PLACEHOLDER_HANDLERS if handler.capitalize_at_sentence_start),
    )
    result = text
    for handler in PLACEHOLDER_HANDLERS:
        result = handler.apply(result, student, sentence_starts)
    return result


def expected_value(token: str, student_data: Union[StudentData, Mapping[str, Any], None]) -> Optional[str]:
    """Return the text ``token`` would expand to mid-sentence, or ``None`` if it stays verbatim."""

    student = StudentData.coerce(student_data)
    for handler in PLACEHOLDER_HANDLERS:
        if handler.token == token.lower():
            value = handler.accessor(student)
            return handler.render(value) if handler.is_valid(value) else None
    return None


__all__ = [
    "FIRST_NAME_TOKEN",
    "GRADE_TOKEN",
    "LAST_NAME_TOKEN",
    "PLACEHOLDER_HANDLERS",
    "POSSESSIVE_PRONOUN_TOKEN",
    "PRONOUN_TOKEN",
    "PlaceholderHandler",
    "SUPPORTED_TOKENS",
    "TemplateSentenceStarts",
    "capitalize_first",
    "expected_value",
    "format_grade",
    "is_sentence_start",
    "replace_placeholders",
]
