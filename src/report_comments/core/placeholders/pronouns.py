"""Rewrite literal pronouns in comment text into placeholder tokens."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Any, Mapping, Optional, Union

from .expander import POSSESSIVE_PRONOUN_TOKEN, PRONOUN_TOKEN
from .models import InvalidRecordError, PronounRecord, ReplacePronounsResult, ReplacementCount

LOGGER = logging.getLogger(__name__)

RosterEntry = Union[PronounRecord, Mapping[str, Any]]


def build_pronoun_pattern(value: str) -> re.Pattern[str]:
    """Return a case-insensitive, whole-word pattern matching ``value`` literally.

    ``value`` comes from user configuration, so it is escaped before being
    embedded; ``"a.b"`` matches only ``a.b`` and never ``aXb``.
    """

    return re.compile(rf"\b{re.escape(value)}\b", re.IGNORECASE)


def _as_record(entry: object) -> Optional[PronounRecord]:
    if isinstance(entry, PronounRecord):
        return entry
    try:
        return PronounRecord.from_dict(entry)  # type: ignore[arg-type]
    except InvalidRecordError:
        LOGGER.debug("Skipping roster entry of type %s", type(entry).__name__)
        return None


def _substitute(text: str, value: object, token: str) -> tuple[str, int]:
    if not isinstance(value, str) or not value:
        return text, 0
    return build_pronoun_pattern(value).subn(token, text)


def replace_pronouns_with_placeholders(
    text: str,
    pronouns: Optional[Iterable[RosterEntry]],
) -> ReplacePronounsResult:
    """Replace every configured pronoun in ``text`` with ``<pronoun>``/``<possessive pronoun>``.

    Records are applied one at a time in roster order, each pass working on the
    output of the previous one. Matching ignores case and respects word
    boundaries; the replacement is always the lowercase token.
    """

    count = ReplacementCount()
    if pronouns is None or isinstance(pronouns, (str, bytes, Mapping)) or not isinstance(pronouns, Iterable):
        if pronouns is not None:
            LOGGER.warning("Ignoring invalid pronoun roster of type %s", type(pronouns).__name__)
        return ReplacePronounsResult(replaced_text=text, replacement_count=count)

    result = text
    for entry in pronouns:
        record = _as_record(entry)
        if record is None:
            continue

        result, matched = _substitute(result, record.pronoun, PRONOUN_TOKEN)
        count.pronoun += matched

        result, matched = _substitute(result, record.possessive_pronoun, POSSESSIVE_PRONOUN_TOKEN)
        count.possessive_pronoun += matched

    LOGGER.debug(
        "Replaced %d subject and %d possessive pronouns",
        count.pronoun,
        count.possessive_pronoun,
    )
    return ReplacePronounsResult(replaced_text=result, replacement_count=count)


__all__ = ["build_pronoun_pattern", "replace_pronouns_with_placeholders"]
