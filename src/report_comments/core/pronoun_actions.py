"""The "replace pronouns" editor action and its status messages."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal, Optional

from .placeholders.pronouns import RosterEntry, replace_pronouns_with_placeholders

LOGGER = logging.getLogger(__name__)

MessageKind = Literal["success", "error", "info"]

EMPTY_TEXT_MESSAGE = "Please enter text first"
NO_PRONOUNS_MESSAGE = "No pronouns found in text"
FAILURE_MESSAGE = "Failed to replace pronouns. Please try again."


@dataclass(frozen=True, slots=True)
class StatusMessage:
    kind: MessageKind
    text: str


@dataclass(frozen=True, slots=True)
class PronounReplacementOutcome:
    """New editor text plus the message to show next to it."""

    text: str
    message: StatusMessage


def replace_pronouns_in_comment(
    text: str,
    pronouns: Optional[Iterable[RosterEntry]],
) -> PronounReplacementOutcome:
    """Run the pronoun tokenizer over editor text and summarise the result."""

    if not isinstance(text, str) or not text.strip():
        return PronounReplacementOutcome(text, StatusMessage("info", EMPTY_TEXT_MESSAGE))

    try:
        result = replace_pronouns_with_placeholders(text, pronouns)
    except Exception:
        LOGGER.exception("Pronoun replacement failed")
        return PronounReplacementOutcome(text, StatusMessage("error", FAILURE_MESSAGE))

    counts = result.replacement_count
    if counts.total == 0:
        return PronounReplacementOutcome(result.replaced_text, StatusMessage("info", NO_PRONOUNS_MESSAGE))

    summary = (
        f"Replaced {counts.total} pronouns "
        f"({counts.pronoun} subject, {counts.possessive_pronoun} possessive)"
    )
    return PronounReplacementOutcome(result.replaced_text, StatusMessage("success", summary))


__all__ = [
    "EMPTY_TEXT_MESSAGE",
    "FAILURE_MESSAGE",
    "NO_PRONOUNS_MESSAGE",
    "PronounReplacementOutcome",
    "StatusMessage",
    "replace_pronouns_in_comment",
]
