"""Advisory checks for malformed placeholder syntax."""

from __future__ import annotations

import re
from typing import List

# Only an unclosed token at the very end of the input counts, so templates
# being typed are not flagged for every partial tag. "<9" is a comparison.
UNCLOSED_PLACEHOLDER_RE = re.compile(r"<[a-zA-Z ][^>]*\Z")
EMPTY_PLACEHOLDER = "<>"

UNCLOSED_MESSAGE = "⚠️ Placeholder not closed. Example: <first name>"
EMPTY_MESSAGE = (
    "⚠️ Empty placeholder detected. Use: <first name>, <last name>, <grade>, "
    "<pronoun>, <possessive pronoun>"
)


def validate_placeholders(text: str) -> List[str]:
    """Return warning messages for malformed placeholders in ``text``.

    Each condition contributes at most one message: the unclosed check first,
    then the empty check. HTML-like tags and numeric comparisons are ignored.
    """

    warnings: List[str] = []
    if not text:
        return warnings

    if UNCLOSED_PLACEHOLDER_RE.search(text):
        warnings.append(UNCLOSED_MESSAGE)

    if EMPTY_PLACEHOLDER in text:
        warnings.append(EMPTY_MESSAGE)

    return warnings


__all__ = ["EMPTY_MESSAGE", "UNCLOSED_MESSAGE", "validate_placeholders"]
