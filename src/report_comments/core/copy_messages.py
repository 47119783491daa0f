"""User-facing messages for bulk comment copy results."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from .placeholders.models import CopyResultSummary


def pluralize(count: int, singular: str, plural: Optional[str] = None) -> str:
    """Return ``singular`` when ``count`` is exactly 1, otherwise the plural form."""

    if count == 1:
        return singular
    return plural if plural is not None else f"{singular}s"


def format_success_message(
    result: Union[CopyResultSummary, Mapping[str, Any]],
    target_name: str,
) -> str:
    """Describe a finished copy into ``target_name``.

    Overwrite mode never mentions duplicates. Append mode adds a duplicate
    clause only when something was skipped. ``target_name`` is display text and
    is inserted verbatim.
    """

    summary = CopyResultSummary.coerce(result)
    copied = f"{summary.success_count} {pluralize(summary.success_count, 'comment')}"

    if summary.overwrite:
        return f"Successfully replaced all comments in {target_name}. Copied {copied}."

    message = f"Successfully copied {copied} to {target_name}."
    if summary.duplicate_count == 0:
        return message

    skipped = pluralize(summary.duplicate_count, "duplicate was", "duplicates were")
    return f"{message} {summary.duplicate_count} {skipped} skipped (already existed)."


__all__ = ["format_success_message", "pluralize"]
