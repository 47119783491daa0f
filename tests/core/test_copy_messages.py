from __future__ import annotations

import pytest

from report_comments.core.copy_messages import format_success_message, pluralize
from report_comments.core.placeholders.models import CopyResultSummary


def test_append_mode_singular_comment() -> None:
    message = format_success_message(CopyResultSummary(success_count=1, duplicate_count=0, overwrite=False), "X")

    assert "1 comment to X" in message
    assert "1 comments" not in message
    assert "duplicate" not in message


def test_append_mode_with_duplicates() -> None:
    single = format_success_message({"successCount": 3, "duplicateCount": 1, "overwrite": False}, "X")
    several = format_success_message({"successCount": 3, "duplicateCount": 2, "overwrite": False}, "Spanish 102")

    assert "1 duplicate was skipped" in single
    assert several == (
        "Successfully copied 3 comments to Spanish 102. 2 duplicates were skipped (already existed)."
    )


def test_overwrite_mode_never_mentions_duplicates() -> None:
    message = format_success_message({"successCount": 5, "duplicateCount": 4, "overwrite": True}, "Math 101")

    assert message == "Successfully replaced all comments in Math 101. Copied 5 comments."
    assert "duplicate" not in message


def test_overwrite_mode_singular() -> None:
    message = format_success_message({"successCount": 1, "duplicateCount": 0, "overwrite": True}, "X")

    assert message.endswith("Copied 1 comment.")


def test_zero_comments_is_plural() -> None:
    message = format_success_message({"successCount": 0, "duplicateCount": 0, "overwrite": False}, "X")

    assert message == "Successfully copied 0 comments to X."


def test_target_name_is_inserted_verbatim() -> None:
    target = "Mr. O'Neil's Art & Design <Period 3> " + "x" * 200

    message = format_success_message({"successCount": 2, "duplicateCount": 0, "overwrite": False}, target)

    assert f"to {target}." in message


def test_snake_case_mapping_is_accepted() -> None:
    message = format_success_message({"success_count": 2, "duplicate_count": 0, "overwrite": False}, "X")

    assert message == "Successfully copied 2 comments to X."


@pytest.mark.parametrize(
    ("count", "expected"),
    [(0, "comments"), (1, "comment"), (2, "comments"), (-1, "comments")],
)
def test_pluralize(count: int, expected: str) -> None:
    assert pluralize(count, "comment") == expected


def test_pluralize_irregular_form() -> None:
    assert pluralize(2, "duplicate was", "duplicates were") == "duplicates were"
