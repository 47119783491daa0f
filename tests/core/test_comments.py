from __future__ import annotations

import pytest

from report_comments.config.settings import CommentSettings
from report_comments.core.comments import (
    OutcomeComment,
    PersonalizedComment,
    filter_personalized_comments_by_rating,
    find_duplicate_comment,
    get_normalized_rating,
    get_rating_emoji,
    get_rating_label,
    is_duplicate_comment,
    sort_outcome_comments_by_range,
    sort_personalized_comments_by_rating,
    validate_comment_length,
)


def _personalized(comment: str, rating: float | None) -> PersonalizedComment:
    return PersonalizedComment(id=comment, comment=comment, rating=rating)


def test_duplicate_detection_trims_but_respects_case() -> None:
    assert is_duplicate_comment("  Great work!  ", "Great work!")
    assert not is_duplicate_comment("great work!", "Great work!")
    assert not is_duplicate_comment("Great  work!", "Great work!")


def test_find_duplicate_comment_uses_predicate_and_default_text() -> None:
    existing = [
        OutcomeComment(id=1, comment="Solid effort", upper_range=80, lower_range=70, subject_id=1),
        OutcomeComment(id=2, comment="Solid effort", upper_range=90, lower_range=80, subject_id=2),
    ]

    match = find_duplicate_comment(" Solid effort ", existing, predicate=lambda c: c.subject_id == 2)

    assert match is existing[1]
    assert find_duplicate_comment("Other", existing) is None


def test_find_duplicate_comment_reads_mappings_and_custom_getter() -> None:
    rows = [{"text": "Keeps trying"}, {"body": "Reads daily"}]

    assert find_duplicate_comment("Keeps trying", rows) is rows[0]
    assert find_duplicate_comment("Reads daily", rows, get_text=lambda row: row.get("body", "")) is rows[1]


def test_sort_outcome_comments_by_range() -> None:
    comments = [
        OutcomeComment(id=1, comment="a", upper_range=70, lower_range=60, created_at="2024-01-01T00:00:00Z"),
        OutcomeComment(id=2, comment="b", upper_range=100, lower_range=90, created_at="2024-01-01T00:00:00Z"),
        OutcomeComment(id=3, comment="c", upper_range=100, lower_range=95, created_at="2024-01-01T00:00:00Z"),
        OutcomeComment(id=4, comment="d", upper_range=70, lower_range=60, created_at="2024-02-01T00:00:00Z"),
    ]

    ordered = sort_outcome_comments_by_range(comments)

    assert [c.id for c in ordered] == [3, 2, 4, 1]
    assert [c.id for c in comments] == [1, 2, 3, 4]


def test_outcome_comment_from_api_payload() -> None:
    comment = OutcomeComment.from_dict(
        {"id": 5, "comment": "Meets outcomes", "upperRange": 85, "lowerRange": 75, "subjectId": 9}
    )

    assert comment.upper_range == 85
    assert comment.lower_range == 75
    assert comment.subject_id == 9


def test_normalized_rating_defaults_to_neutral() -> None:
    assert get_normalized_rating(_personalized("x", None)) == 3
    assert get_normalized_rating(_personalized("x", 0)) == 0
    assert get_normalized_rating(_personalized("x", 5)) == 5


@pytest.mark.parametrize(
    ("rating", "emoji", "label"),
    [
        (1, "😢", "Very Negative"),
        (2.5, "😐", "Neutral"),
        (3.5, "🙂", "Positive"),
        (4.8, "😊", "Very Positive"),
        (-1, "😐", "Neutral"),
        (6, "😐", "Neutral"),
    ],
)
def test_rating_emoji_and_label(rating: float, emoji: str, label: str) -> None:
    assert get_rating_emoji(rating) == emoji
    assert get_rating_label(rating) == label


def test_sort_personalized_comments_by_rating() -> None:
    comments = [
        _personalized("banana", 3),
        _personalized("Apple", 5),
        _personalized("cherry", None),
        _personalized("apricot", 3),
    ]

    ordered = sort_personalized_comments_by_rating(comments)

    assert [c.comment for c in ordered] == ["Apple", "apricot", "banana", "cherry"]


def test_filter_personalized_comments_by_rating() -> None:
    comments = [
        PersonalizedComment.from_dict({"id": "1", "comment": "Excellent", "rating": 5}),
        PersonalizedComment.from_dict({"id": "2", "comment": "Good", "rating": 4}),
        PersonalizedComment.from_dict({"id": "3", "comment": "Outstanding", "rating": 4.6}),
    ]

    assert [c.id for c in filter_personalized_comments_by_rating(comments, 5)] == ["1", "3"]
    assert [c.id for c in filter_personalized_comments_by_rating(comments, 0)] == ["1", "3", "2"]
    assert filter_personalized_comments_by_rating(comments, 1) == []


def test_validate_comment_length_uses_defaults() -> None:
    assert validate_comment_length("too short") == "Comment must be at least 10 characters"
    assert validate_comment_length("   padded     ") == "Comment must be at least 10 characters"
    assert validate_comment_length("long enough text") is None
    assert validate_comment_length("x" * 1001) == "Comment cannot exceed 1000 characters"


def test_final_comments_only_check_maximum() -> None:
    assert validate_comment_length("", final=True) is None
    assert validate_comment_length("x" * 1001, final=True) == "Comment cannot exceed 1000 characters"


def test_validate_comment_length_honours_settings() -> None:
    settings = CommentSettings(min_comment_length=2, max_comment_length=5)

    assert validate_comment_length("ok", settings=settings) is None
    assert validate_comment_length("too long", settings=settings) == "Comment cannot exceed 5 characters"
