"""Comment helpers: duplicate detection, ordering, ratings and length limits."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence, TypeVar

from report_comments.config.settings import CommentSettings

from .placeholders.models import _ensure_mapping, _lookup

T = TypeVar("T")

DEFAULT_RATING = 3

RATING_EMOJIS = {
    1: "😢",
    2: "😟",
    3: "😐",
    4: "🙂",
    5: "😊",
}

RATING_LABELS = {
    1: "Very Negative",
    2: "Negative",
    3: "Neutral",
    4: "Positive",
    5: "Very Positive",
}


@dataclass(slots=True)
class OutcomeComment:
    """A comment attached to a score range of a subject."""

    id: Any
    comment: str
    upper_range: float
    lower_range: float
    subject_id: Any = None
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "OutcomeComment":
        data = _ensure_mapping(payload, "OutcomeComment")
        return cls(
            id=_lookup(data, "id"),
            comment=str(_lookup(data, "comment", default="")),
            upper_range=_lookup(data, "upperRange", "upper_range", default=0),
            lower_range=_lookup(data, "lowerRange", "lower_range", default=0),
            subject_id=_lookup(data, "subjectId", "subject_id"),
            created_at=str(_lookup(data, "createdAt", "created_at", default="")),
            updated_at=str(_lookup(data, "updatedAt", "updated_at", default="")),
        )


@dataclass(slots=True)
class PersonalizedComment:
    """A free-form comment with an optional 1-5 rating."""

    id: Any
    comment: str
    subject_id: Any = None
    rating: Optional[float] = None
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "PersonalizedComment":
        data = _ensure_mapping(payload, "PersonalizedComment")
        return cls(
            id=_lookup(data, "id"),
            comment=str(_lookup(data, "comment", default="")),
            subject_id=_lookup(data, "subjectId", "subject_id"),
            rating=_lookup(data, "rating"),
            created_at=str(_lookup(data, "createdAt", "created_at", default="")),
            updated_at=str(_lookup(data, "updatedAt", "updated_at", default="")),
        )


# ---------------------------------------------------------------------------
# Duplicate detection
# ---------------------------------------------------------------------------


def is_duplicate_comment(new_comment: str, existing_comment: str) -> bool:
    """Exact, case-sensitive comparison after trimming surrounding whitespace."""

    return new_comment.strip() == existing_comment.strip()


def _default_text(comment: object) -> str:
    if isinstance(comment, Mapping):
        value = comment.get("comment", comment.get("text"))
    else:
        value = getattr(comment, "comment", None)
        if value is None:
            value = getattr(comment, "text", None)
    return value if isinstance(value, str) else ""


def find_duplicate_comment(
    new_comment_text: str,
    existing_comments: Iterable[T],
    *,
    predicate: Optional[Callable[[T], bool]] = None,
    get_text: Optional[Callable[[T], str]] = None,
) -> Optional[T]:
    """Return the first comment in ``existing_comments`` duplicating the new text."""

    text_of = get_text or _default_text
    for comment in existing_comments:
        if predicate is not None and not predicate(comment):
            continue
        if is_duplicate_comment(new_comment_text, text_of(comment)):
            return comment
    return None


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


def sort_outcome_comments_by_range(comments: Sequence[OutcomeComment]) -> List[OutcomeComment]:
    """Highest score range first: upper bound, then lower bound, then newest."""

    return sorted(
        comments,
        key=lambda item: (item.upper_range, item.lower_range, item.created_at),
        reverse=True,
    )


def _round_half_up(value: float) -> int:
    # 2.5 -> 3 and -1.5 -> -1, unlike round()
    return math.floor(value + 0.5)


def get_normalized_rating(comment: PersonalizedComment) -> float:
    """Return the comment's rating, treating a missing rating as neutral (0 stays 0)."""

    if comment.rating is None:
        return DEFAULT_RATING
    return comment.rating


def get_rating_emoji(rating: float) -> str:
    return RATING_EMOJIS.get(_round_half_up(rating), RATING_EMOJIS[DEFAULT_RATING])


def get_rating_label(rating: float) -> str:
    return RATING_LABELS.get(_round_half_up(rating), RATING_LABELS[DEFAULT_RATING])


def sort_personalized_comments_by_rating(
    comments: Sequence[PersonalizedComment],
) -> List[PersonalizedComment]:
    """Rating descending, ties broken alphabetically (case-insensitive) by text."""

    return sorted(
        comments,
        key=lambda item: (-_round_half_up(get_normalized_rating(item)), item.comment.casefold()),
    )


def filter_personalized_comments_by_rating(
    comments: Sequence[PersonalizedComment],
    selected_rating: int,
) -> List[PersonalizedComment]:
    """Return comments with ``selected_rating`` (all of them for 0), sorted by rating."""

    ordered = sort_personalized_comments_by_rating(comments)
    if selected_rating == 0:
        return ordered
    return [
        comment
        for comment in ordered
        if _round_half_up(get_normalized_rating(comment)) == selected_rating
    ]


# ---------------------------------------------------------------------------
# Length limits
# ---------------------------------------------------------------------------


def validate_comment_length(
    text: str,
    *,
    final: bool = False,
    settings: Optional[CommentSettings] = None,
) -> Optional[str]:
    """Return an error message if the comment is outside the configured limits, else ``None``."""

    limits = settings or CommentSettings.from_settings()
    if final:
        # final comments are optional, only the maximum applies
        if len(text or "") > limits.max_final_comment_length:
            return f"Comment cannot exceed {limits.max_final_comment_length} characters"
        return None

    maximum = limits.max_comment_length
    length = len((text or "").strip())
    if length < limits.min_comment_length:
        return f"Comment must be at least {limits.min_comment_length} characters"
    if length > maximum:
        return f"Comment cannot exceed {maximum} characters"
    return None


__all__ = [
    "DEFAULT_RATING",
    "OutcomeComment",
    "PersonalizedComment",
    "filter_personalized_comments_by_rating",
    "find_duplicate_comment",
    "get_normalized_rating",
    "get_rating_emoji",
    "get_rating_label",
    "is_duplicate_comment",
    "sort_outcome_comments_by_range",
    "sort_personalized_comments_by_rating",
    "validate_comment_length",
]
