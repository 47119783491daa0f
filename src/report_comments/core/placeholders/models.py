"""Student, pronoun and copy-result data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union


class InvalidRecordError(ValueError):
    """Raised when a record payload is not a mapping."""


def _lookup(payload: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first value present under ``keys`` (camelCase or snake_case)."""

    for key in keys:
        if key in payload:
            return payload[key]
    return default


def _ensure_mapping(payload: object, kind: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise InvalidRecordError(f"{kind} payload must be a mapping, got {type(payload).__name__}")
    return payload


@dataclass(frozen=True, slots=True)
class StudentData:
    """Values available for substitution into a comment template."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    grade: Optional[Union[int, float]] = None
    pronoun: Optional[str] = None
    possessive_pronoun: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "StudentData":
        data = _ensure_mapping(payload, "StudentData")
        return cls(
            first_name=_lookup(data, "firstName", "first_name"),
            last_name=_lookup(data, "lastName", "last_name"),
            grade=_lookup(data, "grade"),
            pronoun=_lookup(data, "pronoun"),
            possessive_pronoun=_lookup(data, "possessivePronoun", "possessive_pronoun"),
        )

    @classmethod
    def coerce(cls, value: Union["StudentData", Mapping[str, Any], None]) -> "StudentData":
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        return cls.from_dict(value)


@dataclass(frozen=True, slots=True)
class PronounRecord:
    """A configured subject/possessive pronoun pair."""

    id: str = ""
    pronoun: str = ""
    possessive_pronoun: str = ""
    user_id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "pronoun": self.pronoun,
            "possessivePronoun": self.possessive_pronoun,
            "userId": self.user_id,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "PronounRecord":
        data = _ensure_mapping(payload, "PronounRecord")
        return cls(
            id=str(_lookup(data, "id", default="") or ""),
            pronoun=_lookup(data, "pronoun", default="") or "",
            possessive_pronoun=_lookup(data, "possessivePronoun", "possessive_pronoun", default="") or "",
            user_id=_lookup(data, "userId", "user_id"),
            created_at=_lookup(data, "createdAt", "created_at"),
            updated_at=_lookup(data, "updatedAt", "updated_at"),
        )


@dataclass(slots=True)
class ReplacementCount:
    """Number of whole-word pronoun matches rewritten per category."""

    pronoun: int = 0
    possessive_pronoun: int = 0

    @property
    def total(self) -> int:
        return self.pronoun + self.possessive_pronoun

    def to_dict(self) -> Dict[str, int]:
        return {"pronoun": self.pronoun, "possessivePronoun": self.possessive_pronoun}


@dataclass(slots=True)
class ReplacePronounsResult:
    """Rewritten text together with its replacement counts."""

    replaced_text: str
    replacement_count: ReplacementCount = field(default_factory=ReplacementCount)

    def to_dict(self) -> Dict[str, object]:
        return {
            "replacedText": self.replaced_text,
            "replacementCount": self.replacement_count.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class CopyResultSummary:
    """Outcome of a bulk comment copy performed elsewhere."""

    success_count: int = 0
    duplicate_count: int = 0
    overwrite: bool = False

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "CopyResultSummary":
        data = _ensure_mapping(payload, "CopyResultSummary")
        return cls(
            success_count=int(_lookup(data, "successCount", "success_count", default=0) or 0),
            duplicate_count=int(_lookup(data, "duplicateCount", "duplicate_count", default=0) or 0),
            overwrite=bool(_lookup(data, "overwrite", default=False)),
        )

    @classmethod
    def coerce(cls, value: Union["CopyResultSummary", Mapping[str, Any]]) -> "CopyResultSummary":
        if isinstance(value, cls):
            return value
        return cls.from_dict(value)


__all__ = [
    "CopyResultSummary",
    "InvalidRecordError",
    "PronounRecord",
    "ReplacePronounsResult",
    "ReplacementCount",
    "StudentData",
]
