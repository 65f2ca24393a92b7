"""Core types describing values, fields and comparison outcomes."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, NamedTuple, Optional

from ..errors import UnreadableFieldError


class ValueKind(enum.Enum):
    ABSENT = "absent"
    PAIR = "pair"
    DIRECT = "direct"
    SEQUENCE = "sequence"
    RECORD = "record"


class MismatchReason(enum.Enum):
    VALUE = "value"
    COUNT = "count"
    ABSENT = "absent"
    TYPE = "type"
    UNREADABLE = "unreadable"
    FAULT = "fault"


class KeyValuePair(NamedTuple):
    key: Any
    value: Any


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    name: str
    source: str  # dataclass | slot | property | attribute
    ignored: bool = False
    deprecated: bool = False

    def read(self, obj: Any) -> Any:
        try:
            return getattr(obj, self.name)
        except Exception as exc:
            raise UnreadableFieldError(type(obj).__qualname__, self.name, exc) from exc


@dataclass(frozen=True, slots=True)
class Mismatch:
    path: str
    left_type: str
    right_type: str
    reason: MismatchReason
    field: Optional[str] = None
    detail: Optional[str] = None

    def describe(self) -> str:
        subject = f"{self.left_type} vs {self.right_type}"
        if self.field:
            subject = f"{subject}, field '{self.field}'"
        message = f"{self.path}: {self.reason.value} mismatch ({subject})"
        if self.detail:
            message = f"{message}: {self.detail}"
        return message


@dataclass(slots=True)
class ComparisonOutcome:
    equal: bool
    mismatches: list[Mismatch] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.equal

    def by_reason(self) -> dict[MismatchReason, int]:
        counts: dict[MismatchReason, int] = {}
        for mismatch in self.mismatches:
            counts[mismatch.reason] = counts.get(mismatch.reason, 0) + 1
        return counts


__all__ = [
    "ValueKind",
    "MismatchReason",
    "KeyValuePair",
    "FieldDescriptor",
    "Mismatch",
    "ComparisonOutcome",
]
