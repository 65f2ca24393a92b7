"""Runtime classification of values into comparison strategies."""
from __future__ import annotations

import enum
import numbers
import types
import uuid
from collections.abc import Iterable, Iterator, Mapping, Set, Sized
from datetime import date, time, timedelta
from decimal import Decimal
from typing import Any

from .models import KeyValuePair, ValueKind

_TEXT_TYPES = (str, bytes, bytearray)
_SCALAR_TYPES = (numbers.Number, bool, enum.Enum, date, time, timedelta, uuid.UUID, Decimal)
_OPAQUE_TYPES = (
    type,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.ModuleType,
)
_COMPOSITE_KINDS = frozenset({ValueKind.PAIR, ValueKind.SEQUENCE, ValueKind.RECORD})


class TypeClassifier:
    """Decides how a value has to be compared. Pure inspection, no side effects."""

    def classify(self, value: Any) -> ValueKind:
        if value is None:
            return ValueKind.ABSENT
        if is_pair(value):
            return ValueKind.PAIR
        if is_directly_comparable(value):
            return ValueKind.DIRECT
        if is_sequence(value):
            return ValueKind.SEQUENCE
        return ValueKind.RECORD

    @staticmethod
    def is_composite(kind: ValueKind) -> bool:
        return kind in _COMPOSITE_KINDS

    def are_compatible(self, a: Any, b: Any) -> bool:
        """Same type, one a subtype of the other, two numbers, or two containers of one family."""
        type_a, type_b = type(a), type(b)
        if type_a is type_b or issubclass(type_a, type_b) or issubclass(type_b, type_a):
            return True
        if is_pair(a) and is_pair(b):
            return True
        if isinstance(a, numbers.Number) and isinstance(b, numbers.Number):
            return True
        if is_sequence(a) and is_sequence(b):
            return container_family(a) == container_family(b)
        return False


def is_pair(value: Any) -> bool:
    if isinstance(value, KeyValuePair):
        return True
    return isinstance(value, tuple) and getattr(type(value), "_fields", None) == ("key", "value")


def has_ordering(value: Any) -> bool:
    """True when the type defines an ``__lt__`` that actually orders instances."""
    for klass in type(value).__mro__:
        if "__lt__" not in klass.__dict__:
            continue
        method = klass.__dict__["__lt__"]
        if klass is object:
            return False
        if isinstance(method, types.WrapperDescriptorType):
            # C rich-compare slots (SimpleNamespace, ...) may only support ``==``.
            try:
                return method(value, value) is not NotImplemented
            except Exception:
                return False
        return method is not None
    return False


def is_sequence(value: Any) -> bool:
    if isinstance(value, _TEXT_TYPES):
        return False
    return isinstance(value, Sized) and isinstance(value, Iterable)


def is_directly_comparable(value: Any) -> bool:
    if isinstance(value, _TEXT_TYPES):
        return True
    if isinstance(value, _OPAQUE_TYPES):
        return True
    if is_sequence(value):
        return False
    return isinstance(value, _SCALAR_TYPES) or has_ordering(value)


def container_family(value: Any) -> str:
    if isinstance(value, Mapping):
        return "mapping"
    if isinstance(value, Set):
        return "set"
    return "sequence"


def iter_items(value: Any) -> Iterator[Any]:
    """Iterate a sequence-like value; mappings yield ``KeyValuePair`` items."""
    if isinstance(value, Mapping):
        for key, item in value.items():
            yield KeyValuePair(key, item)
        return
    yield from value


__all__ = [
    "TypeClassifier",
    "is_pair",
    "is_sequence",
    "is_directly_comparable",
    "has_ordering",
    "container_family",
    "iter_items",
]
