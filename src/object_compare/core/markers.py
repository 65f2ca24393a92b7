"""Declarative markers that exclude members from comparison."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

IGNORE_KEY = "compare_ignore"
DEPRECATED_KEY = "compare_deprecated"

IGNORE_ATTR = "__compare_ignore__"
DEPRECATED_ATTR = "__compare_deprecated__"


def ignored_field(**kwargs: Any) -> Any:
    """``dataclasses.field`` that is never compared."""
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[IGNORE_KEY] = True
    return dataclasses.field(metadata=metadata, **kwargs)


def deprecated_field(**kwargs: Any) -> Any:
    """``dataclasses.field`` that is only compared when deprecated members are included."""
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[DEPRECATED_KEY] = True
    return dataclasses.field(metadata=metadata, **kwargs)


def compare_ignore(fn: F) -> F:
    """Mark a property getter as excluded from comparison.

    Apply below ``@property``::

        @property
        @compare_ignore
        def created_at(self): ...
    """
    setattr(fn, IGNORE_ATTR, True)
    return fn


def deprecated(reason: str | Callable[..., Any] = "") -> Any:
    """Mark a property getter as deprecated.

    Sets ``__deprecated__`` the way :pep:`702` decorators do, without emitting
    warnings on access. Usable bare or with a message.
    """
    if callable(reason):
        setattr(reason, "__deprecated__", "")
        return reason

    def decorator(fn: F) -> F:
        setattr(fn, "__deprecated__", reason)
        return fn

    return decorator


def is_ignored_member(member: Any) -> bool:
    return bool(getattr(member, IGNORE_ATTR, False))


def is_deprecated_member(member: Any) -> bool:
    return getattr(member, "__deprecated__", None) is not None


def class_marked_names(cls: type, attr: str) -> frozenset[str]:
    """Union of a marker name set over ``cls`` and its bases."""
    names: set[str] = set()
    for klass in cls.__mro__:
        declared = klass.__dict__.get(attr)
        if declared:
            names.update(declared)
    return frozenset(names)


__all__ = [
    "ignored_field",
    "deprecated_field",
    "compare_ignore",
    "deprecated",
    "is_ignored_member",
    "is_deprecated_member",
    "class_marked_names",
    "IGNORE_KEY",
    "DEPRECATED_KEY",
    "IGNORE_ATTR",
    "DEPRECATED_ATTR",
]
