"""Enumeration of the comparable fields of structural records."""
from __future__ import annotations

import dataclasses
import functools
from typing import Any, Iterator

from ..config import ComparisonConfig
from .markers import (
    DEPRECATED_ATTR,
    DEPRECATED_KEY,
    IGNORE_ATTR,
    IGNORE_KEY,
    class_marked_names,
    is_deprecated_member,
    is_ignored_member,
)
from .models import FieldDescriptor

_SLOT_INTERNALS = frozenset({"__dict__", "__weakref__"})


class FieldEnumerator:
    """Produces the ordered, filtered fields of a record type."""

    def fields(self, record_type: type, options: ComparisonConfig) -> tuple[FieldDescriptor, ...]:
        return tuple(
            descriptor
            for descriptor in declared_fields(record_type)
            if _is_selected(descriptor, options)
        )

    def instance_fields(self, value: Any, options: ComparisonConfig) -> tuple[FieldDescriptor, ...]:
        """Fields of ``value``: declared members, then undeclared public instance attributes."""
        record_type = type(value)
        selected = list(self.fields(record_type, options))
        declared = {descriptor.name for descriptor in declared_fields(record_type)}
        instance_dict = getattr(value, "__dict__", None)
        if not isinstance(instance_dict, dict):
            return tuple(selected)
        ignored = class_marked_names(record_type, IGNORE_ATTR)
        deprecated = class_marked_names(record_type, DEPRECATED_ATTR)
        for name in instance_dict:
            if not isinstance(name, str) or not _is_public(name) or name in declared:
                continue
            descriptor = FieldDescriptor(
                name=name,
                source="attribute",
                ignored=name in ignored,
                deprecated=name in deprecated,
            )
            if _is_selected(descriptor, options):
                selected.append(descriptor)
        return tuple(selected)


@functools.lru_cache(maxsize=512)
def declared_fields(record_type: type) -> tuple[FieldDescriptor, ...]:
    """All public readable members declared on ``record_type``, unfiltered, base classes first."""
    ignored = class_marked_names(record_type, IGNORE_ATTR)
    deprecated = class_marked_names(record_type, DEPRECATED_ATTR)
    seen: set[str] = set()
    result: list[FieldDescriptor] = []
    for descriptor in _iter_members(record_type):
        if descriptor.name in seen or not _is_public(descriptor.name):
            continue
        seen.add(descriptor.name)
        if descriptor.name in ignored or descriptor.name in deprecated:
            descriptor = dataclasses.replace(
                descriptor,
                ignored=descriptor.ignored or descriptor.name in ignored,
                deprecated=descriptor.deprecated or descriptor.name in deprecated,
            )
        result.append(descriptor)
    return tuple(result)


def _iter_members(record_type: type) -> Iterator[FieldDescriptor]:
    if dataclasses.is_dataclass(record_type):
        for dc_field in dataclasses.fields(record_type):
            yield FieldDescriptor(
                name=dc_field.name,
                source="dataclass",
                ignored=bool(dc_field.metadata.get(IGNORE_KEY, False)),
                deprecated=bool(dc_field.metadata.get(DEPRECATED_KEY, False)),
            )
    for klass in reversed(record_type.__mro__):
        if klass is object:
            continue
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot not in _SLOT_INTERNALS:
                yield FieldDescriptor(name=slot, source="slot")
        for name, member in klass.__dict__.items():
            if isinstance(member, property):
                if member.fget is None:
                    continue
                yield FieldDescriptor(
                    name=name,
                    source="property",
                    ignored=is_ignored_member(member.fget),
                    deprecated=is_deprecated_member(member.fget),
                )
            elif isinstance(member, functools.cached_property):
                yield FieldDescriptor(
                    name=name,
                    source="property",
                    ignored=is_ignored_member(member.func),
                    deprecated=is_deprecated_member(member.func),
                )


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def _is_selected(descriptor: FieldDescriptor, options: ComparisonConfig) -> bool:
    if descriptor.ignored:
        return False
    if descriptor.name in options.ignore_names:
        return False
    if descriptor.deprecated and not options.include_deprecated:
        return False
    return True


__all__ = ["FieldEnumerator", "declared_fields"]
