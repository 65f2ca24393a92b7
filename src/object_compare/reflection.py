"""Reflection helpers: member access by name and instance creation by type name."""
from __future__ import annotations

import importlib
import logging
from typing import Any, Iterator, Optional

from .core.fields import declared_fields
from .errors import InstanceCreationError, MemberNotFoundError

logger = logging.getLogger(__name__)


def member_names(obj: Any) -> list[str]:
    """Public readable member names of ``obj``: declared members first, then instance attributes."""
    names = [descriptor.name for descriptor in declared_fields(type(obj))]
    instance_dict = getattr(obj, "__dict__", None)
    if isinstance(instance_dict, dict):
        for name in instance_dict:
            if isinstance(name, str) and not name.startswith("_") and name not in names:
                names.append(name)
    return names


def _find_member(obj: Any, name: str) -> str:
    wanted = name.lower()
    for candidate in member_names(obj):
        if candidate.lower() == wanted:
            return candidate
    raise MemberNotFoundError(f"The member {name} is not found in the source object.")


def get_property_value(obj: Any, name: str) -> Any:
    """Read a public member by case-insensitive name."""
    return getattr(obj, _find_member(obj, name))


def set_property_value(obj: Any, name: str, value: Any) -> None:
    """Assign a public member by case-insensitive name."""
    setattr(obj, _find_member(obj, name), value)


def copy_properties(source: Any, destination: Any) -> list[str]:
    """Copy every readable member of ``source`` that ``destination`` can accept.

    Members missing on the destination, read-only properties and values that
    fail to read or assign are skipped. Returns the names that were copied.
    """
    if source is None or destination is None:
        raise ValueError("Source and destination objects must not be None")
    copied: list[str] = []
    target_names = set(member_names(destination))
    for name in member_names(source):
        if name not in target_names or not _is_writable(destination, name):
            continue
        try:
            setattr(destination, name, getattr(source, name))
        except (AttributeError, TypeError, ValueError) as exc:
            logger.debug("Skipping member %s while copying %s: %s", name, type(source).__name__, exc)
            continue
        copied.append(name)
    return copied


def _is_writable(obj: Any, name: str) -> bool:
    for klass in type(obj).__mro__:
        member = klass.__dict__.get(name)
        if member is None:
            continue
        if isinstance(member, property):
            return member.fset is not None
        return True
    return True


def get_type_from_name(type_name: str) -> Optional[type]:
    """Resolve ``package.module.Qualified.Name`` (or ``module:Name``); ``None`` when absent."""
    if ":" in type_name:
        module_name, _, qualname = type_name.partition(":")
        candidates: Iterator[tuple[str, str]] = iter([(module_name, qualname)])
    else:
        candidates = _split_candidates(type_name)
    for module_name, qualname in candidates:
        try:
            module = importlib.import_module(module_name)
        except ImportError:
            continue
        target: Any = module
        try:
            for part in qualname.split("."):
                target = getattr(target, part)
        except AttributeError:
            continue
        if isinstance(target, type):
            return target
    return None


def _split_candidates(type_name: str) -> Iterator[tuple[str, str]]:
    parts = type_name.split(".")
    for index in range(len(parts) - 1, 0, -1):
        yield ".".join(parts[:index]), ".".join(parts[index:])
    yield "builtins", type_name


def create_instance(cls: type, *args: Any, **kwargs: Any) -> Any:
    """Instantiate ``cls``; falls back to an uninitialised instance when no arguments fit."""
    try:
        return cls(*args, **kwargs)
    except TypeError as exc:
        if args or kwargs:
            raise InstanceCreationError(f"Cannot create {cls.__qualname__}: {exc}") from exc
        logger.debug("Constructor of %s needs arguments, creating uninitialised instance", cls.__qualname__)
        return cls.__new__(cls)


def create_instance_from_name(type_name: str, *args: Any, **kwargs: Any) -> Any:
    cls = get_type_from_name(type_name)
    if cls is None:
        raise InstanceCreationError(f"Type {type_name} could not be resolved")
    return create_instance(cls, *args, **kwargs)


def has_value(obj: Any) -> bool:
    return obj is not None


def base_types(cls: type) -> tuple[type, ...]:
    """Base classes of ``cls`` in method resolution order, excluding ``cls`` itself."""
    return cls.__mro__[1:]


__all__ = [
    "member_names",
    "get_property_value",
    "set_property_value",
    "copy_properties",
    "get_type_from_name",
    "create_instance",
    "create_instance_from_name",
    "has_value",
    "base_types",
]
