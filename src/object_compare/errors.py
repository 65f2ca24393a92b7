"""Exception types raised by object comparison helpers."""
from __future__ import annotations


class ObjectCompareError(RuntimeError):
    """Base class for errors raised by this package."""


class UnreadableFieldError(ObjectCompareError):
    """Raised when a field accessor fails while being read."""

    def __init__(self, type_name: str, field_name: str, cause: BaseException) -> None:
        super().__init__(f"Cannot read field {field_name!r} of {type_name}: {cause}")
        self.type_name = type_name
        self.field_name = field_name
        self.cause = cause


class MemberNotFoundError(KeyError):
    """Raised when a named member does not exist on the target object."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class InstanceCreationError(ObjectCompareError):
    """Raised when a type cannot be resolved or instantiated by name."""


class DocumentLoadError(ObjectCompareError):
    """Raised when a document cannot be fetched or decoded."""


__all__ = [
    "ObjectCompareError",
    "UnreadableFieldError",
    "MemberNotFoundError",
    "InstanceCreationError",
    "DocumentLoadError",
]
