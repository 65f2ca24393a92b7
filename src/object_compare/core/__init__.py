"""Shared, side-effect-free building blocks for deep object comparison."""
from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "EqualityEngine",
    "are_equal",
    "compare",
    "TypeClassifier",
    "CycleGuard",
    "FieldEnumerator",
    "ValueKind",
    "MismatchReason",
    "KeyValuePair",
    "FieldDescriptor",
    "Mismatch",
    "ComparisonOutcome",
    "ignored_field",
    "deprecated_field",
    "compare_ignore",
    "deprecated",
]

_LOCATIONS = {
    "EqualityEngine": ".engine",
    "are_equal": ".engine",
    "compare": ".engine",
    "TypeClassifier": ".classifier",
    "CycleGuard": ".guard",
    "FieldEnumerator": ".fields",
    "ignored_field": ".markers",
    "deprecated_field": ".markers",
    "compare_ignore": ".markers",
    "deprecated": ".markers",
}


def __getattr__(name: str) -> Any:  # pragma: no cover - import side effects
    if name in _LOCATIONS:
        module = import_module(_LOCATIONS[name], __name__)
        return getattr(module, name)
    if name in {
        "ValueKind",
        "MismatchReason",
        "KeyValuePair",
        "FieldDescriptor",
        "Mismatch",
        "ComparisonOutcome",
    }:
        module = import_module(".models", __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
