"""Deep structural equality for arbitrary Python object graphs."""
from __future__ import annotations

from importlib import import_module
from typing import Any

from .config import ComparisonConfig, LoaderConfig, ReportConfig

__all__ = [
    "ComparisonConfig",
    "LoaderConfig",
    "ReportConfig",
    "EqualityEngine",
    "are_equal",
    "compare",
    "ComparisonOutcome",
    "Mismatch",
    "MismatchReason",
    "KeyValuePair",
    "ignored_field",
    "deprecated_field",
    "compare_ignore",
    "deprecated",
    "LoggingSink",
    "CollectingSink",
    "ReportBuilder",
]


def __getattr__(name: str) -> Any:  # pragma: no cover - import side effect
    if name in {"EqualityEngine", "are_equal", "compare"}:
        module = import_module(".core.engine", __name__)
        return getattr(module, name)
    if name in {"ComparisonOutcome", "Mismatch", "MismatchReason", "KeyValuePair"}:
        module = import_module(".core.models", __name__)
        return getattr(module, name)
    if name in {"ignored_field", "deprecated_field", "compare_ignore", "deprecated"}:
        module = import_module(".core.markers", __name__)
        return getattr(module, name)
    if name in {"LoggingSink", "CollectingSink"}:
        module = import_module(".diagnostics", __name__)
        return getattr(module, name)
    if name == "ReportBuilder":
        module = import_module(".report", __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
