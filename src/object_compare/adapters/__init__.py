"""Adapter protocol definitions for injectable dependencies."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..core.models import Mismatch


@runtime_checkable
class DiagnosticsSink(Protocol):
    """Receives one record per sub-mismatch found during a comparison."""

    def report(self, mismatch: Mismatch) -> None:
        ...


__all__ = ["DiagnosticsSink"]
