"""Diagnostics sinks for comparison mismatches."""
from __future__ import annotations

import logging
from typing import Optional

from .adapters import DiagnosticsSink
from .core.models import Mismatch, MismatchReason

logger = logging.getLogger(__name__)

_WARNING_REASONS = frozenset({MismatchReason.UNREADABLE, MismatchReason.FAULT})


class LoggingSink:
    """Writes one line per mismatch through :mod:`logging`."""

    def __init__(self, log: Optional[logging.Logger] = None) -> None:
        self._logger = log or logger

    def report(self, mismatch: Mismatch) -> None:
        level = logging.WARNING if mismatch.reason in _WARNING_REASONS else logging.INFO
        self._logger.log(level, "%s", mismatch.describe())


class CollectingSink:
    """Keeps mismatch records in memory and optionally forwards them."""

    def __init__(self, forward: Optional[DiagnosticsSink] = None) -> None:
        self.mismatches: list[Mismatch] = []
        self._forward = forward

    def report(self, mismatch: Mismatch) -> None:
        self.mismatches.append(mismatch)
        if self._forward is not None:
            self._forward.report(mismatch)


class NullSink:
    def report(self, mismatch: Mismatch) -> None:
        return None


__all__ = ["LoggingSink", "CollectingSink", "NullSink"]
