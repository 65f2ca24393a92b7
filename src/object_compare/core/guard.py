"""Per-call memory of composite values already entered."""
from __future__ import annotations

from typing import Any


class CycleGuard:
    """Tracks identities of composites entered during one top-level comparison.

    Entries are never removed, so a value reached again through a second path
    is reported as already visited even when the first visit has finished.
    Entered values stay referenced until the guard is discarded so their ids
    cannot be reused by another object mid-call.
    """

    __slots__ = ("_visited",)

    def __init__(self) -> None:
        self._visited: dict[int, Any] = {}

    def enter(self, value: Any) -> bool:
        token = id(value)
        if token in self._visited:
            return False
        self._visited[token] = value
        return True

    def __contains__(self, value: Any) -> bool:
        return id(value) in self._visited

    def __len__(self) -> int:
        return len(self._visited)


__all__ = ["CycleGuard"]
