"""Deep structural equality over arbitrary object graphs."""
from __future__ import annotations

import logging
import reprlib
from dataclasses import dataclass
from time import perf_counter
from typing import Any, Iterable, Optional

from ..adapters import DiagnosticsSink
from ..config import ComparisonConfig
from ..diagnostics import CollectingSink, LoggingSink
from ..errors import UnreadableFieldError
from .classifier import TypeClassifier, has_ordering, iter_items
from .fields import FieldEnumerator
from .guard import CycleGuard
from .models import ComparisonOutcome, FieldDescriptor, Mismatch, MismatchReason, ValueKind

logger = logging.getLogger(__name__)

_repr = reprlib.Repr()
_repr.maxstring = 40
_repr.maxother = 40


@dataclass(slots=True)
class _Task:
    left: Any
    right: Any
    path: str
    field: Optional[str] = None


class EqualityEngine:
    """Compares two object graphs field by field.

    The walk is depth-first in declaration order and driven by an explicit
    work stack, so graph depth is not limited by the interpreter's recursion
    limit. Every mismatch is reported to the sink; the boolean result is the
    conjunction of all node results. Nothing raised while inspecting the
    operands escapes: it is reported and counted as a mismatch.
    """

    def __init__(
        self,
        config: Optional[ComparisonConfig] = None,
        *,
        sink: Optional[DiagnosticsSink] = None,
        classifier: Optional[TypeClassifier] = None,
        enumerator: Optional[FieldEnumerator] = None,
    ) -> None:
        self.config = config or ComparisonConfig()
        self.sink: DiagnosticsSink = sink or LoggingSink()
        self._classifier = classifier or TypeClassifier()
        self._enumerator = enumerator or FieldEnumerator()

    def equal(self, left: Any, right: Any) -> bool:
        return self._walk(left, right, self.sink)

    def compare(self, left: Any, right: Any) -> ComparisonOutcome:
        collector = CollectingSink(forward=self.sink)
        result = self._walk(left, right, collector)
        return ComparisonOutcome(equal=result, mismatches=collector.mismatches)

    def _walk(self, left: Any, right: Any, sink: DiagnosticsSink) -> bool:
        start = perf_counter()
        guard = CycleGuard()
        stack = [_Task(left, right, _root_path(left, right))]
        result = True
        nodes = 0
        while stack:
            task = stack.pop()
            nodes += 1
            try:
                node_equal, children = self._step(task, guard, sink)
            except Exception as exc:
                logger.debug("Comparison fault at %s", task.path, exc_info=True)
                sink.report(_mismatch(task, MismatchReason.FAULT, f"{type(exc).__name__}: {exc}"))
                result = False
                continue
            if not node_equal:
                result = False
            stack.extend(reversed(children))
        logger.debug(
            "Compared %s and %s in %.4fs (nodes=%d, equal=%s)",
            _type_name(left),
            _type_name(right),
            perf_counter() - start,
            nodes,
            result,
        )
        return result

    def _step(
        self, task: _Task, guard: CycleGuard, sink: DiagnosticsSink
    ) -> tuple[bool, list[_Task]]:
        left, right = task.left, task.right
        if left is None and right is None:
            return True, []
        if left is None or right is None:
            sink.report(_mismatch(task, MismatchReason.ABSENT, "one side is None"))
            return False, []
        if _natively_equal(left, right):
            return True, []
        if not self._classifier.are_compatible(left, right):
            sink.report(_mismatch(task, MismatchReason.TYPE, "incompatible types"))
            return False, []

        kind = self._classifier.classify(left)
        other_kind = self._classifier.classify(right)
        if kind is not other_kind:
            sink.report(
                _mismatch(task, MismatchReason.TYPE, f"{kind.value} vs {other_kind.value} values")
            )
            return False, []
        if self._classifier.is_composite(kind) and not guard.enter(left):
            return True, []

        if kind is ValueKind.PAIR:
            return True, [
                _Task(left.key, right.key, f"{task.path}.key", task.field),
                _Task(left.value, right.value, f"{task.path}.value", task.field),
            ]
        if kind is ValueKind.DIRECT:
            if _values_equal(left, right):
                return True, []
            sink.report(
                _mismatch(task, MismatchReason.VALUE, f"{_repr.repr(left)} != {_repr.repr(right)}")
            )
            return False, []
        if kind is ValueKind.SEQUENCE:
            return self._step_sequence(task, sink)
        return self._step_record(task, sink)

    def _step_sequence(self, task: _Task, sink: DiagnosticsSink) -> tuple[bool, list[_Task]]:
        left_count, right_count = len(task.left), len(task.right)
        if left_count != right_count:
            sink.report(
                _mismatch(task, MismatchReason.COUNT, f"{left_count} items != {right_count} items")
            )
            return False, []
        left_items = list(iter_items(task.left))
        right_items = list(iter_items(task.right))
        if len(left_items) != len(right_items):
            sink.report(
                _mismatch(
                    task,
                    MismatchReason.COUNT,
                    f"{len(left_items)} items iterated != {len(right_items)} items iterated",
                )
            )
            return False, []
        children = [
            _Task(left_item, right_item, f"{task.path}[{index}]", task.field)
            for index, (left_item, right_item) in enumerate(zip(left_items, right_items))
        ]
        return True, children

    def _step_record(self, task: _Task, sink: DiagnosticsSink) -> tuple[bool, list[_Task]]:
        result = True
        children: list[_Task] = []
        for descriptor in self._record_fields(task.left, task.right):
            path = f"{task.path}.{descriptor.name}"
            try:
                left_value = descriptor.read(task.left)
                right_value = descriptor.read(task.right)
            except UnreadableFieldError as exc:
                sink.report(
                    Mismatch(
                        path=path,
                        left_type=_type_name(task.left),
                        right_type=_type_name(task.right),
                        reason=MismatchReason.UNREADABLE,
                        field=descriptor.name,
                        detail=f"cannot compare: {exc.cause}",
                    )
                )
                result = False
                continue
            children.append(_Task(left_value, right_value, path, descriptor.name))
        return result, children

    def _record_fields(self, left: Any, right: Any) -> Iterable[FieldDescriptor]:
        # Union of both sides keeps the result symmetric for ad-hoc instance attributes.
        descriptors = list(self._enumerator.instance_fields(left, self.config))
        known = {descriptor.name for descriptor in descriptors}
        for descriptor in self._enumerator.instance_fields(right, self.config):
            if descriptor.name not in known:
                descriptors.append(descriptor)
                known.add(descriptor.name)
        return descriptors


def are_equal(
    left: Any,
    right: Any,
    include_deprecated: bool = False,
    ignore_names: Iterable[str] = (),
    sink: Optional[DiagnosticsSink] = None,
) -> bool:
    """Deep-compare two values. Never raises; details go to ``sink`` (logging by default)."""
    config = ComparisonConfig.build(include_deprecated=include_deprecated, ignore_names=ignore_names)
    return EqualityEngine(config, sink=sink).equal(left, right)


def compare(
    left: Any,
    right: Any,
    config: Optional[ComparisonConfig] = None,
    sink: Optional[DiagnosticsSink] = None,
) -> ComparisonOutcome:
    """Like :func:`are_equal` but also returns the mismatch records."""
    return EqualityEngine(config, sink=sink).compare(left, right)


def _natively_equal(left: Any, right: Any) -> bool:
    if left is right:
        return True
    try:
        return bool(left == right)
    except Exception:
        # Raising or ambiguous ``==`` (e.g. array-valued) leaves the decision to the walk.
        return False


def _values_equal(left: Any, right: Any) -> bool:
    try:
        if not bool(left == right):
            return False
    except Exception:
        return False
    if has_ordering(left) and has_ordering(right):
        try:
            return not (left < right) and not (right < left)
        except TypeError:
            return True
    return True


def _mismatch(task: _Task, reason: MismatchReason, detail: Optional[str] = None) -> Mismatch:
    return Mismatch(
        path=task.path,
        left_type=_type_name(task.left),
        right_type=_type_name(task.right),
        reason=reason,
        field=task.field,
        detail=detail,
    )


def _type_name(value: Any) -> str:
    return type(value).__qualname__


def _root_path(left: Any, right: Any) -> str:
    return _type_name(left if left is not None else right)


__all__ = ["EqualityEngine", "are_equal", "compare"]
