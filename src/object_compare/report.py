"""Report generation for comparison outcomes."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List

from .config import ComparisonConfig, ReportConfig
from .core.models import ComparisonOutcome, Mismatch


class ReportBuilder:
    def __init__(self, config: ReportConfig) -> None:
        self.config = config

    def build_markdown(
        self,
        left: str,
        right: str,
        outcome: ComparisonOutcome,
        comparison: ComparisonConfig | None = None,
    ) -> str:
        lines: List[str] = []
        lines.append("# Object Comparison Report")
        lines.append("")
        lines.append(f"**Left:** {left}")
        lines.append(f"**Right:** {right}")
        lines.append("")
        lines.append("## Summary")
        lines.append(f"- Result: {'equal' if outcome.equal else 'different'}")
        lines.append(f"- Mismatches: {len(outcome.mismatches)}")
        for reason, count in sorted(outcome.by_reason().items(), key=lambda item: item[0].value):
            lines.append(f"  - {reason.value}: {count}")
        if comparison is not None:
            lines.append(f"- Deprecated members compared: {'yes' if comparison.include_deprecated else 'no'}")
            if comparison.ignore_names:
                ignored = ", ".join(f"`{name}`" for name in sorted(comparison.ignore_names))
                lines.append(f"- Ignored names: {ignored}")
        lines.append("")
        lines.extend(self._render_mismatches(outcome.mismatches))
        return "\n".join(lines).strip() + "\n"

    def _render_mismatches(self, mismatches: List[Mismatch]) -> List[str]:
        if not mismatches:
            return []
        lines = ["## Mismatches", "", "| Path | Reason | Types | Detail |", "| --- | --- | --- | --- |"]
        limit = max(0, self.config.max_mismatches)
        for mismatch in mismatches[:limit]:
            types = f"{mismatch.left_type} / {mismatch.right_type}"
            detail = _escape(mismatch.detail or "")
            lines.append(f"| `{mismatch.path}` | {mismatch.reason.value} | {types} | {detail} |")
        hidden = len(mismatches) - limit
        if hidden > 0:
            lines.append("")
            lines.append(f"_{hidden} more mismatch(es) not shown._")
        lines.append("")
        return lines

    def build_json(
        self,
        left: str,
        right: str,
        outcome: ComparisonOutcome,
        comparison: ComparisonConfig | None = None,
    ) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "summary": {
                "left": left,
                "right": right,
                "equal": outcome.equal,
                "mismatch_count": len(outcome.mismatches),
                "generated_at": datetime.now(timezone.utc).isoformat(),
            },
            "mismatches": [self._serialise_mismatch(mismatch) for mismatch in outcome.mismatches],
        }
        if comparison is not None:
            payload["options"] = {
                "include_deprecated": comparison.include_deprecated,
                "ignore_names": sorted(comparison.ignore_names),
            }
        return payload

    @staticmethod
    def _serialise_mismatch(mismatch: Mismatch) -> Dict[str, Any]:
        return {
            "path": mismatch.path,
            "reason": mismatch.reason.value,
            "left_type": mismatch.left_type,
            "right_type": mismatch.right_type,
            "field": mismatch.field,
            "detail": mismatch.detail,
        }


def _escape(value: str) -> str:
    return value.replace("|", "\\|").replace("\n", " ")


__all__ = ["ReportBuilder"]
