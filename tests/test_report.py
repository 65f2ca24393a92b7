from object_compare import compare
from object_compare.config import ComparisonConfig, ReportConfig
from object_compare.core.models import ComparisonOutcome, Mismatch, MismatchReason
from object_compare.diagnostics import NullSink
from object_compare.report import ReportBuilder


class Item:
    def __init__(self, sku: str, qty: int) -> None:
        self.sku = sku
        self.qty = qty


def build_outcome():
    return compare([Item("a", 1), Item("b", 2)], [Item("a", 1), Item("b|c", 3)], sink=NullSink())


def test_markdown_contains_summary_and_mismatch_rows():
    outcome = build_outcome()
    config = ComparisonConfig.build(ignore_names=["updated_at"])
    markdown = ReportBuilder(ReportConfig()).build_markdown("left.json", "right.json", outcome, config)
    assert "# Object Comparison Report" in markdown
    assert "- Result: different" in markdown
    assert "- Mismatches: 2" in markdown
    assert "`updated_at`" in markdown
    assert "| `list[1].sku` | value | str / str |" in markdown
    assert "b\\|c" in markdown


def test_markdown_truncates_long_mismatch_lists():
    mismatches = [
        Mismatch(path=f"list[{index}]", left_type="int", right_type="int", reason=MismatchReason.VALUE)
        for index in range(5)
    ]
    outcome = ComparisonOutcome(equal=False, mismatches=mismatches)
    markdown = ReportBuilder(ReportConfig(max_mismatches=2)).build_markdown("a", "b", outcome)
    assert "`list[1]`" in markdown
    assert "`list[2]`" not in markdown
    assert "_3 more mismatch(es) not shown._" in markdown


def test_equal_outcome_has_no_mismatch_table():
    markdown = ReportBuilder(ReportConfig()).build_markdown("a", "b", ComparisonOutcome(equal=True))
    assert "- Result: equal" in markdown
    assert "## Mismatches" not in markdown


def test_json_payload():
    payload = ReportBuilder(ReportConfig()).build_json(
        "left.json", "right.json", build_outcome(), ComparisonConfig(include_deprecated=True)
    )
    assert payload["summary"]["equal"] is False
    assert payload["summary"]["mismatch_count"] == 2
    assert payload["options"] == {"include_deprecated": True, "ignore_names": []}
    assert payload["mismatches"][0] == {
        "path": "list[1].sku",
        "reason": "value",
        "left_type": "str",
        "right_type": "str",
        "field": "sku",
        "detail": "'b' != 'b|c'",
    }
