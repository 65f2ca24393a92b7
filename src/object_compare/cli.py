"""Command-line interface for deep comparison of JSON documents."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from .config import ComparisonConfig, DEFAULT_LOADER_USER_AGENT, LoaderConfig, ReportConfig
from .core.engine import EqualityEngine
from .errors import DocumentLoadError
from .loader import DocumentLoader
from .report import ReportBuilder

logger = logging.getLogger(__name__)

EXIT_EQUAL = 0
EXIT_DIFFERENT = 1
EXIT_LOAD_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Deep comparison of two JSON documents")
    parser.add_argument("left", help="Path or http(s) URL of the first JSON document")
    parser.add_argument("right", help="Path or http(s) URL of the second JSON document")
    parser.add_argument(
        "--ignore",
        action="append",
        default=[],
        metavar="NAME",
        help="Member name to leave out of the comparison (repeatable)",
    )
    parser.add_argument("--include-deprecated", action="store_true", help="Also compare members marked deprecated")
    parser.add_argument("--timeout", type=float, default=10.0, help="Request timeout for URL sources (seconds)")
    parser.add_argument("--user-agent", default=DEFAULT_LOADER_USER_AGENT, help="User-Agent header for URL sources")
    parser.add_argument("--output", type=Path, help="Path to save Markdown report; prints to stdout if omitted")
    parser.add_argument("--json-output", type=Path, help="Optional path for JSON report payload")
    parser.add_argument("--max-mismatches", type=int, default=50, help="Maximum mismatches listed in the Markdown report")
    parser.add_argument("--quiet", action="store_true", help="Do not print the Markdown report to stdout")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    loader = DocumentLoader(LoaderConfig(timeout=args.timeout, user_agent=args.user_agent))
    comparison_config = ComparisonConfig.build(
        include_deprecated=args.include_deprecated,
        ignore_names=args.ignore,
    )
    report_config = ReportConfig(
        output_path=str(args.output) if args.output else None,
        json_output_path=str(args.json_output) if args.json_output else None,
        max_mismatches=args.max_mismatches,
    )

    try:
        left = loader.load(args.left)
        right = loader.load(args.right)
    except DocumentLoadError as exc:
        logger.error("%s", exc)
        return EXIT_LOAD_ERROR

    logger.info("Comparing %s with %s", args.left, args.right)
    outcome = EqualityEngine(comparison_config).compare(left, right)

    builder = ReportBuilder(report_config)
    markdown = builder.build_markdown(args.left, args.right, outcome, comparison_config)
    if args.output:
        _ensure_parent(args.output)
        args.output.write_text(markdown, encoding="utf-8")
        logger.info("Markdown report written to %s", args.output)
    elif not args.quiet:
        print(markdown)

    if args.json_output:
        _ensure_parent(args.json_output)
        payload = builder.build_json(args.left, args.right, outcome, comparison_config)
        args.json_output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        logger.info("JSON report written to %s", args.json_output)

    return EXIT_EQUAL if outcome.equal else EXIT_DIFFERENT


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _ensure_parent(path: Path) -> None:
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
