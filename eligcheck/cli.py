#!/usr/bin/env python3
"""Command-line entry point: reconcile a claims report against eligibility."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from . import config
from .connectors.file import default_export_filename, load_rows, write_invalid_claims_xlsx
from .mapping import REPORT_FORMATS, normalize_report_rows
from .reporting import filter_results_by_payer, render_table, summarize_results
from .rules import RuleSetValidationError, load_rule_set, reconcile

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eligcheck",
        description="Check clinic claims against insurer eligibility answers",
    )
    parser.add_argument(
        "eligibility",
        help="Eligibility export (.xlsx or .csv)",
    )
    parser.add_argument(
        "report",
        help="Claims report export (.xlsx or .csv); CSV dates are read month-first",
    )
    parser.add_argument(
        "--rules",
        default=config.RULES_PATH,
        help="YAML/JSON service-category rules (default: built-in table)",
    )
    parser.add_argument(
        "--report-format",
        choices=REPORT_FORMATS,
        help="Force the report template instead of detecting it",
    )
    parser.add_argument(
        "--payer-filter",
        nargs="*",
        default=config.PAYER_FILTER,
        metavar="KEYWORD",
        help="Only show claims whose insurer mentions a keyword (e.g. daman thiqa)",
    )
    parser.add_argument(
        "--export",
        nargs="?",
        const="",
        default=None,
        metavar="PATH",
        help="Write invalid claims to an .xlsx file (default name: invalid_claims_<date>.xlsx)",
    )
    parser.add_argument(
        "--format",
        choices=("table", "json"),
        default="table",
        help="Output format (default: table)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    try:
        rules = load_rule_set(args.rules) if args.rules else None
        eligibility = load_rows(args.eligibility, dedupe_claims=False)
        report = load_rows(args.report)
    except RuleSetValidationError as e:
        logger.error(f"{e}: {e.errors}")
        return 1
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1

    claims = normalize_report_rows(report.rows, args.report_format)
    outcome = reconcile(eligibility.rows, claims, prefer_mdy=report.is_csv, rules=rules)
    shown = filter_results_by_payer(outcome.results, args.payer_filter or [])

    if args.format == "json":
        print(json.dumps([result.to_dict() for result in shown], indent=2, default=str))
    else:
        print(summarize_results(shown))
        print(render_table(shown) if shown else "No claims to display")

    if args.export is not None:
        export_path = args.export or default_export_filename()
        # The payer filter is display-only; every invalid claim is exported
        written = write_invalid_claims_xlsx(outcome.results, export_path)
        if written:
            print(f"\nExported {written} invalid claim(s) to: {export_path}")
        else:
            print("\nNo invalid entries to export.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
