"""
CLI interface for the GS1 GTIN toolkit.

Usage:
    python -m gs1_gtin <command> <code> [options]

Commands:
    validate     Print the GTIN format
    generate     Append the check digit to a 7/11/12/13 digit body
    normalize    Convert a GTIN-13 to GTIN-14
    prefix       Print the issuing GS1 Member Organization
    inspect      Print a full report

Options:
    --json       Output as JSON
    --verbose    Enable debug logging
"""

import argparse
import json
import logging
import sys
from typing import Optional

from .api import generate, gs1_prefix_country, normalize, validate
from .errors import GtinError
from .formatters.json_formatter import (
    GtinReport,
    format_gtin_report_json,
    inspect_gtin,
)


logger = logging.getLogger(__name__)

COMMANDS = ('validate', 'generate', 'normalize', 'prefix', 'inspect')


def format_report(report: GtinReport) -> str:
    """Format an inspection report for display."""
    lines = [
        "=" * 60,
        "GTIN Inspection",
        "=" * 60,
        f"Raw Input: {report.raw!r}",
        f"Valid: {report.valid}",
    ]

    if report.valid:
        lines.append(f"Format: {report.format.label}")
        lines.append(f"GS1 Prefix: {report.gs1_prefix_country or '-'}")
        if report.gtin14:
            lines.append(f"GTIN-14: {report.gtin14}")

    if report.errors:
        lines.extend(["", "Errors:", "-" * 40])
        for error in report.errors:
            lines.append(f"  [{report.error_code}] {error}")

    if report.warnings:
        lines.extend(["", "Warnings:", "-" * 40])
        for warning in report.warnings:
            lines.append(f"  {warning}")

    return '\n'.join(lines)


def run_command(command: str, code: str) -> str:
    """Run a single command and return its printable result."""
    if command == 'validate':
        return validate(code).label
    if command == 'generate':
        return generate(code)
    if command == 'normalize':
        return normalize(code)
    if command == 'prefix':
        return gs1_prefix_country(code)
    raise ValueError(f"Unknown command: {command}")


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='gs1_gtin',
        description='Validate, generate and normalize GS1 GTINs'
    )

    parser.add_argument(
        'command',
        choices=COMMANDS,
        help='Operation to run'
    )

    parser.add_argument(
        'code',
        help='GTIN or GTIN body'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Output result as JSON'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s : %(message)s",
    )

    if args.command == 'inspect':
        report = inspect_gtin(args.code)
        if args.json:
            print(format_gtin_report_json(report))
        else:
            print(format_report(report))
        return 0 if report.valid else 1

    try:
        result = run_command(args.command, args.code)
    except GtinError as e:
        logger.debug("%s failed for %r: %s", args.command, args.code, e.code.value)
        if args.json:
            error_output = {
                "error": e.code.value,
                "message": str(e),
                "input": args.code,
            }
            print(json.dumps(error_output, ensure_ascii=False, indent=2))
        else:
            print(f"Error [{e.code.value}]: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps({"input": args.code, "result": result}, ensure_ascii=False, indent=2))
    else:
        print(result)

    return 0


if __name__ == '__main__':
    sys.exit(main())
