#!/usr/bin/env python3
"""
Command-line tool for inspecting forwarded headers.

Usage:
    forwarded-inspect -H "Forwarded: for=192.0.2.43;proto=https"
    forwarded-inspect -H "X-Forwarded-For: 1.1.1.1, 2.2.2.2" --strategies legacy --json
"""

import argparse
import json
import sys
from typing import List, Optional

from forwarded.lib.common.headers import parse_header_line
from forwarded.lib.common.logging_config import setup_logging
from forwarded.lib.extractors import EXTRACTOR_NAMES, Field, build_extractor


def _header_arg(value: str):
    try:
        return parse_header_line(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Extract by/for/host/proto from Forwarded and X-Forwarded-* headers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default policy (Forwarded first, then X-Forwarded-*)
  %(prog)s -H "Forwarded: for=192.0.2.43;host=example.com"

  # Legacy headers only, JSON output
  %(prog)s -H "X-Forwarded-For: 1.1.1.1, 2.2.2.2" --strategies legacy --json
        """
    )

    parser.add_argument(
        "-H", "--header",
        dest="headers",
        action="append",
        type=_header_arg,
        default=[],
        metavar="'NAME: VALUE'",
        help="Request header line (repeatable)"
    )

    parser.add_argument(
        "--strategies",
        default="standard,legacy",
        help=f"Comma-separated extraction order (choices: {', '.join(EXTRACTOR_NAMES)}; default: standard,legacy)"
    )

    parser.add_argument(
        "--keep-case",
        action="store_true",
        help="Do not lower-case values read from the Forwarded header"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log dropped Forwarded segments"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level="WARNING", log_dropped_segments=args.verbose)

    try:
        extractor = build_extractor(args.strategies, lowercase_values=not args.keep_case)
    except ValueError as e:
        parser.error(str(e))

    # Multiple lines with the same name are kept in order, first one is read
    headers = {}
    for name, value in args.headers:
        headers.setdefault(name, []).append(value)

    result = {field.value: extractor.get(field, headers) for field in Field}

    if args.json:
        print(json.dumps(result, indent=2))
    else:
        for name, value in result.items():
            print(f"{name}: {value}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
