"""
Mem Parser – command-line interface
===================================

Usage
-----
::

    python -m memaddr_parser.cli MEM [OPTIONS]

Options
-------
--format, -f      Output format: ``text`` (default), ``json`` or ``addresses``.
--plain           Render text output without markdown headers / code fences.
--output, -o      Output file path (default: stdout).
--verbose, -v     Enable DEBUG logging.

Pass ``-`` as MEM to read the Mem string from stdin.

Examples
--------
::

    python -m memaddr_parser.cli "R:0xH00175b=73_0xH0081f9=0S0xH00b241=164.40."
    python -m memaddr_parser.cli "0xH1234=5_A:0xH5678*2_0xH9abc>10" -f json
    echo "0xH1234=5S0xH5678=10" | python -m memaddr_parser.cli - -f addresses
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .models import GrammarError, ParseResult
from .output.formatter import MemFormatter
from .pipeline.mem_analysis import MemAnalysis


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="memaddr_parser",
        description="Mem Parser – decode a Mem string and show its logic",
    )
    p.add_argument("mem", help="Mem string to parse ('-' reads it from stdin)")
    p.add_argument(
        "--format", "-f",
        choices=["text", "json", "addresses"],
        default="text",
        help="Output format (default: text)",
    )
    p.add_argument(
        "--plain",
        action="store_true",
        help="Plain text headers without markdown or code fences",
    )
    p.add_argument(
        "--output", "-o",
        default="-",
        metavar="FILE",
        help="Output file (default: stdout)",
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return p


def _render(result: ParseResult, fmt: str, plain: bool) -> str:
    if fmt == "json":
        return json.dumps(result.to_dict(), indent=2)
    if fmt == "addresses":
        return "\n".join(result.addresses)
    return MemFormatter(markdown=not plain).format(result.groups).lstrip("\n")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    text = sys.stdin.read() if args.mem == "-" else args.mem
    text = text.strip()
    if not text:
        print("error: empty Mem string", file=sys.stderr)
        return 2

    try:
        result = MemAnalysis().parse(text)
    except GrammarError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    output_text = _render(result, args.format, args.plain)

    if args.output == "-":
        print(output_text)
    else:
        Path(args.output).write_text(output_text + "\n", encoding="utf-8")
        print(f"Output written to {args.output}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
