"""CLI entry point for gcd-cli.

Computes the greatest common divisor of the numbers given on the command line.
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import Sequence, TextIO

from gcd_cli import __version__
from gcd_cli.core.errors import USAGE, UsageError
from gcd_cli.core.reducer import compute

logger = logging.getLogger(__name__)

# Argument that requests numbers from standard input
STDIN_MARKER = "-"

# Plain decimal digits, optional leading plus sign
NUMBER_PATTERN = re.compile(r"\+?[0-9]+")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="gcd",
        description="Compute the greatest common divisor of one or more non-negative integers.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # GCD of two numbers
  gcd 8 12

  # Any number of arguments
  gcd 42 56 98

  # Read whitespace-separated numbers from standard input
  echo "12 18" | gcd -

  # Machine-readable output
  gcd --json 8 12
        """,
    )

    parser.add_argument(
        "numbers",
        nargs="*",
        metavar="NUMBER",
        help=f"Non-negative integers, or '{STDIN_MARKER}' to read them from stdin",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )

    parser.add_argument(
        "--verbose", "-V",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress all logging output",
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def parse_numbers(args: Sequence[str]) -> list[int]:
    """
    Parse command-line arguments into non-negative integers.

    Args:
        args: Raw argument strings, in order

    Returns:
        Parsed numbers in the original order

    Raises:
        UsageError: If args is empty or any argument is not a non-negative integer
    """
    if not args:
        raise UsageError()

    numbers: list[int] = []
    for arg in args:
        token = arg.strip()
        if NUMBER_PATTERN.fullmatch(token):
            numbers.append(int(token, 10))
        elif token.startswith("-") and NUMBER_PATTERN.fullmatch(token[1:]):
            raise UsageError(f"argument '{arg}' must be non-negative", argument=arg)
        else:
            raise UsageError(f"error parsing argument '{arg}'", argument=arg)
    return numbers


def read_stdin_numbers(stream: TextIO) -> list[str]:
    """
    Read whitespace-separated tokens from a text stream.

    Raises:
        UsageError: If the stream cannot be decoded
    """
    try:
        return stream.read().split()
    except UnicodeDecodeError as e:
        raise UsageError(f"cannot decode standard input: {e.reason}", argument=STDIN_MARKER) from e


def _configure_logging(args: argparse.Namespace) -> None:
    """Configure root logging from --verbose / --quiet."""
    if args.quiet:
        logging.disable(logging.CRITICAL)
        return
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Note that --quiet calls logging.disable() for the whole process, so an
    in-process caller keeps logging disabled after main() returns until it
    calls logging.disable(logging.NOTSET).
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)

    try:
        raw = args.numbers
        if raw == [STDIN_MARKER]:
            raw = read_stdin_numbers(sys.stdin)
            logger.debug("read %d token(s) from stdin", len(raw))
        numbers = parse_numbers(raw)
    except UsageError as e:
        logger.debug("usage error: %s", e)
        if e.argument is not None:
            print(f"gcd: {e}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1

    result = compute(numbers)

    if args.json:
        print(result.model_dump_json())
    else:
        print(result)
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
