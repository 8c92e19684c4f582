"""CLI module for gcd-cli.

Provides the ``gcd`` command-line interface.
"""

from gcd_cli.cli.main import create_parser, main, parse_numbers

__all__ = ["create_parser", "main", "parse_numbers"]
