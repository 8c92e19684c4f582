"""Error types for gcd-cli."""

from __future__ import annotations


# Usage line shown for any invocation error
USAGE = "Usage: gcd NUMBER ..."


class UsageError(ValueError):
    """Raised when the command line cannot be turned into a list of numbers.

    Covers both a missing argument list and an argument that is not a
    non-negative integer. The CLI reports it together with the usage line
    and exits with a non-zero status.
    """

    def __init__(self, message: str = "", argument: str | None = None):
        super().__init__(message or USAGE)
        self.argument = argument
