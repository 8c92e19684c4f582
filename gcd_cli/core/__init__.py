"""Core module for gcd-cli."""

from gcd_cli.core.errors import UsageError
from gcd_cli.core.reducer import compute, gcd, reduce_gcd
from gcd_cli.core.types import GcdResult

__all__ = [
    "GcdResult",
    "UsageError",
    "compute",
    "gcd",
    "reduce_gcd",
]
