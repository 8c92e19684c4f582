"""gcd-cli - Greatest common divisor of a list of integers."""

from gcd_cli.core.errors import UsageError
from gcd_cli.core.reducer import compute, gcd, reduce_gcd
from gcd_cli.core.types import GcdResult

__version__ = "0.1.0"

__all__ = [
    "GcdResult",
    "UsageError",
    "compute",
    "gcd",
    "reduce_gcd",
]
