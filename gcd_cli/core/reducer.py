"""GCD reduction over sequences of non-negative integers."""

from __future__ import annotations

import logging
from functools import reduce
from typing import Iterable, Sequence

from gcd_cli.core.types import GcdResult

logger = logging.getLogger(__name__)


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor of two non-negative integers.

    Uses the Euclidean algorithm. ``gcd(0, 0)`` is 0.

    Args:
        a: First operand
        b: Second operand

    Returns:
        The largest integer dividing both operands

    Raises:
        ValueError: If either operand is negative
    """
    if a < 0 or b < 0:
        raise ValueError(f"gcd is defined for non-negative integers, got ({a}, {b})")
    while b != 0:
        a, b = b, a % b
    return a


def reduce_gcd(values: Iterable[int]) -> int:
    """Fold ``gcd`` left to right over values. An empty input yields 0."""
    # gcd(0, x) == x, so seeding with 0 equals starting at the first element
    return reduce(gcd, values, 0)


def compute(values: Sequence[int]) -> GcdResult:
    """Reduce values and package them with their divisor."""
    numbers = list(values)
    divisor = reduce_gcd(numbers)
    logger.debug("gcd of %d number(s) is %d", len(numbers), divisor)
    return GcdResult(numbers=numbers, divisor=divisor)
