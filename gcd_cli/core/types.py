"""Core type definitions for gcd-cli."""

from __future__ import annotations

from pydantic import BaseModel, Field


class GcdResult(BaseModel):
    """Result of reducing a list of numbers to their greatest common divisor."""

    numbers: list[int] = Field(default_factory=list)
    divisor: int = 0

    @property
    def message(self) -> str:
        """Human-readable summary line."""
        listing = ", ".join(str(n) for n in self.numbers)
        return f"The greatest common divisor of [{listing}] is {self.divisor}"

    def __str__(self) -> str:
        """Format result for console output."""
        return self.message
