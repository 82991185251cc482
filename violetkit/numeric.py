"""Fixed-width integer arithmetic with two's-complement wrapping."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Traits:
    """Limits and wrapping operations for a fixed-width integer type."""

    bits: int
    signed: bool

    def __post_init__(self) -> None:
        if self.bits <= 0:
            raise ValueError(f"bit width must be positive, got {self.bits}")

    def min(self) -> int:
        """Return the smallest representable value."""
        return -(1 << (self.bits - 1)) if self.signed else 0

    def max(self) -> int:
        """Return the largest representable value."""
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def wrap(self, value: int) -> int:
        """Reduce ``value`` into this type's range, modulo 2**bits."""
        value &= (1 << self.bits) - 1
        if self.signed and value > self.max():
            value -= 1 << self.bits
        return value

    def wrapping_add(self, lhs: int, rhs: int) -> int:
        """Add, wrapping around at the type's boundary."""
        return self.wrap(lhs + rhs)

    def wrapping_sub(self, lhs: int, rhs: int) -> int:
        """Subtract, wrapping around at the type's boundary."""
        return self.wrap(lhs - rhs)

    def wrapping_mul(self, lhs: int, rhs: int) -> int:
        """Multiply, wrapping around at the type's boundary."""
        return self.wrap(lhs * rhs)

    def wrapping_div(self, lhs: int, rhs: int) -> int:
        """Divide, truncating toward zero; ``min / -1`` yields ``min``."""
        lhs, rhs = self.wrap(lhs), self.wrap(rhs)
        if rhs == 0:
            raise ZeroDivisionError("integer division by zero")
        quotient = abs(lhs) // abs(rhs)
        if (lhs < 0) != (rhs < 0):
            quotient = -quotient
        return self.wrap(quotient)