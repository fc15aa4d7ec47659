#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer cents internally.
Prevents floating-point errors when amounts are summed.
"""

from dataclasses import dataclass
from decimal import Decimal

from .currency import cents_to_dollars_str, format_total, parse_amount_to_cents


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in cents.

    Examples:
        >>> vet = Money.from_dollars("3000")
        >>> str(vet)
        '$3000.00'
        >>> (vet + Money.from_cents(32300)).to_total_str()
        '3323'
    """

    cents: int

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from cents."""
        return cls(cents=cents)

    @classmethod
    def from_dollars(cls, dollars: str | int | Decimal) -> "Money":
        """
        Parse a non-negative dollar amount like '12.34', '$1,000' or 12.

        Raises:
            InvalidAmountError: If the amount is malformed or negative
        """
        return cls(cents=parse_amount_to_cents(dollars))

    @classmethod
    def zero(cls) -> "Money":
        """Money with no value."""
        return cls(cents=0)

    def to_cents(self) -> int:
        """Get value in cents."""
        return self.cents

    def to_plain_str(self) -> str:
        """Two-decimal string without currency symbol, e.g. '12.30'."""
        return cents_to_dollars_str(self.cents)

    def to_total_str(self) -> str:
        """Bare number without zero padding, e.g. '12.3' or '0'."""
        return format_total(self.cents)

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        return Money(cents=self.cents + other.cents)

    def __lt__(self, other: "Money") -> bool:
        return self.cents < other.cents

    def __le__(self, other: "Money") -> bool:
        return self.cents <= other.cents

    def __gt__(self, other: "Money") -> bool:
        return self.cents > other.cents

    def __ge__(self, other: "Money") -> bool:
        return self.cents >= other.cents

    def __str__(self) -> str:
        """Format as dollar string."""
        return f"${cents_to_dollars_str(self.cents)}"

    def __repr__(self) -> str:
        return f"Money(cents={self.cents})"
