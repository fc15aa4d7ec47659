#!/usr/bin/env python3
"""
Currency Parsing and Formatting Utilities

All expense amounts are held as integer cents so that totals never drift.

Representations:
- Internal calculations use cents: 100 cents = $1.00
- The backing file uses fixed two-decimal strings: "12.30"
- Summaries use bare numbers without padding: "12.3", "0"

Key Principles:
- Never use floating-point arithmetic for currency calculations
- Parse through Decimal, store as int
- Reject anything that is not a finite, non-negative amount
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from .exceptions import InvalidAmountError

CENT = Decimal("0.01")

# Commas are only thousands separators: "1,234.56", never "12,50"
THOUSANDS_PATTERN = re.compile(r"\d{1,3}(,\d{3})+(\.\d+)?")


def parse_amount_to_cents(value: Union[str, int, float, Decimal]) -> int:
    """
    Parse a user-supplied expense amount into integer cents.

    Args:
        value: Amount like "12.34", "$1,234.5", 12 or Decimal("3.10")

    Returns:
        Amount in cents, rounded half-up to the nearest cent

    Raises:
        InvalidAmountError: If the value is empty, not numeric, uses a decimal
            comma, is not finite or is negative

    Examples:
        parse_amount_to_cents("12.34") -> 1234
        parse_amount_to_cents("$1,234.5") -> 123450
        parse_amount_to_cents(3000) -> 300000
        parse_amount_to_cents("0.005") -> 1
    """
    if isinstance(value, bool):
        raise InvalidAmountError(value)

    if isinstance(value, Decimal):
        amount = value
    else:
        # str() of a float gives the shortest round-tripping repr, e.g. "0.1"
        clean = str(value).replace("$", "").strip()
        if not clean:
            raise InvalidAmountError(value, "amount is empty")
        if "," in clean:
            if not THOUSANDS_PATTERN.fullmatch(clean):
                raise InvalidAmountError(value, "use '.' as the decimal separator")
            clean = clean.replace(",", "")
        try:
            amount = Decimal(clean)
        except InvalidOperation:
            raise InvalidAmountError(value) from None

    if not amount.is_finite():
        raise InvalidAmountError(value, "amount must be finite")
    if amount < 0:
        raise InvalidAmountError(value, "amount must not be negative")

    try:
        rounded = amount.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise InvalidAmountError(value, "amount is too large") from None

    return int(rounded * 100)


def cents_to_dollars_str(cents: int) -> str:
    """
    Convert cents to a fixed two-decimal string using integer arithmetic.

    Example:
        cents_to_dollars_str(4599) -> "45.99"
        cents_to_dollars_str(300000) -> "3000.00"
    """
    is_negative = cents < 0
    abs_cents = abs(int(cents))

    dollars = abs_cents // 100
    remainder = abs_cents % 100

    if is_negative:
        return f"-{dollars}.{remainder:02d}"
    return f"{dollars}.{remainder:02d}"


def format_total(cents: int) -> str:
    """
    Format a total as a bare number, dropping zero padding.

    Examples:
        format_total(0) -> "0"
        format_total(32300) -> "323"
        format_total(1050) -> "10.5"
        format_total(1234) -> "12.34"
    """
    text = cents_to_dollars_str(cents)
    return text.rstrip("0").rstrip(".")


def format_cents(cents: int) -> str:
    """Format cents as dollar string with $ prefix."""
    return f"${cents_to_dollars_str(cents)}"
