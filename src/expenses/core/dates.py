#!/usr/bin/env python3
"""
FinancialDate Primitive Type

Immutable date wrapper with the canonical YYYY-MM-DD format used by the
ledger file, plus month validation and naming helpers for month filters.
"""

import calendar
from dataclasses import dataclass
from datetime import date, datetime

from .exceptions import InvalidDateError, InvalidMonthError

ISO_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True, order=True)
class FinancialDate:
    """Immutable calendar date (no time component)."""

    date: date

    @classmethod
    def from_string(cls, date_str: str, date_format: str = ISO_FORMAT) -> "FinancialDate":
        """
        Parse from string in specified format.

        Args:
            date_str: Date string to parse
            date_format: Date format (default: ISO format "%Y-%m-%d")

        Returns:
            FinancialDate object

        Raises:
            ValueError: If the string does not match the format
        """
        return cls(date=datetime.strptime(date_str, date_format).date())

    @classmethod
    def today(cls) -> "FinancialDate":
        """Get today's date."""
        return cls(date=date.today())

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    def to_iso_string(self) -> str:
        """Format as YYYY-MM-DD."""
        return self.date.isoformat()

    def __str__(self) -> str:
        return self.to_iso_string()

    def __repr__(self) -> str:
        return f"FinancialDate(date={self.date!r})"


def parse_iso_date(value: "str | date | FinancialDate") -> FinancialDate:
    """
    Validate a caller-supplied date.

    Accepts an existing FinancialDate/date, or a strict YYYY-MM-DD string.

    Raises:
        InvalidDateError: If the value is not a real calendar date
    """
    if isinstance(value, FinancialDate):
        return value
    if isinstance(value, datetime):
        return FinancialDate(date=value.date())
    if isinstance(value, date):
        return FinancialDate(date=value)

    text = str(value).strip()
    # strptime accepts single-digit month/day; the canonical form does not
    if len(text) != 10:
        raise InvalidDateError(value)
    try:
        return FinancialDate.from_string(text)
    except ValueError:
        raise InvalidDateError(value) from None


def validate_month(month: object) -> int:
    """
    Check that a month filter is an integer between 1 and 12.

    Raises:
        InvalidMonthError: If the month is out of range or not an integer
    """
    if isinstance(month, bool) or not isinstance(month, int):
        raise InvalidMonthError(month)
    if not 1 <= month <= 12:
        raise InvalidMonthError(month)
    return month


def month_name(month: int) -> str:
    """Human-readable English month name, e.g. 5 -> 'May'."""
    return calendar.month_name[validate_month(month)]
