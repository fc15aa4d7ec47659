#!/usr/bin/env python3
"""
Ledger Error Taxonomy

Every failure the ledger can report falls into one of three families:
- ValidationError: bad input, detected before anything is mutated
- ExpenseNotFoundError: an update/delete referenced an unknown id
- PersistenceError: the backing file could not be read, parsed or written
"""

from pathlib import Path


class LedgerError(Exception):
    """Base class for all expense ledger failures."""

    pass


class ValidationError(LedgerError, ValueError):
    """Raised when caller-supplied input fails validation."""

    pass


class InvalidAmountError(ValidationError):
    """Raised when an amount is not a non-negative number."""

    def __init__(self, value: object, reason: str = "must be a non-negative number"):
        self.value = value
        super().__init__(f"Invalid amount {value!r}: {reason}")


class InvalidDateError(ValidationError):
    """Raised when a date is not a valid YYYY-MM-DD calendar date."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid date {value!r}: expected a calendar date in YYYY-MM-DD format")


class InvalidMonthError(ValidationError):
    """Raised when a month filter is outside 1-12."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid month {value!r} (must be a number between 1 and 12)")


class InvalidDescriptionError(ValidationError):
    """Raised when a description cannot be stored as UTF-8 text."""

    def __init__(self, value: object, reason: str = "contains characters that cannot be encoded as UTF-8"):
        self.value = value
        super().__init__(f"Invalid description {value!r}: {reason}")


class ExpenseNotFoundError(LedgerError, LookupError):
    """Raised when no expense exists with the requested id."""

    def __init__(self, expense_id: int):
        self.expense_id = expense_id
        super().__init__(f"No expense found with ID {expense_id}")


class PersistenceError(LedgerError):
    """Raised when the backing file cannot be read or written."""

    def __init__(self, message: str, path: Path | None = None):
        self.path = path
        super().__init__(message)


class CorruptLedgerError(PersistenceError):
    """Raised when a line of the backing file cannot be parsed."""

    def __init__(self, path: Path | None, line_number: int, reason: str):
        self.line_number = line_number
        self.reason = reason
        location = f"{path}:{line_number}" if path is not None else f"line {line_number}"
        super().__init__(f"Corrupt ledger file at {location}: {reason}", path)
