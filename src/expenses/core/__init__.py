"""
Core Utilities Package

Shared building blocks used by the ledger and the CLI:
- Currency handling with integer cents
- Date and month helpers
- Error taxonomy
- DataStore protocol for swappable storage
- Environment configuration
"""

from .config import (
    Config,
    Environment,
    get_config,
    get_data_dir,
    get_ledger_file,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .currency import cents_to_dollars_str, format_cents, format_total, parse_amount_to_cents
from .dates import FinancialDate, month_name, parse_iso_date, validate_month
from .datastore import DataStore
from .exceptions import (
    CorruptLedgerError,
    ExpenseNotFoundError,
    InvalidAmountError,
    InvalidDateError,
    InvalidDescriptionError,
    InvalidMonthError,
    LedgerError,
    PersistenceError,
    ValidationError,
)
from .money import Money

__all__ = [
    # Configuration
    "Config",
    "Environment",
    "get_config",
    "get_data_dir",
    "get_ledger_file",
    "is_development",
    "is_production",
    "is_test",
    "reload_config",
    # Currency utilities
    "cents_to_dollars_str",
    "format_cents",
    "format_total",
    "parse_amount_to_cents",
    "Money",
    # Dates
    "FinancialDate",
    "month_name",
    "parse_iso_date",
    "validate_month",
    # Storage
    "DataStore",
    # Errors
    "CorruptLedgerError",
    "ExpenseNotFoundError",
    "InvalidAmountError",
    "InvalidDateError",
    "InvalidDescriptionError",
    "InvalidMonthError",
    "LedgerError",
    "PersistenceError",
    "ValidationError",
]
