"""
Expense Ledger - Personal expense record-keeping

Append, amend, remove and summarize expense entries kept in a flat
semicolon-delimited text file.

Key Features:
- Whole-file load and rewrite on every command; the file is the only state
- Integer-cent amounts, so totals never drift
- Month filters and per-month totals
- Click command line interface (``expenses``)

Domain Packages:
- core: Currency handling, dates, errors, storage protocol, configuration
- ledger: Expense model, backing file store, ledger operations, reports
- cli: Command-line interface

Example Usage:
    from expenses import Ledger, LedgerFileStore

    ledger = Ledger.open(LedgerFileStore("expenses.csv"))
    expense = ledger.add("dog surgery", "3000")
    print(ledger.summary())
"""

__version__ = "0.1.0"
__author__ = "Expense Ledger Developers"

from .core.exceptions import (
    CorruptLedgerError,
    ExpenseNotFoundError,
    LedgerError,
    PersistenceError,
    ValidationError,
)
from .core.money import Money
from .ledger import Expense, ExpenseSummary, Ledger, LedgerFileStore

__all__ = [
    # Ledger
    "Expense",
    "ExpenseSummary",
    "Ledger",
    "LedgerFileStore",
    "Money",
    # Errors
    "CorruptLedgerError",
    "ExpenseNotFoundError",
    "LedgerError",
    "PersistenceError",
    "ValidationError",
]
