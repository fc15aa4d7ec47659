#!/usr/bin/env python3
"""
Expense Ledger Package

The expense model, its flat-file store, and the ledger operations
(add, update, delete, list, summary, monthly totals).
"""

from .datastore import LedgerFileStore
from .ledger import ExpenseSummary, Ledger
from .models import COLUMNS, Expense
from .report import MonthlyTotal, monthly_totals

__all__ = [
    "COLUMNS",
    "Expense",
    "ExpenseSummary",
    "Ledger",
    "LedgerFileStore",
    "MonthlyTotal",
    "monthly_totals",
]
