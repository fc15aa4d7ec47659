#!/usr/bin/env python3
"""
Monthly Expense Report

Aggregates expense totals per calendar month (year and month together),
in chronological order.
"""

from collections.abc import Iterable
from dataclasses import dataclass

import pandas as pd

from ..core.dates import month_name
from ..core.money import Money
from .models import Expense


@dataclass(frozen=True)
class MonthlyTotal:
    """Total spending for one calendar month."""

    year: int
    month: int
    total: Money
    count: int

    @property
    def label(self) -> str:
        """Period label like '2024-05'."""
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def month_name(self) -> str:
        return month_name(self.month)


def monthly_totals(expenses: Iterable[Expense]) -> list[MonthlyTotal]:
    """
    Sum expense amounts per calendar month.

    Args:
        expenses: Expenses in any order

    Returns:
        One MonthlyTotal per month that has at least one expense, oldest first
    """
    rows = [
        {"year": e.date.year, "month": e.date.month, "cents": e.amount.to_cents()}
        for e in expenses
    ]
    if not rows:
        return []

    df = pd.DataFrame(rows)
    grouped = (
        df.groupby(["year", "month"], sort=True)["cents"]
        .agg(total_cents="sum", expense_count="count")
        .reset_index()
    )

    return [
        MonthlyTotal(
            year=int(row.year),
            month=int(row.month),
            total=Money.from_cents(int(row.total_cents)),
            count=int(row.expense_count),
        )
        for row in grouped.itertuples(index=False)
    ]
