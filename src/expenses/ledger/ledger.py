#!/usr/bin/env python3
"""
Expense Ledger

Owns the full, ordered collection of expenses for one invocation and applies
add/update/delete/list/summary operations on it. Every mutation rewrites the
whole backing store.

Ids are recomputed from the live collection on every add (max id + 1, or 1
when empty); there is no persisted counter. Deleting the highest-id expense
therefore lets its id be issued again by the next add.

The month filter compares only the month number of each expense date, so
expenses from other years with the same month are included in list and
summary results.
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from ..core.dates import FinancialDate, month_name, parse_iso_date, validate_month
from ..core.datastore import DataStore
from ..core.exceptions import ExpenseNotFoundError, InvalidAmountError, InvalidDescriptionError
from ..core.money import Money
from .models import Expense
from .report import MonthlyTotal, monthly_totals

logger = logging.getLogger(__name__)

AmountInput = str | int | Decimal | Money
DateInput = str | date | FinancialDate


@dataclass(frozen=True)
class ExpenseSummary:
    """Total of the expenses selected by an optional month filter."""

    total: Money
    count: int
    month: int | None = None

    @property
    def label(self) -> str:
        if self.month is None:
            return "Total expenses"
        return f"Total expenses for {month_name(self.month)}"

    def __str__(self) -> str:
        return f"{self.label}: {self.total.to_total_str()}"


def _coerce_amount(amount: AmountInput) -> Money:
    if isinstance(amount, Money):
        if amount.cents < 0:
            raise InvalidAmountError(str(amount), "amount must not be negative")
        return amount
    return Money.from_dollars(amount)


def _check_description(description: str) -> str:
    # Lone surrogates (e.g. from undecodable argv bytes) cannot be written
    try:
        description.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidDescriptionError(description) from None
    return description


class Ledger:
    """
    In-memory expense collection bound to a DataStore.

    Use Ledger.open(store) to load the current state; each mutating call
    persists the full collection before returning.
    """

    def __init__(self, store: DataStore[list[Expense]], expenses: list[Expense] | None = None):
        self.store = store
        self._expenses: list[Expense] = list(expenses or [])

    @classmethod
    def open(cls, store: DataStore[list[Expense]]) -> "Ledger":
        """Load a ledger from its store (a missing store is an empty ledger)."""
        return cls(store, store.load())

    @property
    def expenses(self) -> list[Expense]:
        """All expenses in insertion order."""
        return list(self._expenses)

    def __len__(self) -> int:
        return len(self._expenses)

    def next_id(self) -> int:
        """Id the next add will assign: max existing id + 1, or 1 when empty."""
        return max((e.id for e in self._expenses), default=0) + 1

    def get(self, expense_id: int) -> Expense:
        """
        Find an expense by id.

        Raises:
            ExpenseNotFoundError: If no expense has this id
        """
        for expense in self._expenses:
            if expense.id == expense_id:
                return expense
        raise ExpenseNotFoundError(expense_id)

    def add(
        self,
        description: str,
        amount: AmountInput,
        date: DateInput | None = None,
        today: DateInput | None = None,
    ) -> Expense:
        """
        Append a new expense and persist the ledger.

        Args:
            description: Free-form text, may be empty
            amount: Non-negative amount, e.g. "12.34" or 3000
            date: Expense date; defaults to ``today``
            today: Current date, injected for deterministic behaviour
                   (defaults to the system date)

        Returns:
            The stored expense, carrying its newly assigned id

        Raises:
            InvalidAmountError, InvalidDateError, InvalidDescriptionError: On bad
                input (nothing is written)
            PersistenceError: If the ledger cannot be saved
        """
        description = _check_description(description)
        money = _coerce_amount(amount)
        if date is not None:
            expense_date = parse_iso_date(date)
        elif today is not None:
            expense_date = parse_iso_date(today)
        else:
            expense_date = FinancialDate.today()

        expense = Expense(id=self.next_id(), date=expense_date, amount=money, description=description)
        self._commit(self._expenses + [expense])

        logger.info("Added expense %d (%s, %s)", expense.id, expense.date, expense.amount)
        return expense

    def update(
        self,
        expense_id: int,
        description: str | None = None,
        amount: AmountInput | None = None,
        date: DateInput | None = None,
    ) -> Expense:
        """
        Replace the supplied fields of an existing expense and persist.

        Omitted fields are left unchanged; supplying none is a successful no-op.

        Returns:
            The updated expense

        Raises:
            InvalidAmountError, InvalidDateError, InvalidDescriptionError: On bad
                input (nothing is written)
            ExpenseNotFoundError: If no expense has this id
            PersistenceError: If the ledger cannot be saved
        """
        if description is not None:
            _check_description(description)
        money = _coerce_amount(amount) if amount is not None else None
        new_date = parse_iso_date(date) if date is not None else None

        current = self.get(expense_id)
        updated = current.with_changes(description=description, amount=money, date=new_date)

        self._commit([updated if e.id == expense_id else e for e in self._expenses])

        logger.info("Updated expense %d", expense_id)
        return updated

    def delete(self, expense_id: int) -> Expense:
        """
        Remove an expense and persist.

        Returns:
            The removed expense

        Raises:
            ExpenseNotFoundError: If no expense has this id
            PersistenceError: If the ledger cannot be saved
        """
        removed = self.get(expense_id)
        self._commit([e for e in self._expenses if e.id != expense_id])

        logger.info("Deleted expense %d", expense_id)
        return removed

    def list_expenses(self, month: int | None = None) -> list[Expense]:
        """
        Expenses in insertion order, optionally restricted to one month.

        Raises:
            InvalidMonthError: If month is not between 1 and 12
        """
        if month is None:
            return self.expenses

        month = validate_month(month)
        selected = [e for e in self._expenses if e.date.month == month]
        logger.debug("Month %d filter matched %d of %d expenses", month, len(selected), len(self))
        return selected

    def summary(self, month: int | None = None) -> ExpenseSummary:
        """
        Sum of amounts over the expenses selected by ``list_expenses(month)``.

        Raises:
            InvalidMonthError: If month is not between 1 and 12
        """
        selected = self.list_expenses(month)
        total = sum((e.amount for e in selected), Money.zero())
        return ExpenseSummary(total=total, count=len(selected), month=month)

    def monthly_totals(self) -> list[MonthlyTotal]:
        """Totals per calendar month, oldest first."""
        return monthly_totals(self._expenses)

    def _commit(self, expenses: list[Expense]) -> None:
        # Persist first so a failed save leaves memory matching the file
        self.store.save(expenses)
        self._expenses = expenses
