#!/usr/bin/env python3
"""
Ledger Domain Models

Expense record plus its row (de)serialization for the backing file.
"""

from dataclasses import dataclass, replace
from pathlib import Path

from ..core.currency import parse_amount_to_cents
from ..core.dates import FinancialDate
from ..core.exceptions import CorruptLedgerError, LedgerError
from ..core.money import Money

COLUMNS = ("id", "date", "amount", "description")


@dataclass(frozen=True)
class Expense:
    """
    One monetary record in the ledger.

    The id is assigned by the Ledger and never supplied by the caller on
    creation. Amounts are non-negative and held as integer cents.
    """

    id: int
    date: FinancialDate
    amount: Money
    description: str = ""

    def with_changes(
        self,
        description: str | None = None,
        amount: Money | None = None,
        date: FinancialDate | None = None,
    ) -> "Expense":
        """Return a copy with only the supplied fields replaced."""
        changes: dict = {}
        if description is not None:
            changes["description"] = description
        if amount is not None:
            changes["amount"] = amount
        if date is not None:
            changes["date"] = date
        return replace(self, **changes) if changes else self

    def to_row(self) -> list[str]:
        """Serialize to backing file fields in COLUMNS order."""
        return [
            str(self.id),
            self.date.to_iso_string(),
            self.amount.to_plain_str(),
            self.description,
        ]

    @classmethod
    def from_row(cls, fields: dict[str, str], line_number: int, path: Path | None = None) -> "Expense":
        """
        Parse one backing file row keyed by column name.

        Raises:
            CorruptLedgerError: If any field is malformed
        """
        try:
            expense_id = int(fields["id"].strip())
        except ValueError:
            raise CorruptLedgerError(path, line_number, f"invalid id {fields['id']!r}") from None
        if expense_id < 1:
            raise CorruptLedgerError(path, line_number, f"id must be positive, got {expense_id}")

        date_str = fields["date"].strip()
        try:
            expense_date = FinancialDate.from_string(date_str)
        except ValueError:
            raise CorruptLedgerError(path, line_number, f"invalid date {date_str!r}") from None

        try:
            amount = Money.from_cents(parse_amount_to_cents(fields["amount"]))
        except LedgerError as e:
            raise CorruptLedgerError(path, line_number, str(e)) from None

        return cls(
            id=expense_id,
            date=expense_date,
            amount=amount,
            description=fields["description"],
        )
