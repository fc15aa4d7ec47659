#!/usr/bin/env python3
"""
Ledger DataStore Implementation

Flat-file storage for expense records. One record per line, fields separated
by ';' so that amounts written with either decimal separator never collide
with the delimiter. A description containing the delimiter, a double quote or
a line break (LF or CR) is double-quoted with embedded quotes doubled
(csv minimal quoting). Records end in CRLF; LF-only files are read as well.

Example file:
    id;date;amount;description
    1;2024-05-01;3000.00;dog surgery
    2;2024-05-03;323.00;"phone; case included"
"""

import csv
import logging
import os
import tempfile
from pathlib import Path

from ..core.datastore_mixin import SingleFileStoreMixin
from ..core.exceptions import CorruptLedgerError, PersistenceError
from .models import COLUMNS, Expense

logger = logging.getLogger(__name__)

DELIMITER = ";"


class LedgerFileStore(SingleFileStoreMixin):
    """
    DataStore for the semicolon-delimited ledger file.

    Reads the whole file on load and rewrites the whole file on save.
    """

    def __init__(self, path: str | Path):
        """
        Initialize ledger file store.

        Args:
            path: Backing file location (created on first save)
        """
        self.path = Path(path)

    def load(self) -> list[Expense]:
        """
        Load every expense from the backing file.

        Returns:
            Expenses in file order; empty list if the file does not exist

        Raises:
            CorruptLedgerError: If any line cannot be parsed
            PersistenceError: If the file cannot be read
        """
        if not self.path.exists():
            logger.debug("Ledger file %s does not exist; starting empty", self.path)
            return []

        try:
            # utf-8-sig: spreadsheet tools often prepend a BOM to the header
            with open(self.path, newline="", encoding="utf-8-sig") as f:
                expenses = self._parse(csv.reader(f, delimiter=DELIMITER))
        except csv.Error as e:
            raise CorruptLedgerError(self.path, 0, str(e)) from e
        except UnicodeDecodeError as e:
            raise CorruptLedgerError(self.path, 0, f"file is not valid UTF-8 ({e.reason})") from e
        except OSError as e:
            raise PersistenceError(f"Cannot read ledger file {self.path}: {e.strerror or e}", self.path) from e

        logger.debug("Loaded %d expenses from %s", len(expenses), self.path)
        return expenses

    def _parse(self, reader) -> list[Expense]:
        """Parse csv rows, honouring an optional header line."""
        columns: tuple[str, ...] = COLUMNS
        expenses: list[Expense] = []
        seen_ids: set[int] = set()
        first_row = True

        for row in reader:
            line_number = reader.line_num
            if not row or (len(row) == 1 and not row[0].strip()):
                continue

            if first_row:
                first_row = False
                if row[0].strip().lower() == "id":
                    columns = self._parse_header(row, line_number)
                    continue

            if len(row) != len(columns):
                raise CorruptLedgerError(
                    self.path, line_number, f"expected {len(columns)} fields, found {len(row)}"
                )

            expense = Expense.from_row(dict(zip(columns, row)), line_number, self.path)
            if expense.id in seen_ids:
                raise CorruptLedgerError(self.path, line_number, f"duplicate id {expense.id}")
            seen_ids.add(expense.id)
            expenses.append(expense)

        return expenses

    def _parse_header(self, row: list[str], line_number: int) -> tuple[str, ...]:
        """Map header names to column order; any column order is accepted."""
        names = tuple(cell.strip().lower() for cell in row)
        if sorted(names) != sorted(COLUMNS):
            raise CorruptLedgerError(
                self.path,
                line_number,
                f"unexpected header {DELIMITER.join(row)!r}, expected columns {', '.join(COLUMNS)}",
            )
        return names

    def save(self, data: list[Expense]) -> None:
        """
        Rewrite the backing file with the given expenses.

        The new content is written to a temporary file next to the target and
        moved into place, so a failed save leaves the old file untouched.

        Raises:
            PersistenceError: If the file cannot be written
        """
        tmp_path: Path | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
                newline="",
                encoding="utf-8",
            ) as f:
                tmp_path = Path(f.name)
                # A field holding any lineterminator character gets quoted, so
                # "\r\n" keeps bare carriage returns in descriptions readable
                writer = csv.writer(f, delimiter=DELIMITER, lineterminator="\r\n")
                writer.writerow(COLUMNS)
                for expense in data:
                    writer.writerow(expense.to_row())
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except (OSError, UnicodeEncodeError) as e:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            reason = getattr(e, "strerror", None) or e
            raise PersistenceError(f"Cannot write ledger file {self.path}: {reason}", self.path) from e

        logger.debug("Wrote %d expenses to %s", len(data), self.path)

    def item_count(self) -> int | None:
        """Get count of expenses in the backing file."""
        if not self.exists():
            return None
        return len(self.load())

    def summary_text(self) -> str:
        """Get human-readable summary."""
        count = self.item_count()
        if count is None:
            return f"No ledger file at {self.path}"
        return f"Ledger file {self.path}: {count} expenses"
