"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from datetime import date
from pathlib import Path

import pytest

from expenses.core.dates import FinancialDate
from expenses.core.exceptions import PersistenceError
from expenses.core.money import Money
from expenses.ledger import Expense, LedgerFileStore


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def ledger_path(temp_dir) -> Path:
    """Location of a (not yet existing) ledger file."""
    return temp_dir / "expenses.csv"


@pytest.fixture
def store(ledger_path) -> LedgerFileStore:
    """File store bound to the temporary ledger path."""
    return LedgerFileStore(ledger_path)


def make_expense(expense_id: int, iso_date: str, cents: int, description: str = "") -> Expense:
    """Build an Expense without going through the Ledger."""
    return Expense(
        id=expense_id,
        date=FinancialDate.from_string(iso_date),
        amount=Money.from_cents(cents),
        description=description,
    )


@pytest.fixture
def expense_factory():
    """Factory for Expense objects: expense_factory(id, "YYYY-MM-DD", cents, description)."""
    return make_expense


@pytest.fixture
def month_filter_expenses() -> list[Expense]:
    """Two May expenses in different years and one June expense."""
    return [
        make_expense(1, "2023-05-01", 1000, "books"),
        make_expense(2, "2024-05-01", 2000, "groceries"),
        make_expense(3, "2024-06-01", 500, "coffee"),
    ]


@pytest.fixture
def today() -> FinancialDate:
    """Fixed 'current date' for deterministic ledger operations."""
    return FinancialDate(date=date(2024, 5, 15))


class FailingStore:
    """In-memory store whose save always fails, for rollback tests."""

    def __init__(self, expenses: list[Expense] | None = None):
        self.expenses = list(expenses or [])
        self.save_attempts = 0

    def load(self) -> list[Expense]:
        return list(self.expenses)

    def save(self, data: list[Expense]) -> None:
        self.save_attempts += 1
        raise PersistenceError("disk full")


@pytest.fixture
def failing_store(month_filter_expenses) -> FailingStore:
    return FailingStore(month_filter_expenses)


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables and a fresh configuration."""
    # Ensure tests never touch a real ledger
    monkeypatch.setenv("EXPENSES_ENV", "test")
    monkeypatch.setenv("EXPENSES_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("EXPENSES_FILE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.setattr("expenses.core.config._config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "ledger: Tests for ledger operations and persistence")
