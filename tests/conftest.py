"""Shared pytest fixtures for expensetrack tests."""

import tempfile
import os
from datetime import datetime
from decimal import Decimal

import pytest

from expensetrack.database.factories import create_sqlite_database
from expensetrack.domain.entities import Expense
from expensetrack.domain.expense import ExpenseService
from expensetrack.domain.ledger import ExpenseLedger

# Wednesday; its week runs Sunday 2024-05-12 to Sunday 2024-05-19
FIXED_NOW = datetime(2024, 5, 15, 14, 30)


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def now():
    """Fixed reference time for window calculations."""
    return FIXED_NOW


@pytest.fixture
def expense_service(temp_db):
    """Create an ExpenseService with a temporary database."""
    return ExpenseService(temp_db)


@pytest.fixture
def ledger(temp_db, now):
    """Create an ExpenseLedger whose clock is pinned to FIXED_NOW."""
    ledger = ExpenseLedger(temp_db, clock=lambda: now)
    ledger.reload()
    return ledger


@pytest.fixture
def make_expense():
    """Build in-memory Expense entities without touching the database."""
    counter = {"id": 0}

    def _make(amount="10.00", category="Food", date="2024-05-15", note=None, id=None):
        counter["id"] += 1
        return Expense(
            id=id if id is not None else counter["id"],
            amount=Decimal(amount) if isinstance(amount, str) else amount,
            category=category,
            note=note,
            date=date,
        )

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
