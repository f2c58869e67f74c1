"""Abstract database interface."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from expensetrack.domain.entities import Expense


class Database(ABC):
    """Abstract database interface for expensetrack."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def create_expense(
        self,
        amount: Decimal,
        category: str,
        note: Optional[str],
        date: str,
    ) -> int:
        """Create an expense. Returns the new expense ID."""
        pass

    @abstractmethod
    def get_expense(self, expense_id: int) -> Optional[Expense]:
        """Get expense by ID."""
        pass

    @abstractmethod
    def list_expenses(self) -> list[Expense]:
        """List all expenses, most recently created first."""
        pass

    @abstractmethod
    def update_expense(
        self,
        expense_id: int,
        amount: Decimal,
        category: str,
        note: Optional[str],
        date: str,
    ) -> None:
        """Replace every field of an expense except its ID.

        Raises:
            NotFoundError: If the expense does not exist
        """
        pass

    @abstractmethod
    def delete_expense(self, expense_id: int) -> None:
        """Delete an expense. Does nothing if the ID is unknown."""
        pass
