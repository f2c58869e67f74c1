"""Expense domain service."""

import logging
from decimal import Decimal
from typing import Optional

from expensetrack.database.base import Database
from expensetrack.domain.entities import Expense
from expensetrack.domain.errors import NotFoundError, expense_not_found
from expensetrack.domain.validation import validate_expense_input

logger = logging.getLogger(__name__)


class ExpenseService:
    """Service for managing expenses."""

    def __init__(self, db: Database):
        """Initialize expense service.

        Args:
            db: Database instance
        """
        self.db = db

    def add_expense(
        self,
        amount: str | Decimal,
        category: str,
        note: Optional[str] = None,
        date: Optional[str] = None,
    ) -> int:
        """Create an expense.

        Args:
            amount: Expense amount, greater than 0
            category: Category label
            note: Optional note
            date: Expense date string

        Returns:
            Expense ID

        Raises:
            ValidationError: If any field is invalid; nothing is written
        """
        validated = validate_expense_input(amount, category, note, date)
        expense_id = self.db.create_expense(
            amount=validated.amount,
            category=validated.category,
            note=validated.note,
            date=validated.date,
        )
        logger.debug("Added expense %s (%s %s)", expense_id, validated.category, validated.amount)
        return expense_id

    def edit_expense(
        self,
        expense_id: int,
        amount: str | Decimal,
        category: str,
        note: Optional[str],
        date: Optional[str],
    ) -> None:
        """Replace all fields of an expense except its ID.

        Raises:
            ValidationError: If any field is invalid; nothing is written
            NotFoundError: If the expense doesn't exist
        """
        validated = validate_expense_input(amount, category, note, date)

        if self.db.get_expense(expense_id) is None:
            raise NotFoundError(expense_not_found(expense_id))

        self.db.update_expense(
            expense_id=expense_id,
            amount=validated.amount,
            category=validated.category,
            note=validated.note,
            date=validated.date,
        )
        logger.debug("Edited expense %s", expense_id)

    def delete_expense(self, expense_id: int) -> None:
        """Delete an expense. Unknown IDs are ignored."""
        self.db.delete_expense(expense_id)
        logger.debug("Deleted expense %s", expense_id)

    def get_expense(self, expense_id: int) -> Optional[Expense]:
        """Get expense by ID.

        Returns:
            Expense entity or None if not found
        """
        return self.db.get_expense(expense_id)

    def require_expense(self, expense_id: int) -> Expense:
        """Get expense by ID or raise NotFoundError."""
        expense = self.db.get_expense(expense_id)
        if expense is None:
            raise NotFoundError(expense_not_found(expense_id))
        return expense

    def list_expenses(self) -> list[Expense]:
        """List all expenses, most recently created first."""
        return self.db.list_expenses()
