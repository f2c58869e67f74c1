"""Application state for an expense list view.

ExpenseLedger owns what a screen would keep in memory: the loaded expenses,
the active filter and the expense being edited. Every write goes to the
database and is followed by a full reload, so the in-memory list always
reflects what is stored.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional

from expensetrack.database.base import Database
from expensetrack.domain.entities import (
    Expense,
    ExpenseDraft,
    ExpenseSummary,
    FilterSelector,
)
from expensetrack.domain.errors import ValidationError, no_edit_in_progress
from expensetrack.domain.expense import ExpenseService
from expensetrack.domain.query import summarize_expenses

logger = logging.getLogger(__name__)


def draft_from_expense(expense: Expense, today: Optional[str] = None) -> ExpenseDraft:
    """Build the editable form of a stored expense."""
    if today is None:
        today = datetime.now().date().isoformat()
    return ExpenseDraft(
        amount=str(expense.amount),
        category=expense.category or "",
        note=expense.note or "",
        date=expense.date or today,
    )


class ExpenseLedger:
    """In-memory expense list kept in sync with the database."""

    def __init__(
        self,
        db: Database,
        selector: FilterSelector = FilterSelector.ALL,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the ledger.

        Args:
            db: Database instance
            selector: Initial filter
            clock: Returns the reference time for WEEK and MONTH filters
        """
        self.service = ExpenseService(db)
        self.selector = FilterSelector(selector)
        self.clock = clock
        self.expenses: list[Expense] = []
        self.editing: Optional[Expense] = None

    def reload(self) -> list[Expense]:
        """Re-read every expense from the database."""
        self.expenses = self.service.list_expenses()
        return self.expenses

    def set_filter(self, selector: FilterSelector | str) -> None:
        self.selector = FilterSelector(selector)

    def summary(self) -> ExpenseSummary:
        """Evaluate the active filter against the loaded expenses."""
        return summarize_expenses(self.expenses, self.selector, self.clock())

    def add(
        self,
        amount: str | Decimal,
        category: str,
        note: Optional[str],
        date: Optional[str],
    ) -> bool:
        """Add an expense; returns False if the input was declined."""
        try:
            self.service.add_expense(amount, category, note, date)
        except ValidationError as e:
            logger.info("Declined new expense: %s", e)
            return False
        self.reload()
        return True

    def edit(
        self,
        expense_id: int,
        amount: str | Decimal,
        category: str,
        note: Optional[str],
        date: Optional[str],
    ) -> bool:
        """Replace an expense's fields; returns False if the input was declined.

        Raises:
            NotFoundError: If the expense doesn't exist
        """
        try:
            self.service.edit_expense(expense_id, amount, category, note, date)
        except ValidationError as e:
            logger.info("Declined edit of expense %s: %s", expense_id, e)
            return False
        self.reload()
        return True

    def delete(self, expense_id: int) -> None:
        self.service.delete_expense(expense_id)
        if self.editing is not None and self.editing.id == expense_id:
            self.editing = None
        self.reload()

    def begin_edit(self, expense_id: int) -> ExpenseDraft:
        """Select an expense for editing and return its editable form.

        Raises:
            NotFoundError: If the expense doesn't exist
        """
        self.editing = self.service.require_expense(expense_id)
        return draft_from_expense(self.editing, self.clock().date().isoformat())

    def cancel_edit(self) -> None:
        self.editing = None

    def save_edit(self, draft: ExpenseDraft) -> bool:
        """Write the draft back to the expense being edited.

        Returns False without writing when no edit was started. The edit
        target is kept when the draft is declined so the user can correct it.
        """
        if self.editing is None:
            logger.info("Declined edit: %s", no_edit_in_progress())
            return False
        saved = self.edit(
            self.editing.id,
            draft.amount,
            draft.category,
            draft.note,
            draft.date,
        )
        if saved:
            self.editing = None
        return saved
