"""Domain layer for expensetrack application.

Services are imported from their own modules (expensetrack.domain.expense,
expensetrack.domain.ledger) so that the database layer can import entities
from here without a circular import.
"""

from expensetrack.domain.entities import (
    Expense,
    ExpenseDraft,
    ExpenseSummary,
    FilterSelector,
    ValidatedExpense,
)
from expensetrack.domain.errors import DomainError, NotFoundError, ValidationError

__all__ = [
    "Expense",
    "ExpenseDraft",
    "ExpenseSummary",
    "FilterSelector",
    "ValidatedExpense",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
