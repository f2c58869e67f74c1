"""Mapper functions to convert between domain models and SQLAlchemy models."""

from decimal import Decimal

from expensetrack.domain import entities as domain
from expensetrack.database.models import Expense as ORMExpense


def expense_to_domain(orm_expense: ORMExpense) -> domain.Expense:
    """Convert SQLAlchemy Expense model to domain Expense entity."""
    amount = orm_expense.amount
    if amount is not None and not isinstance(amount, Decimal):
        amount = Decimal(str(amount))
    return domain.Expense(
        id=orm_expense.id,
        amount=amount,
        category=orm_expense.category,
        note=orm_expense.note,
        date=orm_expense.date,
    )
