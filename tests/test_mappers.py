"""Tests for database mappers."""

from decimal import Decimal

from expensetrack.database.models import Expense as ORMExpense
from expensetrack.database.mappers import expense_to_domain
from expensetrack.domain.entities import Expense


class TestExpenseMapper:
    """Tests for Expense mapper."""

    def test_expense_to_domain(self):
        """Test converting ORM Expense to domain Expense."""
        orm_expense = ORMExpense(
            id=7,
            amount=Decimal("12.50"),
            category="Food",
            note="lunch",
            date="2024-05-15",
        )
        domain_expense = expense_to_domain(orm_expense)

        assert isinstance(domain_expense, Expense)
        assert domain_expense.id == 7
        assert domain_expense.amount == Decimal("12.50")
        assert domain_expense.category == "Food"
        assert domain_expense.note == "lunch"
        assert domain_expense.date == "2024-05-15"

    def test_expense_to_domain_converts_float_amount(self):
        """Test that a float amount is converted to Decimal."""
        orm_expense = ORMExpense(id=1, amount=12.5, category="Food", note=None, date="2024-05-15")

        domain_expense = expense_to_domain(orm_expense)

        assert domain_expense.amount == Decimal("12.5")
        assert domain_expense.note is None
