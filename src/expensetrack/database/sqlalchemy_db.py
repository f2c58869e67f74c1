"""Generic SQLAlchemy database implementation."""

import logging
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from expensetrack.database.base import Database
from expensetrack.database.models import Expense, create_session_factory
from expensetrack.database.mappers import expense_to_domain
from expensetrack.domain.entities import Expense as DomainExpense
from expensetrack.domain.errors import NotFoundError, expense_not_found

logger = logging.getLogger(__name__)


class SQLAlchemyDatabase(Database):
    """SQLAlchemy-based implementation of Database interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy database.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def _get_orm_expense(self, expense_id: int) -> Optional[Expense]:
        session = self._get_session()
        return session.query(Expense).filter(Expense.id == expense_id).first()

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    def create_expense(
        self,
        amount: Decimal,
        category: str,
        note: Optional[str],
        date: str,
    ) -> int:
        """Create an expense. Returns the new expense ID."""
        session = self._get_session()
        expense = Expense(amount=amount, category=category, note=note, date=date)
        session.add(expense)
        session.commit()
        logger.debug("Inserted expense %s", expense.id)
        return expense.id

    def get_expense(self, expense_id: int) -> Optional[DomainExpense]:
        """Get expense by ID."""
        expense = self._get_orm_expense(expense_id)
        if expense is None:
            return None
        return expense_to_domain(expense)

    def list_expenses(self) -> list[DomainExpense]:
        """List all expenses, most recently created first."""
        session = self._get_session()
        expenses = session.query(Expense).order_by(Expense.id.desc()).all()
        return [expense_to_domain(exp) for exp in expenses]

    def update_expense(
        self,
        expense_id: int,
        amount: Decimal,
        category: str,
        note: Optional[str],
        date: str,
    ) -> None:
        """Replace every field of an expense except its ID."""
        session = self._get_session()
        expense = self._get_orm_expense(expense_id)
        if expense is None:
            raise NotFoundError(expense_not_found(expense_id))

        expense.amount = amount
        expense.category = category
        expense.note = note
        expense.date = date
        session.commit()
        logger.debug("Updated expense %s", expense_id)

    def delete_expense(self, expense_id: int) -> None:
        """Delete an expense. Does nothing if the ID is unknown."""
        session = self._get_session()
        expense = self._get_orm_expense(expense_id)
        if expense is None:
            logger.debug("Expense %s already absent, nothing to delete", expense_id)
            return
        session.delete(expense)
        session.commit()
        logger.debug("Deleted expense %s", expense_id)
