"""Domain model entities for expensetrack.

These are pure data classes representing business concepts, independent of
the database schema. The query engine and the CLI only ever see these types.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Expense:
    """Expense domain entity."""

    id: int
    amount: Decimal
    category: str
    note: Optional[str]
    date: str


class FilterSelector(str, Enum):
    """Time window applied to the expense list and its totals."""

    ALL = "ALL"
    WEEK = "WEEK"
    MONTH = "MONTH"

    @property
    def label(self) -> str:
        return _SELECTOR_LABELS[self]


_SELECTOR_LABELS = {
    FilterSelector.ALL: "All",
    FilterSelector.WEEK: "This Week",
    FilterSelector.MONTH: "This Month",
}


@dataclass(frozen=True)
class ExpenseSummary:
    """Result of evaluating the query engine for one selector."""

    selector: FilterSelector
    expenses: tuple[Expense, ...]
    overall_total: Decimal
    totals_by_category: dict[str, Decimal] = field(default_factory=dict)
    window: Optional[tuple[datetime, datetime]] = None


@dataclass(frozen=True)
class ValidatedExpense:
    """Expense fields that passed write-path validation."""

    amount: Decimal
    category: str
    note: Optional[str]
    date: str


@dataclass(frozen=True)
class ExpenseDraft:
    """Editable string form of an expense, as entered by the user."""

    amount: str
    category: str
    note: str
    date: str
