"""Utility functions for expensetrack."""

from expensetrack.utils.date_parser import (
    parse_expense_datetime,
    expand_relative_date,
    to_naive_local,
)
from expensetrack.utils.amount_parser import parse_amount, coerce_amount

__all__ = [
    "parse_expense_datetime",
    "expand_relative_date",
    "to_naive_local",
    "parse_amount",
    "coerce_amount",
]
