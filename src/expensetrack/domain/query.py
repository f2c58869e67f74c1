"""Expense query engine: time-window filtering and totals.

Everything here is a pure function over already loaded expenses. Nothing
touches the database and inputs are never mutated, so the functions can be
called as often as the presentation layer likes.
"""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from dateutil.relativedelta import relativedelta

from expensetrack.domain.entities import Expense, ExpenseSummary, FilterSelector
from expensetrack.utils.amount_parser import coerce_amount
from expensetrack.utils.date_parser import parse_expense_datetime, to_naive_local

OTHER_CATEGORY = "Other"


def _start_of_day(moment: datetime) -> datetime:
    # Windows are naive local time, like parsed expense dates
    moment = to_naive_local(moment)
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def week_window(now: datetime) -> tuple[datetime, datetime]:
    """Return the [start, end) window of the Sunday-based week containing now."""
    today = _start_of_day(now)
    # weekday(): Monday is 0, Sunday is 6
    days_since_sunday = (today.weekday() + 1) % 7
    start = today - timedelta(days=days_since_sunday)
    return start, start + timedelta(days=7)


def month_window(now: datetime) -> tuple[datetime, datetime]:
    """Return the [start, end) window of the calendar month containing now."""
    start = _start_of_day(now).replace(day=1)
    return start, start + relativedelta(months=1)


def selector_window(
    selector: FilterSelector | str, now: datetime
) -> Optional[tuple[datetime, datetime]]:
    """Return the window for a selector, or None when nothing is filtered out."""
    selector = FilterSelector(selector)
    if selector == FilterSelector.WEEK:
        return week_window(now)
    if selector == FilterSelector.MONTH:
        return month_window(now)
    return None


def filter_expenses(
    expenses: Sequence[Expense],
    selector: FilterSelector | str,
    now: Optional[datetime] = None,
) -> list[Expense]:
    """Return the expenses that fall inside the selector's window.

    Input order is preserved. Under ALL every expense is returned. Under WEEK
    and MONTH an expense without a date, or with a date that does not parse,
    is left out.

    Args:
        expenses: Expenses in display order
        selector: ALL, WEEK or MONTH
        now: Reference time for the window (defaults to the current time)

    Returns:
        New list of matching expenses
    """
    if not expenses:
        return []

    if now is None:
        now = datetime.now()
    window = selector_window(selector, now)
    if window is None:
        return list(expenses)

    start, end = window
    result = []
    for expense in expenses:
        moment = parse_expense_datetime(getattr(expense, "date", None))
        if moment is not None and start <= moment < end:
            result.append(expense)
    return result


def compute_overall_total(expenses: Iterable[Expense]) -> Decimal:
    """Sum the amounts of the given expenses; unusable amounts count as 0."""
    return sum(
        (coerce_amount(getattr(expense, "amount", None)) for expense in expenses),
        Decimal("0"),
    )


def compute_totals_by_category(expenses: Iterable[Expense]) -> dict[str, Decimal]:
    """Sum amounts per category, in order of first appearance.

    Expenses without a category are grouped under "Other".
    """
    totals: dict[str, Decimal] = {}
    for expense in expenses:
        key = getattr(expense, "category", None) or OTHER_CATEGORY
        amount = coerce_amount(getattr(expense, "amount", None))
        totals[key] = totals.get(key, Decimal("0")) + amount
    return totals


def summarize_expenses(
    expenses: Sequence[Expense],
    selector: FilterSelector | str,
    now: Optional[datetime] = None,
) -> ExpenseSummary:
    """Filter expenses and compute both totals in one go."""
    if now is None:
        now = datetime.now()
    selector = FilterSelector(selector)
    filtered = filter_expenses(expenses, selector, now)
    return ExpenseSummary(
        selector=selector,
        expenses=tuple(filtered),
        overall_total=compute_overall_total(filtered),
        totals_by_category=compute_totals_by_category(filtered),
        window=selector_window(selector, now),
    )
