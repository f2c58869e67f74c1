"""Write-path validation shared by adding and editing expenses."""

from decimal import Decimal, InvalidOperation
from typing import Optional

from expensetrack.domain.entities import ValidatedExpense
from expensetrack.domain.errors import (
    ValidationError,
    empty_category,
    empty_date,
    invalid_amount,
    invalid_date,
    too_precise_amount,
)
from expensetrack.utils.amount_parser import parse_amount
from expensetrack.utils.date_parser import parse_expense_datetime

AMOUNT_PRECISION = Decimal("0.01")


def validate_expense_input(
    amount: str | int | float | Decimal | None,
    category: Optional[str],
    note: Optional[str],
    date: Optional[str],
) -> ValidatedExpense:
    """Validate and normalize user-entered expense fields.

    Args:
        amount: Amount as typed or as a number; must be greater than 0
        category: Category label; must not be blank
        note: Optional note; blank notes become None
        date: Date string; must not be blank and must parse

    Returns:
        ValidatedExpense with trimmed values

    Raises:
        ValidationError: If any field is invalid
    """
    try:
        amount_value = parse_amount(amount)
    except (ValueError, AttributeError):
        raise ValidationError(invalid_amount(amount))
    if amount_value <= 0:
        raise ValidationError(invalid_amount(amount))
    # Amounts are stored as NUMERIC(10, 2)
    try:
        stored = amount_value.quantize(AMOUNT_PRECISION)
    except InvalidOperation:
        raise ValidationError(invalid_amount(amount))
    if stored != amount_value:
        raise ValidationError(too_precise_amount(amount))

    trimmed_category = (category or "").strip()
    if not trimmed_category:
        raise ValidationError(empty_category())

    trimmed_date = (date or "").strip()
    if not trimmed_date:
        raise ValidationError(empty_date())
    if parse_expense_datetime(trimmed_date) is None:
        raise ValidationError(invalid_date(trimmed_date))

    trimmed_note = (note or "").strip()

    return ValidatedExpense(
        amount=amount_value,
        category=trimmed_category,
        note=trimmed_note or None,
        date=trimmed_date,
    )
