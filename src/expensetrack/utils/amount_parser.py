"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(amount_str: str | int | float | Decimal) -> Decimal:
    """Parse an amount into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Numbers are accepted as-is. Floats go through their string form so that
    12.5 becomes Decimal("12.5") rather than its binary expansion.

    Args:
        amount_str: Amount string or number

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount cannot be parsed or is not a finite number
    """
    if isinstance(amount_str, bool):
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if isinstance(amount_str, (int, float, Decimal)):
        amount = Decimal(str(amount_str))
        if not amount.is_finite():
            raise ValueError(f"Amount '{amount_str}' is not a finite number")
        return amount

    if amount_str is None or not amount_str.strip():
        raise ValueError("Empty amount string")

    # Remove whitespace
    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency symbols
    amount_str = re.sub(r"[$€£¥]", "", amount_str)

    # Remove commas
    amount_str = amount_str.replace(",", "")

    # Remove whitespace again
    amount_str = amount_str.strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e!r}")

    if not amount.is_finite():
        raise ValueError(f"Amount '{amount_str}' is not a finite number")
    if is_negative:
        amount = -amount
    return amount


def coerce_amount(value: object) -> Decimal:
    """Best-effort conversion of a stored amount; anything unusable counts as 0."""
    if value is None:
        return Decimal("0")
    try:
        return parse_amount(value)
    except (ValueError, AttributeError):
        return Decimal("0")
