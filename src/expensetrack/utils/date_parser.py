"""Date parsing utilities."""

from datetime import date, datetime, timedelta
from typing import Optional

from dateutil import parser as date_parser

RELATIVE_DATES = ("today", "yesterday", "tomorrow")


def _relative_date(keyword: str, today: date) -> Optional[date]:
    offsets = {"today": 0, "yesterday": -1, "tomorrow": 1}
    if keyword not in offsets:
        return None
    return today + timedelta(days=offsets[keyword])


def expand_relative_date(date_str: str, today: Optional[date] = None) -> str:
    """Replace a relative date keyword with its ISO date.

    Anything that is not one of RELATIVE_DATES is returned unchanged, so
    absolute dates are stored exactly as the user typed them.
    """
    if today is None:
        today = date.today()
    relative = _relative_date(date_str.strip().lower(), today)
    if relative is None:
        return date_str
    return relative.isoformat()


def to_naive_local(moment: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive values pass through.

    Raises:
        OverflowError: If the conversion leaves the supported date range
    """
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


def parse_expense_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse a stored expense date into a naive local datetime.

    Returns None for absent, empty or unparseable values instead of raising;
    date-only strings resolve to midnight of that day.
    """
    if value is None:
        return None
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime(value.year, value.month, value.day)

    try:
        if isinstance(value, datetime):
            parsed = value
        else:
            text = str(value).strip()
            if not text:
                return None
            parsed = date_parser.parse(text)
        return to_naive_local(parsed)
    except (ValueError, OverflowError, TypeError):
        return None
