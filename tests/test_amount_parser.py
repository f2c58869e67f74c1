"""Tests for amount parsing helpers."""

from decimal import Decimal

import pytest

from expensetrack.utils.amount_parser import coerce_amount, parse_amount


@pytest.mark.parametrize(
    "value, expected",
    [
        ("123.45", Decimal("123.45")),
        ("$123.45", Decimal("123.45")),
        ("-123.45", Decimal("-123.45")),
        ("1,234.56", Decimal("1234.56")),
        ("(12.00)", Decimal("-12.00")),
        (" €7 ", Decimal("7")),
        (12.5, Decimal("12.5")),
        (40, Decimal("40")),
        (Decimal("3.30"), Decimal("3.30")),
    ],
)
def test_parse_amount(value, expected):
    assert parse_amount(value) == expected


@pytest.mark.parametrize("value", ["", "  ", "abc", "12abc", "NaN", "inf", None, True])
def test_parse_amount_invalid(value):
    with pytest.raises(ValueError):
        parse_amount(value)


def test_coerce_amount_falls_back_to_zero():
    assert coerce_amount(None) == Decimal("0")
    assert coerce_amount("abc") == Decimal("0")
    assert coerce_amount(object()) == Decimal("0")
    assert coerce_amount("4.5") == Decimal("4.5")
