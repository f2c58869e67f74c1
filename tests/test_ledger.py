"""Tests for the in-memory expense ledger."""

from decimal import Decimal
import logging

import pytest

from expensetrack.domain.entities import ExpenseDraft, FilterSelector
from expensetrack.domain.errors import NotFoundError
from expensetrack.domain.ledger import draft_from_expense


def test_starts_empty_with_all_filter(ledger):
    assert ledger.expenses == []
    assert ledger.selector is FilterSelector.ALL
    summary = ledger.summary()
    assert summary.expenses == ()
    assert summary.overall_total == Decimal("0")
    assert summary.totals_by_category == {}


def test_add_reloads_expenses(ledger):
    assert ledger.add("12.50", "Food", None, "2024-05-15") is True
    assert len(ledger.expenses) == 1
    assert ledger.expenses[0].category == "Food"


def test_add_declined_for_negative_amount(ledger, caplog):
    with caplog.at_level(logging.INFO, logger="expensetrack.domain.ledger"):
        assert ledger.add("-5", "Food", None, "2024-05-15") is False
    assert ledger.expenses == []
    assert ledger.reload() == []
    assert "Declined new expense" in caplog.text


def test_add_declined_for_bad_date(ledger):
    assert ledger.add("5", "Food", None, "not-a-date") is False
    assert ledger.reload() == []


@pytest.mark.parametrize("amount", ["0.001", "12.345"])
def test_add_declined_for_sub_cent_amount(ledger, amount):
    assert ledger.add(amount, "Food", None, "2024-05-15") is False
    assert ledger.reload() == []


def test_add_declined_for_out_of_range_aware_date(ledger):
    assert ledger.add("5", "Food", None, "9999-12-31T23:59:59-12:00") is False
    assert ledger.reload() == []


def test_stored_amounts_match_what_was_accepted(ledger):
    for amount in ["0.01", "12.5", "12.50", "0.001", "1,234.56"]:
        ledger.add(amount, "Food", None, "2024-05-15")
    stored = sorted(expense.amount for expense in ledger.reload())
    assert stored == [Decimal("0.01"), Decimal("12.50"), Decimal("12.50"), Decimal("1234.56")]
    assert all(amount > 0 for amount in stored)


def test_reads_back_what_was_written(ledger, temp_db):
    ledger.add("5", "Food", None, "2024-05-15")
    assert ledger.expenses == temp_db.list_expenses()


def test_summary_uses_active_filter(ledger):
    ledger.add("12.50", "Food", None, "2024-05-15")
    ledger.add("40", "Rent", None, "2024-05-07")
    ledger.add("3", "Coffee", None, "2024-04-30")

    ledger.set_filter(FilterSelector.WEEK)
    week = ledger.summary()
    assert [e.category for e in week.expenses] == ["Food"]
    assert week.overall_total == Decimal("12.50")

    ledger.set_filter("MONTH")
    month = ledger.summary()
    assert [e.category for e in month.expenses] == ["Rent", "Food"]
    assert month.totals_by_category == {"Rent": Decimal("40"), "Food": Decimal("12.50")}

    ledger.set_filter(FilterSelector.ALL)
    assert ledger.summary().overall_total == Decimal("55.50")


def test_delete_reloads(ledger):
    ledger.add("5", "Food", None, "2024-05-15")
    expense_id = ledger.expenses[0].id
    ledger.delete(expense_id)
    assert ledger.expenses == []


def test_begin_edit_returns_draft(ledger):
    ledger.add("5", "Food", "lunch", "2024-05-15")
    expense_id = ledger.expenses[0].id

    draft = ledger.begin_edit(expense_id)

    assert ledger.editing.id == expense_id
    assert Decimal(draft.amount) == Decimal("5")
    assert draft.category == "Food"
    assert draft.note == "lunch"
    assert draft.date == "2024-05-15"


def test_begin_edit_missing_expense(ledger):
    with pytest.raises(NotFoundError):
        ledger.begin_edit(42)


def test_save_edit(ledger):
    ledger.add("5", "Food", None, "2024-05-15")
    expense_id = ledger.expenses[0].id
    ledger.begin_edit(expense_id)

    saved = ledger.save_edit(ExpenseDraft(amount="8", category="Lunch", note="", date="2024-05-16"))

    assert saved is True
    assert ledger.editing is None
    expense = ledger.expenses[0]
    assert expense.id == expense_id
    assert expense.category == "Lunch"
    assert expense.amount == Decimal("8")
    assert expense.note is None


def test_save_edit_declined_keeps_target(ledger):
    ledger.add("5", "Food", None, "2024-05-15")
    expense_id = ledger.expenses[0].id
    ledger.begin_edit(expense_id)

    saved = ledger.save_edit(ExpenseDraft(amount="0", category="Food", note="", date="2024-05-15"))

    assert saved is False
    assert ledger.editing.id == expense_id
    assert ledger.expenses[0].amount == Decimal("5")


def test_save_edit_without_target(ledger):
    draft = ExpenseDraft(amount="5", category="Food", note="", date="2024-05-15")
    assert ledger.save_edit(draft) is False


def test_cancel_edit(ledger):
    ledger.add("5", "Food", None, "2024-05-15")
    ledger.begin_edit(ledger.expenses[0].id)
    ledger.cancel_edit()
    assert ledger.editing is None


def test_delete_clears_edit_target(ledger):
    ledger.add("5", "Food", None, "2024-05-15")
    expense_id = ledger.expenses[0].id
    ledger.begin_edit(expense_id)
    ledger.delete(expense_id)
    assert ledger.editing is None


def test_draft_defaults_missing_date_to_today(make_expense):
    expense = make_expense(amount="5", date="", note=None)
    draft = draft_from_expense(expense, today="2024-05-15")
    assert draft.date == "2024-05-15"
    assert draft.note == ""
