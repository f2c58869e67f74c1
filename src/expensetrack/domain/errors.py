"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


def expense_not_found(expense_id: int) -> str:
    """Return message for missing expense."""
    return f"Expense {expense_id} not found"


def invalid_amount(amount: object) -> str:
    """Return message for an amount that is not a positive number."""
    return f"Amount must be a number greater than 0 (got '{amount}')"


def empty_category() -> str:
    """Return message for a blank category."""
    return "Category is required"


def empty_date() -> str:
    """Return message for a blank date."""
    return "Date is required"


def invalid_date(date_str: str) -> str:
    """Return message for a date that does not parse."""
    return f"Date '{date_str}' is not a valid calendar date"


def no_edit_in_progress() -> str:
    """Return message when saving an edit that was never started."""
    return "No expense is being edited"


def too_precise_amount(amount: object) -> str:
    """Return message for an amount with more than two decimal places."""
    return f"Amount must have at most 2 decimal places (got '{amount}')"
