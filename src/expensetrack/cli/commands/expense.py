"""Expense edit and delete commands."""

import click

from expensetrack.cli.error_handling import handle_declined_write, handle_domain_error
from expensetrack.domain.errors import NotFoundError, ValidationError, expense_not_found
from expensetrack.domain.expense import ExpenseService
from expensetrack.domain.ledger import draft_from_expense
from expensetrack.utils.date_parser import expand_relative_date


@click.command("edit")
@click.argument("expense_id", type=int)
@click.option("--amount", help="New amount, greater than 0")
@click.option("--category", help="New category label")
@click.option("--note", help="New note, or empty string to clear it")
@click.option("--date", help="New date (YYYY-MM-DD or 'today', 'yesterday', 'tomorrow')")
@click.pass_context
def edit_expense(
    ctx,
    expense_id: int,
    amount: str | None,
    category: str | None,
    note: str | None,
    date: str | None,
) -> None:
    """Edit an expense.

    Fields that are not given keep their current value. Use --note "" to
    clear the note.

    Examples:
        expensetrack edit 3 --amount 15.00
        expensetrack edit 3 --category Groceries --note ""
    """
    service = ExpenseService(ctx.obj["db"])

    try:
        current = draft_from_expense(service.require_expense(expense_id))
    except NotFoundError as e:
        handle_domain_error(ctx, e)
        return

    try:
        service.edit_expense(
            expense_id,
            amount=current.amount if amount is None else amount,
            category=current.category if category is None else category,
            note=current.note if note is None else note,
            date=current.date if date is None else expand_relative_date(date),
        )
    except ValidationError as e:
        handle_declined_write(ctx, e)
        return

    click.echo(f"Updated expense {expense_id}")


@click.command("delete")
@click.argument("expense_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_expense(ctx, expense_id: int, yes: bool) -> None:
    """Delete an expense.

    Examples:
        expensetrack delete 3
        expensetrack delete 3 --yes
    """
    service = ExpenseService(ctx.obj["db"])

    expense = service.get_expense(expense_id)
    if expense is None:
        handle_domain_error(ctx, NotFoundError(expense_not_found(expense_id)))
        return

    # Confirm deletion
    if not yes and not click.confirm(
        f"Are you sure you want to delete expense {expense_id} "
        f"(${expense.amount:,.2f}, {expense.category})?"
    ):
        click.echo("Deletion cancelled.")
        return

    service.delete_expense(expense_id)
    click.echo(f"Deleted expense {expense_id}")


def register_commands(cli: click.Group) -> None:
    """Register edit and delete commands with main CLI."""
    cli.add_command(edit_expense)
    cli.add_command(delete_expense)
