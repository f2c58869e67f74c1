"""Add expense command."""

import click

from expensetrack.cli.error_handling import handle_declined_write
from expensetrack.domain.errors import ValidationError
from expensetrack.domain.expense import ExpenseService
from expensetrack.utils.date_parser import expand_relative_date


@click.command("add")
@click.option("--amount", required=True, help="Expense amount, greater than 0 (e.g., 12.50)")
@click.option("--category", required=True, help="Category label (e.g., Food)")
@click.option("--note", help="Optional note")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Expense date (YYYY-MM-DD or 'today', 'yesterday', 'tomorrow')",
)
@click.pass_context
def add_expense(ctx, amount: str, category: str, note: str | None, date: str):
    """Record an expense.

    Examples:
        expensetrack add --amount 12.50 --category Food
        expensetrack add --amount 40 --category Rent --date 2024-01-01 --note "January"
    """
    db = ctx.obj["db"]
    service = ExpenseService(db)

    try:
        expense_id = service.add_expense(
            amount=amount,
            category=category,
            note=note,
            date=expand_relative_date(date),
        )
    except ValidationError as e:
        handle_declined_write(ctx, e)
        return

    expense = service.get_expense(expense_id)
    click.echo(f"Created expense {expense_id}")
    click.echo(f"  Amount: ${expense.amount:,.2f}")
    click.echo(f"  Category: {expense.category}")
    click.echo(f"  Date: {expense.date}")
    if expense.note:
        click.echo(f"  Note: {expense.note}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_expense)
