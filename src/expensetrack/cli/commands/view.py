"""Expense listing command."""

import click

from expensetrack.cli.date_filters import filter_options, resolve_cli_selector
from expensetrack.cli.display import echo_expense_table, echo_totals
from expensetrack.domain.ledger import ExpenseLedger


@click.command("list")
@filter_options
@click.pass_context
def list_expenses(ctx, all_: bool, week: bool, month: bool):
    """List expenses, newest first, with totals for the chosen window.

    Examples:
        expensetrack list
        expensetrack list --week
    """
    selector = resolve_cli_selector(
        ctx, period_flags={"all": all_, "week": week, "month": month}
    )
    ledger = ExpenseLedger(ctx.obj["db"], selector=selector)
    ledger.reload()
    summary = ledger.summary()

    if not summary.expenses:
        click.echo(f"No expenses found ({selector.label}).")
        return

    echo_expense_table(summary)
    echo_totals(summary)


def register_commands(cli):
    """Register list command with main CLI."""
    cli.add_command(list_expenses)
