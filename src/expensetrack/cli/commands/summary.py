"""Summary command."""

import click

from expensetrack.cli.date_filters import filter_options, resolve_cli_selector
from expensetrack.cli.display import echo_totals, format_money
from expensetrack.domain.ledger import ExpenseLedger


@click.command("summary")
@filter_options
@click.pass_context
def summary(ctx, all_: bool, week: bool, month: bool):
    """Show the total and per-category totals for a time window.

    Examples:
        expensetrack summary --month
    """
    selector = resolve_cli_selector(
        ctx, period_flags={"all": all_, "week": week, "month": month}
    )
    ledger = ExpenseLedger(ctx.obj["db"], selector=selector)
    ledger.reload()
    result = ledger.summary()

    if result.window is not None:
        start, end = result.window
        click.echo(f"Period: {start.date()} to {end.date()} (exclusive)")
    click.echo(f"Expenses: {len(result.expenses)}")
    echo_totals(result)

    if result.expenses:
        largest = max(result.totals_by_category.items(), key=lambda item: item[1])
        click.echo(f"\nLargest category: {largest[0]} ({format_money(largest[1])})")


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
