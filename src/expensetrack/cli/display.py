"""Rendering helpers shared by the listing commands."""

from decimal import Decimal

import click

from expensetrack.domain.entities import ExpenseSummary

TABLE_WIDTH = 80


def format_money(amount: Decimal) -> str:
    return f"${amount:,.2f}"


def echo_expense_table(summary: ExpenseSummary) -> None:
    """Print the filtered expenses as a compact table."""
    click.echo(f"\n{summary.selector.label}: {len(summary.expenses)} expense(s)")
    click.echo("-" * TABLE_WIDTH)
    click.echo(f"{'ID':<6} {'Date':<12} {'Amount':>12}  {'Category':<20} {'Note':<26}")
    click.echo("-" * TABLE_WIDTH)

    for expense in summary.expenses:
        note = (expense.note or "")[:26]
        click.echo(
            f"{expense.id:<6} {str(expense.date):<12} {format_money(expense.amount):>12}  "
            f"{expense.category:<20} {note:<26}"
        )


def echo_totals(summary: ExpenseSummary) -> None:
    """Print the overall total followed by one line per category."""
    click.echo("-" * TABLE_WIDTH)
    click.echo(f"Total ({summary.selector.label}): {format_money(summary.overall_total)}")

    if not summary.totals_by_category:
        return

    click.echo("\nBy category:")
    for category, total in summary.totals_by_category.items():
        click.echo(f"  {category:<30} {format_money(total):>12}")
