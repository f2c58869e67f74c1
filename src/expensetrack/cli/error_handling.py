"""CLI error handling helpers."""

import click

from expensetrack.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def handle_declined_write(ctx: click.Context, reason: DomainError | ValueError) -> None:
    """Report an expense that was not saved and exit with failure."""
    click.echo(f"Expense not saved: {reason}", err=True)
    ctx.exit(1)
