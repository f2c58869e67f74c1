"""CLI helpers for time window selection."""

import click

from expensetrack.domain.entities import FilterSelector

PERIOD_FLAGS = {
    "all": FilterSelector.ALL,
    "week": FilterSelector.WEEK,
    "month": FilterSelector.MONTH,
}


def filter_options(command):
    """Add the --all, --week and --month flags to a command."""
    command = click.option(
        "--month", "month", is_flag=True, help="Only expenses from the current calendar month"
    )(command)
    command = click.option(
        "--week", "week", is_flag=True, help="Only expenses from the current week (Sunday to Saturday)"
    )(command)
    command = click.option(
        "--all", "all_", is_flag=True, help="All expenses (default)"
    )(command)
    return command


def resolve_cli_selector(ctx, *, period_flags: dict[str, bool]) -> FilterSelector:
    """Resolve the filter selector from period flags; ALL when none is set."""
    selected = [name for name, is_set in period_flags.items() if is_set]

    if len(selected) > 1:
        click.echo(
            "Error: Only one filter option (--all, --week, --month) can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if not selected:
        return FilterSelector.ALL
    return PERIOD_FLAGS[selected[0]]
