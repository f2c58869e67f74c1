"""Main CLI entry point."""

import logging

import click
from expensetrack.database.factories import DB_PATH_ENV_VAR, create_sqlite_database

# Import and register all commands at module level
from expensetrack.cli.commands import add, expense, summary, view

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=f"Path to database file (overrides {DB_PATH_ENV_VAR} environment variable)",
    envvar=DB_PATH_ENV_VAR,
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="EXPENSETRACK_LOG_LEVEL",
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Expensetrack - Personal expense tracking.

    Record expenses, list them for all time, this week or this month, and
    see totals per category.
    """
    ctx.ensure_object(dict)
    logging.getLogger("expensetrack").setLevel(getattr(logging, log_level.upper()))

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
add.register_commands(cli)
view.register_commands(cli)
summary.register_commands(cli)
expense.register_commands(cli)


def main():
    """Main entry point for CLI."""
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    cli()


if __name__ == "__main__":
    main()
