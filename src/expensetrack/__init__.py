"""expensetrack - personal expense tracking on a local SQLite database."""

__version__ = "0.1.0"


def __getattr__(name):
    # The CLI pulls in every command module, so only load it when asked for
    if name == "main":
        from expensetrack.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
