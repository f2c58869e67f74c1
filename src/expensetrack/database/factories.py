"""Build the SQLite-backed expense store."""

import logging
import os
from pathlib import Path
from typing import Optional

from expensetrack.database.sqlalchemy_db import SQLAlchemyDatabase

logger = logging.getLogger(__name__)

DB_PATH_ENV_VAR = "EXPENSETRACK_DB_PATH"
DEFAULT_DB_DIR = ".expensetrack"
DEFAULT_DB_NAME = "expenses.db"


def resolve_database_path(database_path: Optional[str] = None) -> Path:
    """Pick the expense database file.

    An explicit path wins, then the EXPENSETRACK_DB_PATH environment
    variable, then ~/.expensetrack/expenses.db. The parent directory is
    created when missing.
    """
    chosen = database_path or os.environ.get(DB_PATH_ENV_VAR)
    path = Path(chosen).expanduser() if chosen else Path.home() / DEFAULT_DB_DIR / DEFAULT_DB_NAME
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create the SQLAlchemy expense store on a SQLite file.

    See resolve_database_path for how the file is chosen.
    """
    path = resolve_database_path(database_path)
    logger.debug("Using expense database at %s", path)
    return SQLAlchemyDatabase(f"sqlite:///{path}")
