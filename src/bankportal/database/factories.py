"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from bankportal.database.sqlalchemy_db import SQLAlchemyDatabase

DB_PATH_ENV = "BANKPORTAL_DB_PATH"
DB_URL_ENV = "BANKPORTAL_DATABASE_URL"


def default_database_path() -> str:
    """Return ~/.bankportal/bankportal.db, creating the directory if needed."""
    db_dir = Path.home() / ".bankportal"
    db_dir.mkdir(exist_ok=True)
    return str(db_dir / "bankportal.db")


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file, or ':memory:'. If None,
            checks BANKPORTAL_DB_PATH, then defaults to ~/.bankportal/bankportal.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get(DB_PATH_ENV) or default_database_path()

    if database_path == ":memory:":
        return SQLAlchemyDatabase("sqlite://")
    return SQLAlchemyDatabase(f"sqlite:///{database_path}")


def create_database(database_url: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a database from a SQLAlchemy URL.

    Falls back to BANKPORTAL_DATABASE_URL and then to the SQLite file
    resolved by create_sqlite_database.
    """
    if database_url is None:
        database_url = os.environ.get(DB_URL_ENV)

    if database_url is None:
        return create_sqlite_database()
    return SQLAlchemyDatabase(database_url)
