"""Database layer for bankportal application."""

from bankportal.database.base import Database
from bankportal.database.factories import create_database, create_sqlite_database

__all__ = ["Database", "create_database", "create_sqlite_database"]
