"""Database layer for stockpile application."""

from stockpile.database.base import Database
from stockpile.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
