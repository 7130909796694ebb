"""SQLite storage for transactions."""

from __future__ import annotations

import os
import sqlite3
from functools import lru_cache
from pathlib import Path

from platformdirs import user_data_dir

APP_NAME = "FinanceTracker"
ORGANIZATION_NAME = "PersonalFinance"
DATABASE_FILENAME = "finance.db"

_SCHEMA = (
    "CREATE TABLE IF NOT EXISTS transactions ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT,"
    "type INTEGER NOT NULL,"
    "amount REAL NOT NULL,"
    "date TEXT NOT NULL,"
    "description TEXT,"
    "category TEXT);"
)


class DatabaseError(Exception):
    """Raised when the database cannot be opened or queried."""


def default_database_path() -> Path:
    """Location of the application's database file in the user data directory."""
    return Path(user_data_dir(APP_NAME, ORGANIZATION_NAME)) / DATABASE_FILENAME


class DatabaseManager:
    """Owns one SQLite connection and makes sure the schema exists."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)
        if self.path != ":memory:":
            try:
                Path(self.path).parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise DatabaseError(
                    f"cannot create directory for database {self.path}: {exc}"
                ) from exc
        try:
            self._connection: sqlite3.Connection | None = sqlite3.connect(self.path)
        except sqlite3.Error as exc:
            raise DatabaseError(f"cannot open database {self.path}: {exc}") from exc
        try:
            with self._connection:
                self._connection.execute(_SCHEMA)
        except sqlite3.Error as exc:
            self.close()
            raise DatabaseError(f"cannot initialise database: {exc}") from exc

    def connection(self) -> sqlite3.Connection:
        """The open connection; raises DatabaseError once closed."""
        if self._connection is None:
            raise DatabaseError("database is closed")
        return self._connection

    def is_open(self) -> bool:
        return self._connection is not None

    def close(self) -> None:
        """Close the connection. Closing twice is harmless."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None

    def __enter__(self) -> DatabaseManager:
        return self

    def __exit__(self, *args) -> None:
        self.close()


@lru_cache(maxsize=None)
def shared_manager() -> DatabaseManager:
    """The process-wide manager for the default database file."""
    return DatabaseManager(default_database_path())