import sqlite3
from unittest import mock

import pytest

from financetracker.database import (
    DatabaseError,
    DatabaseManager,
    default_database_path,
    shared_manager,
)


def test_creates_missing_directories(tmp_path):
    path = tmp_path / "a" / "b" / "finance.db"
    with DatabaseManager(path):
        pass
    assert path.exists()


def test_creates_transactions_table(tmp_path):
    with DatabaseManager(tmp_path / "finance.db") as manager:
        names = [
            row[0]
            for row in manager.connection().execute(
                "SELECT name FROM sqlite_master WHERE type='table'"
            )
        ]
    assert "transactions" in names


def test_table_columns(tmp_path):
    with DatabaseManager(tmp_path / "finance.db") as manager:
        columns = [
            row[1]
            for row in manager.connection().execute("PRAGMA table_info(transactions)")
        ]
    assert columns == ["id", "type", "amount", "date", "description", "category"]


def test_open_and_close_state(tmp_path):
    manager = DatabaseManager(tmp_path / "finance.db")
    assert manager.is_open()
    manager.close()
    assert not manager.is_open()
    manager.close()
    assert not manager.is_open()


def test_connection_after_close_raises(tmp_path):
    manager = DatabaseManager(tmp_path / "finance.db")
    manager.close()
    with pytest.raises(DatabaseError):
        manager.connection()


def test_context_manager_closes(tmp_path):
    with DatabaseManager(tmp_path / "finance.db") as manager:
        assert manager.is_open()
    assert not manager.is_open()


def test_data_survives_reopening(tmp_path):
    path = tmp_path / "finance.db"
    with DatabaseManager(path) as manager:
        conn = manager.connection()
        with conn:
            conn.execute(
                "INSERT INTO transactions (type, amount, date) VALUES (0, 5.0, 'x')"
            )
    with DatabaseManager(path) as manager:
        count = manager.connection().execute(
            "SELECT COUNT(*) FROM transactions"
        ).fetchone()[0]
    assert count == 1


def test_in_memory_database():
    with DatabaseManager(":memory:") as manager:
        row = manager.connection().execute(
            "SELECT COUNT(*) FROM transactions"
        ).fetchone()
    assert row == (0,)


def test_schema_rejects_missing_amount(tmp_path):
    with DatabaseManager(tmp_path / "finance.db") as manager:
        with pytest.raises(sqlite3.IntegrityError):
            manager.connection().execute(
                "INSERT INTO transactions (type, date) VALUES (0, 'x')"
            )


def test_directory_blocked_by_file_raises(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    with pytest.raises(DatabaseError):
        DatabaseManager(blocker / "sub" / "finance.db")


def test_default_database_path_file_name():
    assert default_database_path().name == "finance.db"


def test_shared_manager_is_single_instance(tmp_path):
    shared_manager.cache_clear()
    with mock.patch(
        "financetracker.database.user_data_dir", return_value=str(tmp_path)
    ):
        first = shared_manager()
        second = shared_manager()
    try:
        assert first is second
        assert first.path == str(tmp_path / "finance.db")
        assert first.is_open()
    finally:
        first.close()
        shared_manager.cache_clear()