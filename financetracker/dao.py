"""Reading and writing transactions in the database."""

from __future__ import annotations

import sqlite3
from datetime import datetime

from .database import DatabaseError, DatabaseManager, shared_manager
from .transaction import Transaction, TransactionType


def _format_date(date: datetime | None) -> str:
    return date.isoformat(timespec="seconds") if date is not None else ""


def _parse_date(text: str | None) -> datetime | None:
    if not text:
        return None
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


class TransactionDao:
    """Data access for the transactions table."""

    def __init__(self, manager: DatabaseManager | None = None) -> None:
        self._manager = manager

    @property
    def manager(self) -> DatabaseManager:
        if self._manager is None:
            self._manager = shared_manager()
        return self._manager

    def _execute(self, sql: str, params: dict) -> sqlite3.Cursor:
        conn = self.manager.connection()
        try:
            with conn:
                return conn.execute(sql, params)
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    @staticmethod
    def _params(transaction: Transaction) -> dict:
        return {
            "type": transaction.kind.code(),
            "amount": transaction.amount,
            "date": _format_date(transaction.date),
            "description": transaction.description,
            "category": transaction.category,
        }

    def add(self, transaction: Transaction) -> int:
        """Insert a transaction and return the id the database gave it."""
        cursor = self._execute(
            "INSERT INTO transactions (type, amount, date, description, category) "
            "VALUES (:type, :amount, :date, :description, :category)",
            self._params(transaction),
        )
        if cursor.lastrowid is None:
            raise DatabaseError("no id was generated for the new transaction")
        return cursor.lastrowid

    def update(self, transaction: Transaction) -> None:
        """Overwrite the stored row that has the transaction's id."""
        params = self._params(transaction)
        params["id"] = transaction.id
        self._execute(
            "UPDATE transactions SET type=:type, amount=:amount, date=:date, "
            "description=:description, category=:category WHERE id=:id",
            params,
        )

    def delete(self, transaction_id: int) -> None:
        """Remove the row with the given id."""
        self._execute("DELETE FROM transactions WHERE id=:id", {"id": transaction_id})

    def fetch_all(self) -> list[Transaction]:
        """All stored transactions, newest date first."""
        cursor = self._execute(
            "SELECT id, type, amount, date, description, category "
            "FROM transactions ORDER BY date DESC",
            {},
        )
        return [
            Transaction(
                id=row_id,
                kind=TransactionType.from_code(kind),
                amount=float(amount),
                date=_parse_date(date),
                description=description or "",
                category=category or "",
            )
            for row_id, kind, amount, date, description, category in cursor.fetchall()
        ]