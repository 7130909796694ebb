"""List model over the stored transactions."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime
from enum import IntEnum
from typing import Any

from .dao import TransactionDao
from .transaction import Transaction, TransactionType

_USER_ROLE = 0x0100


class Role(IntEnum):
    """Data roles a view can ask the model for."""

    ID = _USER_ROLE + 1
    TYPE = _USER_ROLE + 2
    AMOUNT = _USER_ROLE + 3
    DATE = _USER_ROLE + 4
    DESCRIPTION = _USER_ROLE + 5
    CATEGORY = _USER_ROLE + 6


_ROLE_NAMES = {
    Role.ID: "id",
    Role.TYPE: "type",
    Role.AMOUNT: "amount",
    Role.DATE: "date",
    Role.DESCRIPTION: "description",
    Role.CATEGORY: "category",
}


class TransactionModel:
    """Keeps an in-memory list of transactions in step with the database."""

    def __init__(self, dao: TransactionDao | None = None) -> None:
        self._dao = dao if dao is not None else TransactionDao()
        self._transactions: list[Transaction] = self._dao.fetch_all()

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(list(self._transactions))

    def row_count(self) -> int:
        return len(self._transactions)

    def data(self, row: int, role: int) -> Any:
        """Value of one role for one row, or None for an unknown row or role."""
        if not 0 <= row < len(self._transactions):
            return None
        tx = self._transactions[row]
        try:
            role = Role(role)
        except ValueError:
            return None
        return {
            Role.ID: tx.id,
            Role.TYPE: tx.kind.code(),
            Role.AMOUNT: tx.amount,
            Role.DATE: tx.date,
            Role.DESCRIPTION: tx.description,
            Role.CATEGORY: tx.category,
        }[role]

    def role_names(self) -> dict[Role, str]:
        return dict(_ROLE_NAMES)

    def add_transaction(
        self,
        kind: int,
        amount: float,
        date: datetime | None,
        description: str,
        category: str,
    ) -> int:
        """Store a new transaction, append it to the list and return its id."""
        tx = Transaction(
            -1, TransactionType.from_code(kind), amount, date, description, category
        )
        new_id = self._dao.add(tx)
        self._transactions.append(tx.with_id(new_id))
        return new_id

    def _row_of(self, transaction_id: int) -> int | None:
        return next(
            (row for row, tx in enumerate(self._transactions) if tx.id == transaction_id),
            None,
        )

    def update_transaction(
        self,
        transaction_id: int,
        kind: int,
        amount: float,
        date: datetime | None,
        description: str,
        category: str,
    ) -> bool:
        """Replace a listed transaction; False if no row has that id."""
        row = self._row_of(transaction_id)
        if row is None:
            return False
        updated = Transaction(
            transaction_id,
            TransactionType.from_code(kind),
            amount,
            date,
            description,
            category,
        )
        self._dao.update(updated)
        self._transactions[row] = updated
        return True

    def delete_transaction(self, transaction_id: int) -> bool:
        """Remove a listed transaction; False if no row has that id."""
        row = self._row_of(transaction_id)
        if row is None:
            return False
        self._dao.delete(transaction_id)
        del self._transactions[row]
        return True

    def refresh(self) -> None:
        """Reload the list from the database."""
        self._transactions = self._dao.fetch_all()