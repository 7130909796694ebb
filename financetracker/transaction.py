"""Transaction records and their kinds."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum


class TransactionType(Enum):
    """Whether money came in or went out."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_code(cls, code: int) -> TransactionType:
        """Map a stored integer code to a type: 0 is income, anything else expense."""
        return cls.INCOME if code == 0 else cls.EXPENSE

    def code(self) -> int:
        """Integer code used in storage and in the list model."""
        return 0 if self is TransactionType.INCOME else 1


@dataclass
class Transaction:
    """A single income or expense entry."""

    id: int
    kind: TransactionType
    amount: float
    date: datetime | None
    description: str = ""
    category: str = ""

    def with_id(self, new_id: int) -> Transaction:
        """Return a copy of this transaction carrying another id."""
        return replace(self, id=new_id)