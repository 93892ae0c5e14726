"""Data models for the finance ledger domain."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

__all__ = ["Metrics", "Transaction", "TransactionDraft", "TransactionType"]


class TransactionType(str, Enum):
    """Enumerate the two kinds of ledger entry."""

    INCOME = "income"
    EXPENSE = "expense"

    @property
    def sign(self) -> int:
        return 1 if self is TransactionType.INCOME else -1


@dataclass(frozen=True)
class Transaction:
    id: str
    description: str
    amount: Decimal
    type: TransactionType
    category: str
    date: date

    @property
    def signed_amount(self) -> Decimal:
        """Contribution of this entry to the balance."""
        return self.amount * self.type.sign

    def to_dict(self) -> Dict[str, Any]:
        """Serialise the transaction to JSON-friendly natives."""
        return {
            "id": self.id,
            "description": self.description,
            "amount": f"{self.amount:.2f}",
            "type": self.type.value,
            "category": self.category,
            "date": self.date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Transaction":
        """Hydrate a Transaction from trusted JSON-native data."""
        raw_date = data["date"]
        return cls(
            id=str(data["id"]),
            description=data["description"],
            amount=Decimal(str(data["amount"])),
            type=TransactionType(data["type"]),
            category=data["category"],
            date=raw_date if isinstance(raw_date, date) else date.fromisoformat(raw_date),
        )


@dataclass(frozen=True)
class TransactionDraft:
    """Raw field values collected by a presentation layer, not yet validated."""

    description: object = None
    amount: Union[str, int, float, Decimal, None] = None
    type: Union[str, TransactionType, None] = None
    category: object = None
    date: Union[str, date, None] = None

    def to_dict(self) -> Dict[str, object]:
        return {
            "description": self.description,
            "amount": self.amount,
            "type": self.type,
            "category": self.category,
            "date": self.date,
        }

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, object]]) -> "TransactionDraft":
        data = data or {}
        return cls(
            description=data.get("description"),
            amount=data.get("amount"),  # type: ignore[arg-type]
            type=data.get("type"),  # type: ignore[arg-type]
            category=data.get("category"),
            date=data.get("date"),  # type: ignore[arg-type]
        )


@dataclass(frozen=True)
class Metrics:
    income: Decimal
    expenses: Decimal
    balance: Decimal

    def to_dict(self) -> Dict[str, str]:
        return {
            "income": f"{self.income:.2f}",
            "expenses": f"{self.expenses:.2f}",
            "balance": f"{self.balance:.2f}",
        }
