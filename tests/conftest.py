"""Shared fixtures for the ledger test-suite."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from api.app import create_app
from ledger import LedgerService, LedgerStore, Transaction, TransactionType


def make_transaction(
    transaction_id: str,
    amount: str,
    transaction_type: TransactionType,
    *,
    description: str = "Entry",
    category: str = "General",
    on: date = date(2023, 10, 1),
) -> Transaction:
    return Transaction(
        id=transaction_id,
        description=description,
        amount=Decimal(amount),
        type=transaction_type,
        category=category,
        date=on,
    )


@pytest.fixture
def draft() -> dict:
    return {
        "description": "Coffee beans",
        "amount": "12.50",
        "type": "expense",
        "category": "Food",
        "date": "2023-10-09",
    }


@pytest.fixture
def seeded_store() -> LedgerStore:
    return LedgerStore(
        [
            make_transaction("1", "5000", TransactionType.INCOME, description="Monthly Salary"),
            make_transaction("2", "150", TransactionType.EXPENSE, description="Groceries"),
        ]
    )


@pytest.fixture
def service(seeded_store: LedgerStore) -> LedgerService:
    return LedgerService(store=seeded_store)


@pytest.fixture
def client():
    app = create_app(
        seed=[
            make_transaction("1", "5000", TransactionType.INCOME, description="Monthly Salary"),
            make_transaction("2", "150", TransactionType.EXPENSE, description="Groceries"),
        ]
    )
    app.config.update(TESTING=True)
    return app.test_client()
