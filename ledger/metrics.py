"""Derived totals over a ledger snapshot."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, Optional, Tuple

from .models import Metrics, Transaction, TransactionType

LOGGER = logging.getLogger(__name__)

ZERO = Decimal("0.00")


def compute_metrics(transactions: Iterable[Transaction]) -> Metrics:
    """Sum income and expenses in a single pass and derive the balance."""
    income = ZERO
    expenses = ZERO
    for transaction in transactions:
        if transaction.type is TransactionType.INCOME:
            income += transaction.amount
        else:
            expenses += transaction.amount
    return Metrics(income=income, expenses=expenses, balance=income - expenses)


class MetricsAggregator:
    """Pull-based metrics with the last result memoised per snapshot.

    Only tuple snapshots are memoised; they are what ``LedgerStore.list``
    hands out and they cannot change underneath the cache.
    """

    def __init__(self) -> None:
        self._last: Optional[Tuple[Tuple[Transaction, ...], Metrics]] = None

    def compute(self, transactions: Iterable[Transaction]) -> Metrics:
        if isinstance(transactions, tuple):
            if self._last is not None and self._last[0] is transactions:
                LOGGER.debug("Metrics served from cache")
                return self._last[1]
            metrics = compute_metrics(transactions)
            self._last = (transactions, metrics)
            return metrics
        return compute_metrics(transactions)

    def invalidate(self) -> None:
        self._last = None
