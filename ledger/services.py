"""Framework-agnostic ledger service pairing the store with its metrics."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional, Tuple

from .metrics import MetricsAggregator
from .models import Metrics, Transaction
from .store import DraftLike, LedgerStore

LOGGER = logging.getLogger(__name__)


class LedgerService:
    """Single entry point a presentation layer drives.

    Mutations go to the store; ``summary`` pulls fresh metrics from the
    current snapshot, reusing the cached result while the ledger is unchanged.
    """

    def __init__(
        self,
        store: Optional[LedgerStore] = None,
        aggregator: Optional[MetricsAggregator] = None,
    ) -> None:
        self._store = store if store is not None else LedgerStore()
        self._aggregator = aggregator if aggregator is not None else MetricsAggregator()

    def seed(self, initial: Iterable[Transaction]) -> None:
        self._store.seed(initial)
        self._aggregator.invalidate()

    def add(self, draft: DraftLike) -> Transaction:
        return self._store.add(draft)

    def update(self, transaction_id: str, draft: DraftLike) -> Transaction:
        return self._store.update(transaction_id, draft)

    def delete(self, transaction_id: str) -> bool:
        return self._store.delete(transaction_id)

    def get(self, transaction_id: str) -> Transaction:
        return self._store.get(transaction_id)

    def list(self) -> Tuple[Transaction, ...]:
        return self._store.list()

    def summary(self) -> Metrics:
        return self._aggregator.compute(self._store.list())

    def snapshot(self) -> Dict[str, object]:
        """Return a serialisable view of the ledger and its totals."""
        transactions = self._store.list()
        metrics = self._aggregator.compute(transactions)
        return {
            "transactions": [transaction.to_dict() for transaction in transactions],
            "summary": metrics.to_dict(),
        }
