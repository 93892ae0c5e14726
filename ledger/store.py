"""In-memory ledger store: the only mutation surface for transactions."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Union
from uuid import uuid4

from .exceptions import NotFoundError
from .models import Transaction, TransactionDraft
from .validators import (
    parse_amount,
    validate_date,
    validate_required_str,
    validate_transaction_type,
)

LOGGER = logging.getLogger(__name__)

DraftLike = Union[TransactionDraft, Mapping[str, object]]


def _new_id() -> str:
    return str(uuid4())


class LedgerStore:
    """Holds transactions newest-first and validates every write."""

    def __init__(
        self,
        initial: Optional[Iterable[Transaction]] = None,
        *,
        id_factory: Callable[[], str] = _new_id,
    ) -> None:
        self._id_factory = id_factory
        self._lock = threading.RLock()
        self._transactions: List[Transaction] = []
        self._snapshot: Optional[Tuple[Transaction, ...]] = None
        if initial is not None:
            self.seed(initial)

    # Public API -----------------------------------------------------------
    def seed(self, initial: Iterable[Transaction]) -> None:
        """Replace the collection with trusted records, kept in the given order."""
        with self._lock:
            self._transactions = list(initial)
            self._snapshot = None
            LOGGER.debug("Ledger seeded with %s transactions", len(self._transactions))

    def add(self, draft: DraftLike) -> Transaction:
        data = self._validate_payload(draft)
        with self._lock:
            transaction = Transaction(id=self._unused_id(), **data)
            self._transactions.insert(0, transaction)
            self._snapshot = None
        LOGGER.info("Added %s transaction %s", transaction.type.value, transaction.id)
        return transaction

    def update(self, transaction_id: str, draft: DraftLike) -> Transaction:
        with self._lock:
            index = self._index_or_raise(transaction_id)
            data = self._validate_payload(draft)
            existing = self._transactions[index]
            updated = Transaction(id=existing.id, **data)
            self._transactions[index] = updated
            self._snapshot = None
        LOGGER.info("Updated transaction %s", transaction_id)
        return updated

    def delete(self, transaction_id: str) -> bool:
        """Remove the transaction if present; returns whether anything was removed."""
        with self._lock:
            index = self._index_of(transaction_id)
            if index is None:
                LOGGER.debug("Delete of unknown transaction %s ignored", transaction_id)
                return False
            del self._transactions[index]
            self._snapshot = None
        LOGGER.info("Deleted transaction %s", transaction_id)
        return True

    def get(self, transaction_id: str) -> Transaction:
        with self._lock:
            return self._transactions[self._index_or_raise(transaction_id)]

    def list(self) -> Tuple[Transaction, ...]:
        """Return the ledger as an immutable snapshot, newest first.

        The same tuple is handed out until the next mutation, so callers can
        use its identity to tell whether the ledger changed.
        """
        with self._lock:
            if self._snapshot is None:
                self._snapshot = tuple(self._transactions)
            return self._snapshot

    def __len__(self) -> int:
        with self._lock:
            return len(self._transactions)

    def __contains__(self, transaction_id: object) -> bool:
        with self._lock:
            return self._index_of(transaction_id) is not None

    # Internal helpers -----------------------------------------------------
    def _index_of(self, transaction_id: object) -> Optional[int]:
        for index, transaction in enumerate(self._transactions):
            if transaction.id == transaction_id:
                return index
        return None

    def _index_or_raise(self, transaction_id: str) -> int:
        index = self._index_of(transaction_id)
        if index is None:
            raise NotFoundError(transaction_id)
        return index

    def _unused_id(self) -> str:
        taken = {transaction.id for transaction in self._transactions}
        candidate = self._id_factory()
        while candidate in taken:
            candidate = self._id_factory()
        return candidate

    def _validate_payload(self, draft: DraftLike) -> Dict[str, object]:
        payload = draft.to_dict() if isinstance(draft, TransactionDraft) else draft
        # Every field is checked before the collection is touched.
        return {
            "description": validate_required_str(payload.get("description"), "description"),
            "amount": parse_amount(payload.get("amount"), "amount"),
            "type": validate_transaction_type(payload.get("type"), "type"),
            "category": validate_required_str(payload.get("category"), "category"),
            "date": validate_date(payload.get("date"), "date"),
        }
