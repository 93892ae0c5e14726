"""Core business logic package for the finance ledger."""

from .demo import demo_transactions
from .exceptions import NotFoundError, ValidationError
from .metrics import MetricsAggregator, compute_metrics
from .models import Metrics, Transaction, TransactionDraft, TransactionType
from .services import LedgerService
from .store import LedgerStore

__all__ = [
    "Metrics",
    "Transaction",
    "TransactionDraft",
    "TransactionType",
    "LedgerStore",
    "LedgerService",
    "MetricsAggregator",
    "compute_metrics",
    "demo_transactions",
    "NotFoundError",
    "ValidationError",
]
