"""Domain-specific exceptions for the ledger core."""

from __future__ import annotations

from typing import Optional


class ValidationError(ValueError):
    """Raised when a transaction draft does not meet validation requirements."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(LookupError):
    """Raised when a transaction cannot be located by its id."""

    def __init__(self, transaction_id: str) -> None:
        super().__init__(f"Transaction {transaction_id} not found")
        self.transaction_id = transaction_id
