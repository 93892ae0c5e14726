"""Validation helpers shared by the ledger store."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from .exceptions import ValidationError
from .models import TransactionType


def _quantize_two_decimals(amount: Decimal) -> Decimal:
    """Round the amount to two decimal places using HALF_UP rounding."""
    return amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def parse_amount(raw: object, field: str) -> Decimal:
    """Convert raw input to a finite, non-negative Decimal with two fraction digits."""
    # bool is an int subclass; a checkbox value is never an amount.
    if isinstance(raw, bool) or raw is None:
        raise ValidationError(f"{field} must be a numeric value", field)
    try:
        amount = Decimal(str(raw).strip())
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise ValidationError(f"{field} must be a numeric value", field) from exc

    if not amount.is_finite():
        raise ValidationError(f"{field} must be a finite number", field)
    if amount < 0:
        raise ValidationError(f"{field} must not be negative", field)
    # "-0" passes the check above; the sign belongs to the transaction type.
    amount = amount.copy_abs()

    try:
        return _quantize_two_decimals(amount)
    except InvalidOperation as exc:
        raise ValidationError(f"{field} is too large", field) from exc


def validate_required_str(value: object, field: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string", field)
    trimmed = value.strip()
    if not trimmed:
        raise ValidationError(f"{field} cannot be empty", field)
    return trimmed


def validate_transaction_type(value: object, field: str) -> TransactionType:
    if isinstance(value, TransactionType):
        return value
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string", field)
    try:
        return TransactionType(value.strip().lower())
    except ValueError as exc:
        allowed = ", ".join(member.value for member in TransactionType)
        raise ValidationError(f"{field} must be one of: {allowed}", field) from exc


def validate_date(value: object, field: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} is required as a YYYY-MM-DD date", field)
    try:
        return date.fromisoformat(value.strip())
    except ValueError as exc:
        raise ValidationError(f"{field} must be a YYYY-MM-DD date", field) from exc
