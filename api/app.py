"""Flask REST API exposing the finance ledger to a dashboard front end."""

from __future__ import annotations

import os
from typing import Any, Dict, Iterable, Optional

from flask import Flask, jsonify, request
from flask_cors import CORS

from ledger.demo import demo_transactions
from ledger.exceptions import NotFoundError, ValidationError
from ledger.models import Transaction, TransactionDraft
from ledger.services import LedgerService

FALSY_VALUES = {"0", "false", "no", "off"}


def _configure_cors(app: Flask) -> None:
    env_name = os.getenv("FINANCE_LEDGER_ENV", "prod").lower()
    if env_name in {"dev", "development"}:
        CORS(app, resources={r"/*": {"origins": "*"}}, supports_credentials=True)
    else:
        allowed_origins = os.getenv("FINANCE_LEDGER_ALLOWED_ORIGINS")
        if allowed_origins:
            origins = [origin.strip() for origin in allowed_origins.split(",") if origin.strip()]
            CORS(app, resources={r"/*": {"origins": origins}}, supports_credentials=True)
        else:
            CORS(app)


def _initial_transactions(seed: Optional[Iterable[Transaction]]) -> Iterable[Transaction]:
    if seed is not None:
        return seed
    if os.getenv("FINANCE_LEDGER_SEED_DEMO", "1").strip().lower() in FALSY_VALUES:
        return []
    return demo_transactions()


def create_app(seed: Optional[Iterable[Transaction]] = None) -> Flask:
    app = Flask(__name__)
    _configure_cors(app)

    ledger = LedgerService()
    ledger.seed(_initial_transactions(seed))
    app.extensions["ledger"] = ledger

    def _success(payload: Any, status: int = 200):
        if status == 204:
            return ("", status)
        return jsonify(payload), status

    def _handle_error(exc: Exception, status: int, message: str, **extra: Any):
        app.logger.error("%s: %s", message, exc)
        return jsonify({"error": message, "details": str(exc), **extra}), status

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        return _handle_error(exc, 400, "Validation error", field=exc.field)

    @app.errorhandler(NotFoundError)
    def handle_not_found(exc: NotFoundError):
        return _handle_error(exc, 404, "Record not found")

    def _json_body() -> Dict[str, Any]:
        if not request.is_json:
            raise ValidationError("Request content must be application/json")
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Malformed JSON body")
        return data

    @app.get("/transactions")
    def list_transactions():
        transactions = ledger.list()
        return _success({
            "items": [transaction.to_dict() for transaction in transactions],
            "summary": ledger.summary().to_dict(),
        })

    @app.post("/transactions")
    def create_transaction():
        draft = TransactionDraft.from_dict(_json_body())
        transaction = ledger.add(draft)
        return _success(transaction.to_dict(), 201)

    @app.get("/transactions/<transaction_id>")
    def get_transaction(transaction_id: str):
        transaction = ledger.get(transaction_id)
        return _success(transaction.to_dict())

    @app.put("/transactions/<transaction_id>")
    def update_transaction(transaction_id: str):
        draft = TransactionDraft.from_dict(_json_body())
        transaction = ledger.update(transaction_id, draft)
        return _success(transaction.to_dict())

    @app.delete("/transactions/<transaction_id>")
    def delete_transaction(transaction_id: str):
        ledger.delete(transaction_id)
        return _success({}, 204)

    @app.get("/summary")
    def summary():
        return _success(ledger.summary().to_dict())

    return app
