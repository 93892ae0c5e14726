"""Tests for metric aggregation over ledger snapshots."""

from __future__ import annotations

from decimal import Decimal

from conftest import make_transaction
from ledger import LedgerStore, MetricsAggregator, TransactionType, compute_metrics, demo_transactions


def test_compute_metrics_over_demo_data() -> None:
    metrics = compute_metrics(demo_transactions())
    assert metrics.income == Decimal("5750")
    assert metrics.expenses == Decimal("255")
    assert metrics.balance == Decimal("5495")
    assert metrics.to_dict() == {"income": "5750.00", "expenses": "255.00", "balance": "5495.00"}


def test_empty_ledger_yields_zero_totals() -> None:
    metrics = compute_metrics([])
    assert metrics.income == metrics.expenses == metrics.balance == Decimal("0")


def test_balance_identity_and_non_negative_subtotals() -> None:
    transactions = [
        make_transaction(str(index), amount, kind)
        for index, (amount, kind) in enumerate(
            [
                ("0.10", TransactionType.INCOME),
                ("0.20", TransactionType.EXPENSE),
                ("99.99", TransactionType.EXPENSE),
                ("0", TransactionType.INCOME),
            ]
        )
    ]
    metrics = compute_metrics(transactions)
    assert metrics.balance == metrics.income - metrics.expenses
    assert metrics.income >= 0 and metrics.expenses >= 0
    assert metrics.balance == sum((t.signed_amount for t in transactions), Decimal("0"))
    assert metrics.balance == Decimal("-100.09")


def test_seed_then_delete_scenario() -> None:
    store = LedgerStore(
        [
            make_transaction("1", "5000", TransactionType.INCOME),
            make_transaction("2", "150", TransactionType.EXPENSE),
        ]
    )
    aggregator = MetricsAggregator()

    metrics = aggregator.compute(store.list())
    assert (metrics.income, metrics.expenses, metrics.balance) == (5000, 150, 4850)

    store.delete("1")
    metrics = aggregator.compute(store.list())
    assert (metrics.income, metrics.expenses, metrics.balance) == (0, 150, -150)


def test_aggregator_memoises_per_snapshot(seeded_store: LedgerStore, draft: dict) -> None:
    aggregator = MetricsAggregator()
    snapshot = seeded_store.list()

    first = aggregator.compute(snapshot)
    assert aggregator.compute(seeded_store.list()) is first

    seeded_store.add(draft)
    refreshed = aggregator.compute(seeded_store.list())
    assert refreshed is not first
    assert refreshed.expenses == Decimal("162.50")


def test_aggregator_does_not_cache_mutable_input() -> None:
    aggregator = MetricsAggregator()
    transactions = [make_transaction("1", "10", TransactionType.INCOME)]
    assert aggregator.compute(transactions).income == Decimal("10")

    transactions.append(make_transaction("2", "5", TransactionType.INCOME))
    assert aggregator.compute(transactions).income == Decimal("15")
