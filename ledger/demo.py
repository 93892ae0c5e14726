"""Demo transactions used to populate a fresh dashboard."""

from __future__ import annotations

from typing import Dict, List

from .models import Transaction

DEMO_RECORDS: List[Dict[str, object]] = [
    {"id": "1", "description": "Monthly Salary", "amount": "5000", "type": "income",
     "category": "Salary", "date": "2023-10-01"},
    {"id": "2", "description": "Groceries", "amount": "150", "type": "expense",
     "category": "Food", "date": "2023-10-03"},
    {"id": "3", "description": "Internet Bill", "amount": "60", "type": "expense",
     "category": "Bills", "date": "2023-10-05"},
    {"id": "4", "description": "Freelance Project", "amount": "750", "type": "income",
     "category": "Freelance", "date": "2023-10-07"},
    {"id": "5", "description": "Dinner Out", "amount": "45", "type": "expense",
     "category": "Food", "date": "2023-10-08"},
]


def demo_transactions() -> List[Transaction]:
    return [Transaction.from_dict(record) for record in DEMO_RECORDS]
