"""
Ledger Queries

DESIGN DECISION: Queries are pure functions over a sequence of
transactions. They never touch the store or the data file, and they
never mutate their input. Callers pass in TransactionStore.list().

All filters keep the input order.
"""

from datetime import date
from decimal import Decimal
from typing import Sequence

from finance_tracker.models.transaction import (
    LedgerSummary,
    Transaction,
    TransactionKind,
)


def summarize(transactions: Sequence[Transaction]) -> LedgerSummary:
    """
    Total income, total expenses and the resulting balance.

    An empty sequence gives an all-zero summary.
    """
    total_income = Decimal("0")
    total_expenses = Decimal("0")

    for transaction in transactions:
        if transaction.is_income:
            total_income += transaction.amount
        elif transaction.is_expense:
            total_expenses += transaction.amount

    return LedgerSummary(total_income=total_income, total_expenses=total_expenses)


def filter_by_category(
    transactions: Sequence[Transaction],
    category: str,
) -> list[Transaction]:
    """
    Transactions whose category equals the query, ignoring case.

    The query is trimmed first. Callers should treat an empty query as
    "no filter" and not call this at all; if they do, nothing matches
    unless a stored category is itself empty.
    """
    wanted = category.strip().lower()
    return [t for t in transactions if t.category.lower() == wanted]


def filter_by_date_range(
    transactions: Sequence[Transaction],
    start: date,
    end: date,
) -> list[Transaction]:
    """
    Transactions dated within [start, end], both ends included.

    An inverted range (start after end) is not an error; it simply
    matches nothing.
    """
    return [t for t in transactions if start <= t.date <= end]


def group_totals_by_category(
    transactions: Sequence[Transaction],
    kind: TransactionKind = TransactionKind.EXPENSE,
) -> dict[str, Decimal]:
    """
    Sum of amounts per category for one kind, in first-seen order.

    Categories are grouped case-insensitively under the spelling seen first.
    """
    totals: dict[str, Decimal] = {}
    labels: dict[str, str] = {}

    for transaction in transactions:
        if transaction.kind != kind:
            continue
        key = transaction.category.lower()
        label = labels.setdefault(key, transaction.category)
        totals[label] = totals.get(label, Decimal("0")) + transaction.amount

    return totals
