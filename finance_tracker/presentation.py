"""
Display formatting for the ledger.

Pure helpers the UI uses to turn transactions and summaries into
table rows and text. Amounts are shown rounded to two decimals here;
the data file keeps their full value.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Sequence

from finance_tracker.models.transaction import LedgerSummary, Transaction


TABLE_COLUMNS = ["Date", "Description", "Amount ($)", "Type", "Category"]

_CENT = Decimal("0.01")


def format_amount(amount: Decimal) -> str:
    """Two-decimal display form, e.g. 2500 -> '2500.00'."""
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the cents
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return str(amount.quantize(_CENT, rounding=ROUND_HALF_UP))


def transaction_rows(transactions: Sequence[Transaction]) -> list[dict[str, str]]:
    """One display row per transaction, keyed by TABLE_COLUMNS."""
    return [
        {
            "Date": t.date.isoformat(),
            "Description": t.description,
            "Amount ($)": format_amount(t.amount),
            "Type": t.kind.value,
            "Category": t.category,
        }
        for t in transactions
    ]


def summary_lines(summary: LedgerSummary, currency_symbol: str = "$") -> list[str]:
    return [
        f"Total Income: {currency_symbol}{format_amount(summary.total_income)}",
        f"Total Expenses: {currency_symbol}{format_amount(summary.total_expenses)}",
        f"Current Balance: {currency_symbol}{format_amount(summary.balance)}",
    ]
