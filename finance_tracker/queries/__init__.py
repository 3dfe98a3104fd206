"""Ledger query package."""

from finance_tracker.queries.aggregation import (
    filter_by_category,
    filter_by_date_range,
    group_totals_by_category,
    summarize,
)

__all__ = [
    "filter_by_category",
    "filter_by_date_range",
    "group_totals_by_category",
    "summarize",
]
