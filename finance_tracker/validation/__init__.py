"""Input validation package."""

from finance_tracker.validation.validator import (
    TransactionValidator,
    ValidationError,
    get_user_friendly_summary,
)

__all__ = ["TransactionValidator", "ValidationError", "get_user_friendly_summary"]
