"""
Transaction Input Validation

Checks raw user input before it becomes a Transaction.

Checks:
- description and category are non-empty after trimming
- amount parses as a finite decimal (negative and zero are allowed)
- date parses as YYYY-MM-DD
- type is income or expense

IMPORTANT: Validation NEVER silently fixes issues beyond trimming
whitespace. Everything else is reported back for the user to correct.
"""

from datetime import date
from decimal import Decimal
from typing import Optional, Union

from finance_tracker.codec.csv_codec import parse_amount, parse_date
from finance_tracker.models.transaction import (
    Transaction,
    TransactionKind,
    ValidationIssue,
)


AmountInput = Union[Decimal, int, float, str]
DateInput = Union[date, str]
KindInput = Union[TransactionKind, str]


class ValidationError(Exception):
    """User input could not be turned into a transaction."""

    def __init__(self, issues: list[ValidationIssue]):
        self.issues = issues
        message = "; ".join(issue.message for issue in issues) or "Invalid input"
        super().__init__(message)


class TransactionValidator:
    """
    Validates and normalizes one set of transaction inputs.

    Values may arrive already typed (Decimal, date, TransactionKind)
    or as the raw strings a form produces.
    """

    def _check_text(self, field: str, value: object) -> tuple[str, list[ValidationIssue]]:
        text = value.strip() if isinstance(value, str) else ""
        if not text:
            return text, [ValidationIssue(
                field=field,
                issue_type="missing",
                message=f"{field.capitalize()} cannot be empty",
            )]
        return text, []

    def _check_amount(self, value: AmountInput) -> tuple[Optional[Decimal], list[ValidationIssue]]:
        try:
            if isinstance(value, Decimal):
                amount = parse_amount(str(value))
            elif isinstance(value, bool):
                raise ValueError("boolean is not an amount")
            elif isinstance(value, (int, float)):
                # str() keeps the shortest repr, so 54.32 stays 54.32
                amount = parse_amount(str(value))
            else:
                amount = parse_amount(value)
        except (ValueError, TypeError, AttributeError):
            return None, [ValidationIssue(
                field="amount",
                issue_type="invalid_format",
                message="Invalid amount. Please enter a number",
            )]
        return amount, []

    def _check_date(self, value: DateInput) -> tuple[Optional[date], list[ValidationIssue]]:
        if isinstance(value, date):
            return value, []
        try:
            return parse_date(value.strip()), []
        except (ValueError, AttributeError):
            return None, [ValidationIssue(
                field="date",
                issue_type="invalid_format",
                message="Invalid date. Please use YYYY-MM-DD",
            )]

    def _check_kind(self, value: KindInput) -> tuple[Optional[TransactionKind], list[ValidationIssue]]:
        try:
            return TransactionKind(value), []
        except ValueError:
            return None, [ValidationIssue(
                field="kind",
                issue_type="invalid_value",
                message="Type must be income or expense",
            )]

    def validate(
        self,
        description: object,
        amount: AmountInput,
        kind: KindInput,
        category: object,
        date: DateInput,
    ) -> tuple[Optional[Transaction], list[ValidationIssue]]:
        """
        Run every check and collect all issues.

        Returns:
            (transaction, issues) - transaction is None when any
            error-level issue was found
        """
        issues = []

        clean_description, found = self._check_text("description", description)
        issues.extend(found)
        clean_amount, found = self._check_amount(amount)
        issues.extend(found)
        clean_kind, found = self._check_kind(kind)
        issues.extend(found)
        clean_category, found = self._check_text("category", category)
        issues.extend(found)
        clean_date, found = self._check_date(date)
        issues.extend(found)

        if any(issue.severity == "error" for issue in issues):
            return None, issues

        transaction = Transaction(
            date=clean_date,
            description=clean_description,
            amount=clean_amount,
            kind=clean_kind,
            category=clean_category,
        )
        return transaction, issues


def get_user_friendly_summary(issues: list[ValidationIssue]) -> str:
    """
    Generate a short summary of validation issues for display.
    """
    if not issues:
        return "All checks passed."

    lines = ["Please check your input:"]
    for issue in issues:
        lines.append(f"   • {issue.message}")
    return "\n".join(lines)
