"""
Tests for Finance Tracker models

Test strategy:
1. Unit tests for individual components (models, codec, queries, validator)
2. Store tests against in-memory and temporary-file storage
3. No real user data files touched (tmp_path only)
"""

import pytest
from datetime import date
from decimal import Decimal

from pydantic import ValidationError as PydanticValidationError

from finance_tracker.models.transaction import (
    LedgerSummary,
    LoadReport,
    SkippedLine,
    Transaction,
    TransactionKind,
    ValidationIssue,
)
from finance_tracker.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)


class TestTransactionModel:
    """Tests for the Transaction model."""

    def test_transaction_creation(self):
        """Test Transaction model creation."""
        t = Transaction(
            date=date(2024, 1, 15),
            description="Paycheck",
            amount=Decimal("2500.0"),
            kind=TransactionKind.INCOME,
            category="Salary",
        )
        assert t.description == "Paycheck"
        assert t.amount == Decimal("2500")
        assert t.is_income is True
        assert t.is_expense is False

    def test_transaction_is_immutable(self):
        """Test that a transaction can't be edited in place."""
        t = Transaction(
            date=date(2024, 1, 16),
            description="Groceries",
            amount=Decimal("54.32"),
            kind=TransactionKind.EXPENSE,
            category="Food",
        )
        with pytest.raises(PydanticValidationError):
            t.amount = Decimal("1")

    def test_transaction_allows_negative_and_zero_amounts(self):
        """Test that the model keeps the historical leniency on amounts."""
        negative = Transaction(
            date=date(2024, 1, 1),
            description="Refund",
            amount=Decimal("-10"),
            kind=TransactionKind.EXPENSE,
            category="Misc",
        )
        zero = negative.model_copy(update={"amount": Decimal("0")})
        assert negative.amount == Decimal("-10")
        assert zero.amount == Decimal("0")

    def test_transaction_rejects_non_finite_amount(self):
        """Test that NaN amounts are rejected."""
        with pytest.raises(PydanticValidationError):
            Transaction(
                date=date(2024, 1, 1),
                description="Broken",
                amount=Decimal("NaN"),
                kind=TransactionKind.EXPENSE,
                category="Misc",
            )

    def test_transaction_rejects_unknown_kind(self):
        """Test that kind must be income or expense."""
        with pytest.raises(PydanticValidationError):
            Transaction(
                date=date(2024, 1, 1),
                description="Transfer",
                amount=Decimal("5"),
                kind="transfer",
                category="Misc",
            )

    def test_kind_values(self):
        """Test kind string values match the data file tokens."""
        assert TransactionKind.INCOME.value == "income"
        assert TransactionKind.EXPENSE.value == "expense"
        assert TransactionKind("income") is TransactionKind.INCOME


class TestLedgerSummary:
    """Tests for the LedgerSummary model."""

    def test_default_summary_is_zero(self):
        summary = LedgerSummary()
        assert summary.total_income == 0
        assert summary.total_expenses == 0
        assert summary.balance == 0

    def test_balance_is_income_minus_expenses(self):
        summary = LedgerSummary(
            total_income=Decimal("100"),
            total_expenses=Decimal("130.50"),
        )
        assert summary.balance == Decimal("-30.50")
        assert summary.model_dump()["balance"] == Decimal("-30.50")


class TestLoadReport:
    """Tests for the LoadReport model."""

    def test_skipped_count(self):
        report = LoadReport(
            source_found=True,
            loaded=1,
            skipped=[SkippedLine(line_number=3, line="bad", reason="expected 5 fields, got 1")],
        )
        assert report.skipped_count == 1

    def test_missing_source_report(self):
        report = LoadReport(source_found=False)
        assert report.loaded == 0
        assert report.skipped == []


class TestValidationIssue:
    """Tests for the ValidationIssue model."""

    def test_default_severity_is_error(self):
        issue = ValidationIssue(field="amount", issue_type="invalid_format", message="Bad")
        assert issue.severity == "error"

    def test_severity_pattern(self):
        with pytest.raises(PydanticValidationError):
            ValidationIssue(
                field="amount",
                issue_type="invalid_format",
                message="Bad",
                severity="fatal",
            )


class TestAuditModels:
    """Tests for audit-related models."""

    def test_audit_event_creation(self):
        """Test AuditEvent model creation."""
        event = AuditEvent(
            event_type=AuditEventType.LEDGER_SAVED,
            description="Saved",
        )
        assert event.event_type == AuditEventType.LEDGER_SAVED
        assert event.severity == AuditSeverity.INFO
        assert event.timestamp.tzinfo is not None

    def test_audit_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        event = AuditEventBuilder.ledger_saved("transactions.csv", 3)
        log_dict = event.to_log_dict()
        assert "event_id" in log_dict
        assert log_dict["event_type"] == "ledger_saved"
        assert log_dict["details"]["count"] == 3
        assert log_dict["is_user_action"] is True

    def test_builder_transaction_added(self):
        """Test AuditEventBuilder.transaction_added."""
        event = AuditEventBuilder.transaction_added(
            transaction_date="2024-01-15",
            description="Paycheck",
            amount="2500.0",
            kind="income",
            category="Salary",
        )
        assert event.event_type == AuditEventType.TRANSACTION_ADDED
        assert event.details["category"] == "Salary"
        assert "Paycheck" in event.description

    def test_builder_transaction_added_long_description(self):
        """Test that a long description doesn't break the event."""
        event = AuditEventBuilder.transaction_added(
            transaction_date="2024-01-15",
            description="x" * 1000,
            amount="1.0",
            kind="expense",
            category="Misc",
        )
        assert len(event.description) <= 500

    def test_builder_ledger_loaded_missing_source(self):
        """Test the message for a missing data file."""
        event = AuditEventBuilder.ledger_loaded(
            source="transactions.csv",
            loaded=0,
            skipped=0,
            source_found=False,
        )
        assert "No data file found" in event.description
        assert event.details["source_found"] is False

    def test_builder_failures_are_errors(self):
        """Test that load/save failures are error severity."""
        load_failed = AuditEventBuilder.ledger_load_failed("a.csv", "denied")
        save_failed = AuditEventBuilder.ledger_save_failed("a.csv", "disk full")
        assert load_failed.severity == AuditSeverity.ERROR
        assert save_failed.severity == AuditSeverity.ERROR
        assert save_failed.error_message == "disk full"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
