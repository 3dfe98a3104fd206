"""
Tests for transaction input validation
"""

import pytest
from datetime import date
from decimal import Decimal

from finance_tracker.models.transaction import TransactionKind
from finance_tracker.validation import (
    TransactionValidator,
    ValidationError,
    get_user_friendly_summary,
)


@pytest.fixture
def validator():
    return TransactionValidator()


class TestTransactionValidator:
    """Tests for TransactionValidator."""

    def test_valid_raw_input(self, validator):
        """Test form-style string input."""
        transaction, issues = validator.validate(
            description="  Groceries ",
            amount="54.32",
            kind="expense",
            category=" Food",
            date="2024-01-16",
        )
        assert issues == []
        assert transaction.description == "Groceries"
        assert transaction.category == "Food"
        assert transaction.amount == Decimal("54.32")
        assert transaction.kind == TransactionKind.EXPENSE
        assert transaction.date == date(2024, 1, 16)

    def test_valid_typed_input(self, validator):
        """Test already-typed input."""
        transaction, issues = validator.validate(
            description="Paycheck",
            amount=Decimal("2500"),
            kind=TransactionKind.INCOME,
            category="Salary",
            date=date(2024, 1, 15),
        )
        assert issues == []
        assert transaction.amount == Decimal("2500")

    def test_float_amount_keeps_short_form(self, validator):
        transaction, _ = validator.validate("x", 54.32, "expense", "y", "2024-01-01")
        assert transaction.amount == Decimal("54.32")

    def test_negative_amount_is_allowed(self, validator):
        transaction, issues = validator.validate("x", "-5", "expense", "y", "2024-01-01")
        assert issues == []
        assert transaction.amount == Decimal("-5")

    @pytest.mark.parametrize("description", ["", "   ", None])
    def test_empty_description(self, validator, description):
        transaction, issues = validator.validate(description, "1", "expense", "Food", "2024-01-01")
        assert transaction is None
        assert [i.field for i in issues] == ["description"]
        assert issues[0].issue_type == "missing"

    @pytest.mark.parametrize("category", ["", "\t"])
    def test_empty_category(self, validator, category):
        transaction, issues = validator.validate("Lunch", "1", "expense", category, "2024-01-01")
        assert transaction is None
        assert [i.field for i in issues] == ["category"]

    @pytest.mark.parametrize("amount", ["", "abc", "NaN", "inf", True])
    def test_invalid_amount(self, validator, amount):
        transaction, issues = validator.validate("Lunch", amount, "expense", "Food", "2024-01-01")
        assert transaction is None
        assert [i.field for i in issues] == ["amount"]

    @pytest.mark.parametrize("value", ["2024-13-01", "01/15/2024", "", "2024-1-5"])
    def test_invalid_date(self, validator, value):
        transaction, issues = validator.validate("Lunch", "1", "expense", "Food", value)
        assert transaction is None
        assert [i.field for i in issues] == ["date"]

    def test_date_input_is_trimmed(self, validator):
        transaction, issues = validator.validate("Lunch", "1", "expense", "Food", " 2024-01-05 ")
        assert transaction.date == date(2024, 1, 5)

    def test_invalid_kind(self, validator):
        transaction, issues = validator.validate("Lunch", "1", "Expense", "Food", "2024-01-01")
        assert transaction is None
        assert [i.field for i in issues] == ["kind"]

    def test_all_issues_are_collected(self, validator):
        transaction, issues = validator.validate("", "abc", "expense", "", "nope")
        assert transaction is None
        assert {i.field for i in issues} == {"description", "amount", "category", "date"}

    def test_validation_error_carries_issues(self, validator):
        _, issues = validator.validate("", "1", "expense", "Food", "2024-01-01")
        error = ValidationError(issues)
        assert error.issues[0].field == "description"
        assert "Description cannot be empty" in str(error)


class TestUserFriendlySummary:
    """Tests for get_user_friendly_summary()."""

    def test_no_issues(self):
        assert get_user_friendly_summary([]) == "All checks passed."

    def test_lists_each_issue(self, validator):
        _, issues = validator.validate("", "abc", "expense", "Food", "2024-01-01")
        summary = get_user_friendly_summary(issues)
        assert "Description cannot be empty" in summary
        assert "Invalid amount" in summary


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
