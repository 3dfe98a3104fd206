"""
Core Data Models for Finance Tracker

The ledger has exactly one entity: the Transaction.

DESIGN DECISION: Transactions are frozen Pydantic models.
Once a transaction is in the ledger it can't be edited in place;
the only way to change the data file is to rewrite it whole.

The model itself is lenient on purpose:
- amount may be negative or zero (sign is carried by kind)
- description/category emptiness is checked at the boundary
  (see finance_tracker.validation), not here
"""

from datetime import date as Date
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field


# =============================================================================
# ENUMS
# =============================================================================

class TransactionKind(str, Enum):
    """
    Direction of a transaction.

    Values are the literal tokens written to the `type` column
    of the data file (case-sensitive).
    """
    INCOME = "income"
    EXPENSE = "expense"


# =============================================================================
# CORE TRANSACTION MODEL
# =============================================================================

class Transaction(BaseModel):
    """
    One financial event in the ledger.

    Construct through TransactionStore.add() for user input.
    The CSV codec builds already-checked records with model_construct()
    so trusted data is not validated twice.
    """
    model_config = ConfigDict(frozen=True)

    date: Date = Field(
        ...,
        description="Calendar date of the transaction (no time of day)"
    )
    description: str = Field(
        ...,
        description="Free-text label"
    )
    amount: Decimal = Field(
        ...,
        allow_inf_nan=False,
        description="Magnitude of the transaction; direction comes from kind"
    )
    kind: TransactionKind = Field(
        ...,
        description="Income or expense"
    )
    category: str = Field(
        ...,
        description="Free-text category label"
    )

    @property
    def is_income(self) -> bool:
        return self.kind == TransactionKind.INCOME

    @property
    def is_expense(self) -> bool:
        return self.kind == TransactionKind.EXPENSE


# =============================================================================
# AGGREGATE MODELS
# =============================================================================

class LedgerSummary(BaseModel):
    """Totals over a sequence of transactions."""
    model_config = ConfigDict(frozen=True)

    total_income: Decimal = Field(default=Decimal("0"))
    total_expenses: Decimal = Field(default=Decimal("0"))

    @computed_field
    @property
    def balance(self) -> Decimal:
        return self.total_income - self.total_expenses


class SkippedLine(BaseModel):
    """A data file line that could not be decoded."""

    line_number: int = Field(
        ...,
        ge=1,
        description="1-based line number in the source (header is line 1)"
    )
    line: str
    reason: str


class LoadReport(BaseModel):
    """
    Outcome of TransactionStore.load().

    source_found is False when the data file did not exist and the
    ledger was started empty.
    """

    source_found: bool
    loaded: int = Field(default=0, ge=0)
    skipped: list[SkippedLine] = Field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)


# =============================================================================
# VALIDATION MODELS
# =============================================================================

class ValidationIssue(BaseModel):
    """A single problem found in user-supplied transaction input."""

    field: str = Field(
        ...,
        description="Input field with the issue"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'missing', 'invalid_format')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    severity: str = Field(
        default="error",
        pattern="^(error|warning)$",
        description="Issue severity"
    )
