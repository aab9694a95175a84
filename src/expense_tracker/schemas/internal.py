"""Internal data schemas for parsed SMS data and category suggestions.

These models are produced by the parser and the suggestion engine and
consumed by the ingestion service before anything reaches the expense
repository.
"""

import time
from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PaymentMode(str, Enum):
    """How the money left the account."""

    CASH = "Cash"
    CARD = "Card"
    UPI = "UPI"
    TRANSFER = "Transfer"


class ExpenseSource(str, Enum):
    """Where an expense record came from."""

    SMS = "SMS"
    MANUAL = "Manual"
    IMPORT = "Import"


class ParsedTransaction(BaseModel):
    """A debit transaction extracted from a single bank SMS.

    Never built for credit messages. ``description`` and ``merchant`` carry the
    same best-effort payee text.
    """

    model_config = ConfigDict(frozen=True)

    amount: Decimal = Field(..., gt=0, description="Debited amount in major units")
    category: str = Field(..., min_length=1, description="Inferred category name")
    description: str = Field(..., description="Merchant name or fallback literal")
    payment_mode: PaymentMode = Field(..., description="Cash, Card, UPI or Transfer")
    merchant: str = Field(..., description="Extracted payee/vendor")


class CategorySuggestion(BaseModel):
    """A ranked category guess with a heuristic confidence score."""

    model_config = ConfigDict(frozen=True)

    category: str
    confidence: float = Field(..., ge=0, le=100, description="Heuristic score, not a probability")


class LearningRecord(BaseModel):
    """A user's override of a suggested category."""

    model_config = ConfigDict(frozen=True)

    description: str
    merchant: str
    selected_category: str
    timestamp: int = Field(
        default_factory=lambda: int(time.time() * 1000),
        description="Epoch milliseconds",
    )


class SmsMessage(BaseModel):
    """Raw inbound SMS as handed over by the device layer."""

    sender: str = Field(..., description="Originating address / DLT header")
    body: str = Field(..., description="Message text")
    timestamp_ms: int = Field(..., ge=0, description="Receive time in epoch milliseconds")


class ExpenseDraft(BaseModel):
    """Expense record built from a parsed SMS, ready for the repository."""

    amount: Decimal = Field(..., gt=0)
    category: str
    description: str
    payment_mode: PaymentMode
    date: datetime
    notes: str = ""
    source: ExpenseSource = ExpenseSource.SMS
    sms_id: str = Field(..., description="Deduplication key")
    merchant: str = ""
    bank: str = ""
    bank_code: str | None = Field(None, description="Detected issuer code (hdfc, sbi, ...)")

    @field_validator("category")
    @classmethod
    def category_not_empty(cls, v: str) -> str:
        """Ensure category is not blank."""
        if not v or not v.strip():
            raise ValueError("Category cannot be empty")
        return v.strip()
