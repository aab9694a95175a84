"""SMS request/response schemas."""

from pydantic import BaseModel, Field

from expense_tracker.schemas.internal import ExpenseDraft, ParsedTransaction, SmsMessage


class SmsParseRequest(BaseModel):
    """Request to parse a single SMS without storing it."""

    body: str = Field(description="Message text")
    sender: str = Field(default="", description="Originating address / DLT header")


class SmsParseResponse(BaseModel):
    """Parse outcome; ``transaction`` is null for non-debit messages."""

    is_transaction: bool
    transaction: ParsedTransaction | None = None
    bank_code: str | None = Field(None, description="Detected issuer code, if any")


class SmsIngestRequest(BaseModel):
    """Batch of inbound messages to ingest."""

    messages: list[SmsMessage] = Field(default_factory=list)
    since_ms: int | None = Field(
        None, ge=0, description="Only ingest messages received after this epoch-ms instant"
    )


class SmsIngestResponse(BaseModel):
    """Counts per outcome plus the newly stored expenses."""

    received_count: int
    saved_count: int
    duplicate_count: int
    skipped_count: int
    expenses: list[ExpenseDraft] = Field(default_factory=list)
