"""SMS ingestion service.

This is the glue between the device's SMS feed and the expense repository:

1. Parse the message body (non-transactions are skipped)
2. Build the deduplication key from sender + receive time
3. Skip messages whose key is already stored
4. Draft and insert the expense

The parser never raises for bad text; repository failures are wrapped in
``IngestionError`` so callers get a catalog error code.
"""

import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field

from expense_tracker.core.exceptions import IngestionError
from expense_tracker.parsers.detector import BankDetector
from expense_tracker.parsers.sms import SMSTransactionParser
from expense_tracker.repositories.expense import ExpenseRepository
from expense_tracker.schemas.internal import ExpenseDraft, ExpenseSource, SmsMessage

logger = logging.getLogger(__name__)


def build_sms_id(sender: str, timestamp_ms: int) -> str:
    """Deduplication key for an SMS-derived expense."""
    return f"SMS_{sender}_{timestamp_ms}"


class IngestStatus(str, Enum):
    SAVED = "saved"
    DUPLICATE = "duplicate"
    NOT_TRANSACTION = "not_transaction"


class IngestResult(BaseModel):
    """Outcome of ingesting one message."""

    sms_id: str
    status: IngestStatus
    expense: ExpenseDraft | None = None


class IngestSummary(BaseModel):
    """Outcome of ingesting a batch of messages."""

    results: list[IngestResult] = Field(default_factory=list)

    @property
    def saved(self) -> list[ExpenseDraft]:
        return [r.expense for r in self.results if r.status == IngestStatus.SAVED and r.expense]

    def count(self, status: IngestStatus) -> int:
        return sum(1 for r in self.results if r.status == status)


class SmsIngestionService:
    """Service layer turning inbound SMS into stored expenses."""

    def __init__(
        self,
        repository: ExpenseRepository,
        parser: SMSTransactionParser | None = None,
        detector: BankDetector | None = None,
    ):
        """Initialize the ingestion service.

        Args:
            repository: Expense store used for dedup lookups and inserts
            parser: SMS parser (default: new SMSTransactionParser)
            detector: Sender-to-bank detector (default: new BankDetector)
        """
        self.repository = repository
        self.parser = parser or SMSTransactionParser()
        self.detector = detector or BankDetector()

    def draft_expense(self, message: SmsMessage) -> ExpenseDraft | None:
        """Parse a message and build the expense record, without storing it.

        Returns None for non-transactions and for receive times that cannot be
        represented as a date.
        """
        parsed = self.parser.parse_transaction(message.body, message.sender)
        if parsed is None:
            return None

        try:
            date = datetime.fromtimestamp(message.timestamp_ms / 1000, tz=timezone.utc)
        except (ValueError, OverflowError, OSError):
            logger.debug(
                "SMS timestamp outside datetime range",
                extra={"sms_id": build_sms_id(message.sender, message.timestamp_ms)},
            )
            return None

        return ExpenseDraft(
            amount=parsed.amount,
            category=parsed.category,
            description=parsed.description,
            payment_mode=parsed.payment_mode,
            date=date,
            notes="",
            source=ExpenseSource.SMS,
            sms_id=build_sms_id(message.sender, message.timestamp_ms),
            merchant=parsed.merchant,
            bank=message.sender,
            bank_code=self.detector.detect(message.sender),
        )

    async def ingest(self, message: SmsMessage) -> IngestResult:
        """Parse, deduplicate and store one message.

        Raises:
            IngestionError: If the repository fails (SMS_002)
        """
        sms_id = build_sms_id(message.sender, message.timestamp_ms)

        draft = self.draft_expense(message)
        if draft is None:
            logger.debug("Not a transaction SMS", extra={"sms_id": sms_id})
            return IngestResult(sms_id=sms_id, status=IngestStatus.NOT_TRANSACTION)

        try:
            existing = await self.repository.get_by_sms_id(sms_id)
            if existing is not None:
                logger.info("Duplicate SMS detected, skipping", extra={"sms_id": sms_id})
                return IngestResult(sms_id=sms_id, status=IngestStatus.DUPLICATE, expense=existing)

            saved = await self.repository.insert(draft)
        except IngestionError:
            raise
        except Exception as e:
            logger.error(
                "Expense repository failure",
                extra={"sms_id": sms_id, "error_type": type(e).__name__},
            )
            raise IngestionError(
                error_code="SMS_002",
                details={"sms_id": sms_id, "error": str(e)},
                http_status=500,
            ) from e

        # Another writer stored this sms_id between the lookup and the insert.
        if saved is not draft:
            logger.info("Duplicate SMS detected on insert", extra={"sms_id": sms_id})
            return IngestResult(sms_id=sms_id, status=IngestStatus.DUPLICATE, expense=saved)

        logger.info(
            "Expense saved from SMS",
            extra={
                "sms_id": sms_id,
                "bank_code": saved.bank_code,
                "category": saved.category,
                "payment_mode": saved.payment_mode.value,
            },
        )
        return IngestResult(sms_id=sms_id, status=IngestStatus.SAVED, expense=saved)

    async def ingest_many(
        self, messages: Iterable[SmsMessage], since_ms: int | None = None
    ) -> IngestSummary:
        """Ingest a batch, optionally only messages received after ``since_ms``.

        Messages are processed newest first, matching how inbox scans are
        ordered on the device.
        """
        pending = [m for m in messages if since_ms is None or m.timestamp_ms > since_ms]
        pending.sort(key=lambda m: m.timestamp_ms, reverse=True)

        summary = IngestSummary()
        for message in pending:
            summary.results.append(await self.ingest(message))

        logger.info(
            "SMS batch ingested",
            extra={
                "messages_count": len(pending),
                "saved_count": summary.count(IngestStatus.SAVED),
                "duplicate_count": summary.count(IngestStatus.DUPLICATE),
                "skipped_count": summary.count(IngestStatus.NOT_TRANSACTION),
            },
        )
        return summary
