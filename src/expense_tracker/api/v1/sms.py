"""SMS parsing and ingestion endpoints."""

import logging

from fastapi import APIRouter, Depends, status

from expense_tracker.api.deps import get_detector, get_ingestion_service, get_parser
from expense_tracker.config import settings
from expense_tracker.core.exceptions import IngestionError
from expense_tracker.parsers.detector import BankDetector
from expense_tracker.parsers.sms import SMSTransactionParser
from expense_tracker.schemas.sms import (
    SmsIngestRequest,
    SmsIngestResponse,
    SmsParseRequest,
    SmsParseResponse,
)
from expense_tracker.services.ingestion import IngestStatus, SmsIngestionService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sms", tags=["sms"])


@router.post(
    "/parse",
    response_model=SmsParseResponse,
    summary="Parse one SMS",
    description="""
    Run the debit-transaction parser on a single message without storing it.

    Credits, OTPs and promotional messages are not errors: they come back with
    `is_transaction: false` and a null `transaction`.
    """,
)
async def parse_sms(
    payload: SmsParseRequest,
    parser: SMSTransactionParser = Depends(get_parser),
    detector: BankDetector = Depends(get_detector),
) -> SmsParseResponse:
    transaction = parser.parse_transaction(payload.body, payload.sender)
    return SmsParseResponse(
        is_transaction=transaction is not None,
        transaction=transaction,
        bank_code=detector.detect(payload.sender),
    )


@router.post(
    "/ingest",
    response_model=SmsIngestResponse,
    status_code=status.HTTP_200_OK,
    summary="Ingest a batch of SMS",
    description="""
    Parse each message, skip non-transactions and already-stored messages
    (deduplicated on `SMS_{sender}_{timestamp_ms}`), and store the rest.

    Use **since_ms** to only consider messages received after a given instant.
    """,
)
async def ingest_sms(
    payload: SmsIngestRequest,
    service: SmsIngestionService = Depends(get_ingestion_service),
) -> SmsIngestResponse:
    if len(payload.messages) > settings.sms_max_batch_size:
        raise IngestionError(
            error_code="SMS_001",
            details={
                "messages_count": len(payload.messages),
                "max_batch_size": settings.sms_max_batch_size,
            },
            http_status=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
        )

    summary = await service.ingest_many(payload.messages, since_ms=payload.since_ms)

    return SmsIngestResponse(
        received_count=len(summary.results),
        saved_count=summary.count(IngestStatus.SAVED),
        duplicate_count=summary.count(IngestStatus.DUPLICATE),
        skipped_count=summary.count(IngestStatus.NOT_TRANSACTION),
        expenses=summary.saved,
    )
