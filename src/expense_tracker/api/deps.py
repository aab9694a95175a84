"""FastAPI dependency injection for the parser, suggester and ingestion service.

Long-lived collaborators are created once per app in ``create_app`` and stored
on ``app.state``; these helpers hand them to route handlers.
"""

from fastapi import Depends, Request

from expense_tracker.categorization.suggestion import CategorySuggester
from expense_tracker.parsers.detector import BankDetector
from expense_tracker.parsers.sms import SMSTransactionParser
from expense_tracker.repositories.expense import ExpenseRepository
from expense_tracker.services.ingestion import SmsIngestionService


def get_parser(request: Request) -> SMSTransactionParser:
    return request.app.state.parser


def get_detector(request: Request) -> BankDetector:
    return request.app.state.detector


def get_repository(request: Request) -> ExpenseRepository:
    return request.app.state.repository


def get_suggester(request: Request) -> CategorySuggester:
    return request.app.state.suggester


async def get_ingestion_service(
    repository: ExpenseRepository = Depends(get_repository),
    parser: SMSTransactionParser = Depends(get_parser),
    detector: BankDetector = Depends(get_detector),
) -> SmsIngestionService:
    """
    Get SMS ingestion service instance.

    Args:
        repository: Expense repository
        parser: Shared SMS parser
        detector: Shared bank detector

    Returns:
        SmsIngestionService instance
    """
    return SmsIngestionService(repository, parser=parser, detector=detector)
