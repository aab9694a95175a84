from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from expense_tracker.api.middleware.error_handler import (
    handle_expense_tracker_error,
    handle_generic_error,
    handle_validation_error,
)
from expense_tracker.api.middleware.logging import RequestLoggingMiddleware
from expense_tracker.api.v1 import router as v1_router
from expense_tracker.api.v1.health import router as health_router
from expense_tracker.categorization.suggestion import CategorySuggester, LearningLog
from expense_tracker.config import settings
from expense_tracker.core.exceptions import ExpenseTrackerError
from expense_tracker.core.logging_setup import setup_logging
from expense_tracker.parsers.detector import BankDetector
from expense_tracker.parsers.sms import SMSTransactionParser
from expense_tracker.repositories.expense import ExpenseRepository, InMemoryExpenseRepository


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level, json_format=settings.log_json)
    yield


def create_app(
    repository: ExpenseRepository | None = None,
    learning_log: LearningLog | None = None,
) -> FastAPI:
    app = FastAPI(
        title="SMS Expense Engine API",
        description="Bank SMS transaction parsing and category suggestions",
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.state.parser = SMSTransactionParser()
    app.state.detector = BankDetector()
    app.state.repository = repository if repository is not None else InMemoryExpenseRepository()
    app.state.suggester = CategorySuggester(learning_log=learning_log)

    app.add_middleware(RequestLoggingMiddleware)

    # Order matters - most specific first
    app.add_exception_handler(ExpenseTrackerError, handle_expense_tracker_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_generic_error)

    app.include_router(health_router)
    app.include_router(v1_router)

    return app


app = create_app()
