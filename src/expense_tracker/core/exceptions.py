"""Custom exception classes for SMS ingestion and categorization.

The parser and the category suggester never raise for bad input text; these
exceptions are for the surfaces around them (batch ingestion, user
selections, API requests). Each exception maps to an error code defined in
errors.py.
"""

from typing import Any


class ExpenseTrackerError(Exception):
    """Base exception for all expense tracker errors.

    Attributes:
        error_code: Code from the error catalog (e.g., "SMS_001")
        details: Additional context about the error (for logging)
        http_status: HTTP status code to return (default: 500)
    """

    def __init__(
        self,
        error_code: str,
        details: dict[str, Any] | None = None,
        http_status: int = 500,
    ):
        """Initialize the exception.

        Args:
            error_code: Error code from errors.py
            details: Additional error context (not shown to users)
            http_status: HTTP status code (default: 500)
        """
        self.error_code = error_code
        self.details = details or {}
        self.http_status = http_status
        super().__init__(error_code)


class IngestionError(ExpenseTrackerError):
    """Raised when an SMS batch cannot be ingested.

    Common causes:
    - Batch larger than the configured limit (SMS_001)
    - Repository rejected the expense draft (SMS_002)
    """

    pass


class ValidationError(ExpenseTrackerError):
    """Raised when a request fails business validation.

    This includes:
    - Blank selected category on a learning record (CAT_001)
    - Selected category outside the supplied known categories (CAT_002)
    """

    pass
