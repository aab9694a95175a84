"""Unit tests for error handling, the error catalog and log PII filtering."""

import json
import logging
from unittest.mock import Mock

import pytest
from fastapi import Request
from fastapi.responses import JSONResponse

from expense_tracker.api.middleware.error_handler import (
    handle_expense_tracker_error,
    handle_generic_error,
)
from expense_tracker.core.errors import get_error, get_suggestion, get_user_message, is_retryable
from expense_tracker.core.exceptions import ExpenseTrackerError, IngestionError, ValidationError
from expense_tracker.core.logging_setup import JSONLogFormatter, filter_pii, setup_logging


def _request(path: str = "/api/v1/sms/ingest", method: str = "POST") -> Mock:
    request = Mock(spec=Request)
    request.url.path = path
    request.method = method
    return request


class TestExpenseTrackerErrorHandler:
    @pytest.mark.asyncio
    async def test_handle_ingestion_error(self):
        exc = IngestionError(error_code="SMS_001", details={"messages_count": 9000}, http_status=413)

        response = await handle_expense_tracker_error(_request(), exc)

        assert isinstance(response, JSONResponse)
        assert response.status_code == 413
        body = json.loads(response.body)
        assert body["error_code"] == "SMS_001"
        assert set(body) == {"error_code", "message", "user_message", "suggestion", "retry_allowed"}

    @pytest.mark.asyncio
    async def test_details_not_in_response(self):
        exc = ValidationError(error_code="CAT_002", details={"selected_category": "secret"}, http_status=400)

        response = await handle_expense_tracker_error(_request(), exc)

        assert "secret" not in response.body.decode()

    @pytest.mark.asyncio
    async def test_generic_error_hides_internals(self):
        response = await handle_generic_error(_request(), RuntimeError("db password leaked"))

        assert response.status_code == 500
        body = json.loads(response.body)
        assert body["error_code"] == "SYS_001"
        assert "password" not in response.body.decode()


class TestErrorCatalog:
    def test_known_code(self):
        assert get_error("SMS_002")["retry_allowed"] is True
        assert get_user_message("CAT_001") == "Please choose a category."
        assert is_retryable("CAT_002") is False
        assert get_suggestion("SMS_001").startswith("Split")

    def test_unknown_code(self):
        error = get_error("NOPE_999")
        assert error["code"] == "UNKNOWN"
        assert error["retry_allowed"] is True

    def test_exception_defaults(self):
        exc = ExpenseTrackerError("SYS_001")
        assert exc.details == {}
        assert exc.http_status == 500
        assert str(exc) == "SYS_001"


class TestFilterPII:
    @pytest.mark.parametrize(
        "text,placeholder",
        [
            ("card 4111 1111 1111 1111 used", "[CARD]"),
            ("debited from a/c XX1234 today", "[ACCOUNT]"),
            ("A/c no. **5678 debited", "[ACCOUNT]"),
            ("mail me at someone@example.com", "[EMAIL]"),
            ("call +91 98765 43210 now", "[PHONE]"),
            ("call 9876543210 now", "[PHONE]"),
        ],
    )
    def test_masks(self, text, placeholder):
        assert placeholder in filter_pii(text)

    def test_plain_text_untouched(self):
        assert filter_pii("Rs.500 debited at Amazon") == "Rs.500 debited at Amazon"

    def test_empty(self):
        assert filter_pii("") == ""


class TestLogging:
    def test_json_formatter_masks_and_copies_extras(self):
        record = logging.LogRecord(
            name="expense_tracker.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="debited from a/c XX1234",
            args=(),
            exc_info=None,
        )
        record.sms_id = "SMS_VM-HDFCBK_1"

        data = json.loads(JSONLogFormatter().format(record))

        assert data["level"] == "INFO"
        assert "[ACCOUNT]" in data["message"]
        assert data["sms_id"] == "SMS_VM-HDFCBK_1"
        assert "request_id" not in data

    def test_setup_logging_does_not_stack_handlers(self):
        root = logging.getLogger()
        setup_logging("DEBUG")
        setup_logging("INFO", json_format=True)

        ours = [h for h in root.handlers if h.get_name() == "expense_tracker"]
        assert len(ours) == 1
        assert isinstance(ours[0].formatter, JSONLogFormatter)
        assert root.level == logging.INFO

        root.removeHandler(ours[0])
