"""Shared logging utilities.

SMS bodies carry account numbers, card fragments and phone numbers, so the
JSON formatter runs every message through ``filter_pii`` before emitting it.
"""

import json
import logging
import re
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Structured fields copied from ``extra={...}`` into JSON log lines.
EXTRA_FIELDS = (
    "request_id",
    "method",
    "path",
    "status_code",
    "duration_ms",
    "error_code",
    "error_type",
    "client_ip",
    "sender",
    "bank_code",
    "sms_id",
    "status",
    "category",
    "payment_mode",
    "messages_count",
    "saved_count",
    "duplicate_count",
    "skipped_count",
    "records_count",
)


PII_PATTERNS = [
    # Card numbers (13-19 digits, with or without spaces/dashes)
    (re.compile(r"\b\d{4}[\s-]?\d{4}[\s-]?\d{4}[\s-]?\d{3,7}\b"), "[CARD]"),
    # Masked account numbers as printed in bank SMS (XX1234, A/c *5678)
    (re.compile(r"(?i)\b(?:a/c|acct|account)\s*(?:no\.?)?\s*[x*]+\d{3,6}\b"), "[ACCOUNT]"),
    (re.compile(r"\b[Xx*]{2,}\d{3,6}\b"), "[ACCOUNT]"),
    # Email addresses
    (re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b"), "[EMAIL]"),
    # Phone numbers (international format)
    (re.compile(r"\+\d{1,3}[-.\s]?\(?\d{2,4}\)?[-.\s]?\d{3,4}[-.\s]?\d{4,5}"), "[PHONE]"),
    # Indian mobile numbers
    (re.compile(r"\b[6-9]\d{9}\b"), "[PHONE]"),
]


def filter_pii(text: str) -> str:
    """Remove PII from text using regex patterns.

    Args:
        text: Input text that may contain PII

    Returns:
        Text with PII replaced by placeholders
    """
    if not text:
        return text

    filtered = text
    for pattern, replacement in PII_PATTERNS:
        filtered = pattern.sub(replacement, filtered)

    return filtered


class JSONLogFormatter(logging.Formatter):
    """Format log records as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": filter_pii(record.getMessage()),
        }

        for field in EXTRA_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_data[field] = value

        if record.exc_info:
            log_data["exception"] = filter_pii(self.formatException(record.exc_info))

        return json.dumps(log_data, default=str)


def setup_logging(level: str = "INFO", json_format: bool = False) -> None:
    """Configure the root logger with a single stdout handler.

    Calling this more than once replaces the previously installed handler
    instead of stacking duplicates.

    Args:
        level: Log level ('DEBUG', 'INFO', 'WARNING', 'ERROR')
        json_format: Emit JSON lines instead of the plain text format
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    if json_format:
        handler.setFormatter(JSONLogFormatter())
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    handler.set_name("expense_tracker")

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for existing in list(root_logger.handlers):
        if existing.get_name() == "expense_tracker":
            root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
