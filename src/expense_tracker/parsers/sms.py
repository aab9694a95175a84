"""Bank SMS transaction parser.

This module turns one free-form bank SMS into a ``ParsedTransaction`` when the
message documents money leaving the account. It is deliberately
conservative: anything that looks like a credit, or anything without a
positive amount, yields ``None`` so callers can keep scanning the inbox.
"""

import logging
import re
from decimal import Decimal, InvalidOperation

from expense_tracker.categorization.rules import categorize
from expense_tracker.parsers.merchant import (
    DEFAULT_MERCHANT_EXTRACTORS,
    MerchantExtractor,
    extract_merchant,
)
from expense_tracker.schemas.internal import ParsedTransaction, PaymentMode

logger = logging.getLogger(__name__)


class SMSTransactionParser:
    """Parser for Indian bank debit SMS.

    The parse pipeline is:
        1. Drop credits (credited/received/deposited/added)
        2. Require a debit keyword or a currency amount
        3. Extract the first currency amount (must be > 0)
        4. Walk the merchant extractor ladder
        5. Infer payment mode from rail keywords
        6. Categorize from merchant + body

    Subclasses can override ``_parse_amount`` or ``_find_payment_mode`` for
    issuer-specific quirks, or pass a custom extractor ladder.

    Example:
        >>> parser = SMSTransactionParser()
        >>> txn = parser.parse_transaction("Rs.250 debited for UPI txn at Zomato.", "VM-HDFCBK")
        >>> txn.amount, txn.payment_mode.value, txn.category
        (Decimal('250'), 'UPI', 'Food')
    """

    AMOUNT_PATTERN = re.compile(
        r"(?:Rs\.?|₹|INR|Amount)\s*(?:of\s+)?[:\s]*([0-9,]+(?:\.[0-9]{2})?)"
    )
    DEBIT_PATTERN = re.compile(
        r"(?:debited|withdrawn|transferred|spent|paid|charged)\s*(?:of|by|to)?\s*[:\s]*(?:Rs\.?|₹)?",
        re.IGNORECASE,
    )
    CREDIT_PATTERN = re.compile(r"(?:credited|received|deposited|added)\s*", re.IGNORECASE)

    # Ordering matters: earlier matches win ("ATM card" is a card withdrawal).
    PAYMENT_MODE_RULES: list[tuple[str, PaymentMode]] = [
        ("atm", PaymentMode.CARD),
        ("card", PaymentMode.CARD),
        ("upi", PaymentMode.UPI),
        ("neft", PaymentMode.TRANSFER),
        ("rtgs", PaymentMode.TRANSFER),
        ("imps", PaymentMode.TRANSFER),
    ]
    DEFAULT_PAYMENT_MODE = PaymentMode.CARD

    def __init__(
        self,
        merchant_extractors: tuple[MerchantExtractor, ...] = DEFAULT_MERCHANT_EXTRACTORS,
    ):
        self.merchant_extractors = merchant_extractors

    def parse_transaction(self, body: str, sender: str) -> ParsedTransaction | None:
        """Parse a single SMS.

        Args:
            body: Message text
            sender: Originating address; carried for logging only

        Returns:
            ParsedTransaction for debit messages, otherwise None
        """
        if not body:
            return None

        if self.is_credit(body):
            logger.debug("Skipping credit message", extra={"sender": sender})
            return None

        if not self.looks_like_transaction(body):
            logger.debug("Not a transaction message", extra={"sender": sender})
            return None

        amount = self._find_amount(body)
        if amount is None:
            logger.debug("No positive amount found", extra={"sender": sender})
            return None

        merchant = extract_merchant(body, self.merchant_extractors)
        payment_mode = self._find_payment_mode(body)
        category = categorize(merchant, body)

        return ParsedTransaction(
            amount=amount,
            category=category,
            description=merchant,
            payment_mode=payment_mode,
            merchant=merchant,
        )

    def is_credit(self, body: str) -> bool:
        return self.CREDIT_PATTERN.search(body) is not None

    def looks_like_transaction(self, body: str) -> bool:
        """Debit keyword or currency amount present (filters OTPs and promos)."""
        return bool(self.DEBIT_PATTERN.search(body) or self.AMOUNT_PATTERN.search(body))

    def _find_amount(self, body: str) -> Decimal | None:
        match = self.AMOUNT_PATTERN.search(body)
        if match is None:
            return None
        amount = self._parse_amount(match.group(1))
        if amount is None or amount <= 0:
            return None
        return amount

    def _parse_amount(self, text: str) -> Decimal | None:
        """Parse "1,23,456.00" style amounts; None when nothing numeric remains."""
        cleaned = text.replace(",", "").strip()
        if not cleaned:
            return None
        try:
            return Decimal(cleaned)
        except InvalidOperation:
            return None

    def _find_payment_mode(self, body: str) -> PaymentMode:
        lowered = body.lower()
        for keyword, mode in self.PAYMENT_MODE_RULES:
            if keyword in lowered:
                return mode
        return self.DEFAULT_PAYMENT_MODE


_default_parser = SMSTransactionParser()


def parse_transaction(body: str, sender: str) -> ParsedTransaction | None:
    """Parse with the default parser (module-level convenience)."""
    return _default_parser.parse_transaction(body, sender)
