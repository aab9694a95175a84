"""SMS parsing module.

- SMSTransactionParser turns one bank SMS into a ParsedTransaction (or None)
- Merchant extraction is an ordered ladder of MerchantExtractor strategies
- BankDetector maps SMS sender IDs to issuer codes
"""

from expense_tracker.parsers.detector import BankDetector
from expense_tracker.parsers.merchant import MerchantExtractor, extract_merchant
from expense_tracker.parsers.sms import SMSTransactionParser, parse_transaction

__all__ = [
    "BankDetector",
    "MerchantExtractor",
    "SMSTransactionParser",
    "extract_merchant",
    "parse_transaction",
]
