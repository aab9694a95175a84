"""Bank detection from SMS sender IDs.

Indian banks send transactional SMS from DLT headers such as ``VM-HDFCBK`` or
``JD-SBIINB``: a two-letter operator/circle prefix, a dash, and a six-letter
entity code. This module maps those headers to a short bank code.
"""

import re


class BankDetector:
    """Detects the issuing bank from an SMS sender ID.

    Supported banks:
        - hdfc: HDFC Bank
        - icici: ICICI Bank
        - sbi: State Bank of India / SBI Card
        - axis: Axis Bank
        - kotak: Kotak Mahindra Bank
        - amex: American Express
        - citi: Citibank
        - paytm: Paytm Payments Bank

    Example:
        >>> detector = BankDetector()
        >>> detector.detect("VM-HDFCBK")
        'hdfc'
        >>> detector.detect("+919800000000") is None
        True
    """

    # Matched against the entity part of the header (prefix stripped).
    BANK_PATTERNS = {
        "hdfc": [r"HDFC", r"HDFCBK"],
        "icici": [r"ICICI", r"ICIC[BT]"],
        "sbi": [r"SBI", r"SBMSMS", r"ATMSBI", r"CBSSBI"],
        "axis": [r"AXIS", r"AXISBK"],
        "kotak": [r"KOTAK", r"KOTAKB"],
        "amex": [r"AMEX", r"AMEXIN"],
        "citi": [r"CITI", r"CITIBK"],
        "paytm": [r"PAYTM", r"PYTMBK"],
    }

    _HEADER_PREFIX = re.compile(r"^[A-Z]{2}-")

    def __init__(self):
        self._compiled_patterns: dict[str, list[re.Pattern]] = {}
        for bank_code, patterns in self.BANK_PATTERNS.items():
            self._compiled_patterns[bank_code] = [
                re.compile(pattern, re.IGNORECASE) for pattern in patterns
            ]

    def detect(self, sender: str | None) -> str | None:
        """Detect the bank from an SMS sender ID.

        Args:
            sender: Originating address, e.g. "VM-HDFCBK" or "HDFCBK"

        Returns:
            Bank code (e.g., "hdfc") or None if no match found
        """
        if not sender:
            return None

        entity = self._HEADER_PREFIX.sub("", sender.strip().upper())
        if not entity:
            return None

        for bank_code, patterns in self._compiled_patterns.items():
            if any(pattern.search(entity) for pattern in patterns):
                return bank_code

        return None

    def get_supported_banks(self) -> list[str]:
        return list(self._compiled_patterns.keys())

    def add_pattern(self, bank_code: str, pattern: str) -> None:
        """Add a new detection pattern for a bank at runtime.

        Args:
            bank_code: Bank code (e.g., "hdfc"); new codes are allowed
            pattern: Regex matched against the sender entity
        """
        if bank_code not in self._compiled_patterns:
            self._compiled_patterns[bank_code] = []

        self._compiled_patterns[bank_code].append(re.compile(pattern, re.IGNORECASE))
