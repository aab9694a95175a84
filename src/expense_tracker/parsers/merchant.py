"""Merchant extraction strategies for bank SMS text.

Each strategy implements ``try_extract(text) -> str | None``. The parser tries
them in order and the first non-None result wins, so new idioms can be added
by inserting a strategy rather than editing a regex ladder.
"""

import re
from typing import Protocol

# Payee text stops at a period, a comma, "on ", end of text or " - ".
_TERMINATOR = r"(?:\.|,|on\s|$|\s-\s)"
_PAYEE = r"([A-Za-z0-9\s]+?)"

FALLBACK_MERCHANT = "Transaction"


class MerchantExtractor(Protocol):
    """A single step of the merchant fallback ladder."""

    def try_extract(self, text: str) -> str | None: ...


class PatternMerchantExtractor:
    """Return the first capture group of ``pattern``, stripped.

    Example:
        >>> AT_MERCHANT.try_extract("Spent Rs.90 at Cafe Day.")
        'Cafe Day'
    """

    def __init__(self, pattern: str, flags: int = 0):
        self.pattern = re.compile(pattern, flags)

    def try_extract(self, text: str) -> str | None:
        match = self.pattern.search(text)
        if match is None:
            return None
        return match.group(1).strip()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.pattern.pattern!r})"


class CapitalizedPhraseExtractor:
    """First capitalized word longer than two characters plus up to two more words."""

    def __init__(self, min_length: int = 3, phrase_words: int = 3):
        self.min_length = min_length
        self.phrase_words = phrase_words

    def try_extract(self, text: str) -> str | None:
        words = [word for word in re.split(r"\s+", text) if word]
        for i, word in enumerate(words):
            if word[0].isupper() and len(word) >= self.min_length:
                return " ".join(words[i : i + self.phrase_words])
        return None


class LiteralMerchantExtractor:
    """Always returns the same literal; used as the last rung."""

    def __init__(self, literal: str = FALLBACK_MERCHANT):
        self.literal = literal

    def try_extract(self, text: str) -> str | None:
        return self.literal


AT_MERCHANT = PatternMerchantExtractor(r"at\s+" + _PAYEE + _TERMINATOR)
TO_MERCHANT = PatternMerchantExtractor(r"to\s+" + _PAYEE + _TERMINATOR)
FOR_MERCHANT = PatternMerchantExtractor(r"(?:for|toward|towards)\s+" + _PAYEE + _TERMINATOR)
MARKED_MERCHANT = PatternMerchantExtractor(r"merchant\s*[:=]\s*" + _PAYEE + r"(?:\.|,|\s-\s)")

DEFAULT_MERCHANT_EXTRACTORS: tuple[MerchantExtractor, ...] = (
    AT_MERCHANT,
    TO_MERCHANT,
    FOR_MERCHANT,
    MARKED_MERCHANT,
    CapitalizedPhraseExtractor(),
    LiteralMerchantExtractor(),
)


def extract_merchant(
    text: str,
    extractors: tuple[MerchantExtractor, ...] = DEFAULT_MERCHANT_EXTRACTORS,
) -> str:
    """Run the extractor ladder and return the first hit."""
    for extractor in extractors:
        merchant = extractor.try_extract(text)
        if merchant is not None:
            return merchant
    return FALLBACK_MERCHANT
